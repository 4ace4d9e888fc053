"""Article endpoints — create, edit, list, details, publication."""

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from myblog.application.schemas import (
    ArticleCreate,
    ArticlePublish,
    ArticleResponse,
    ArticleUpdate,
)
from myblog.application.services import ArticleService
from myblog.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from myblog.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    exclude_archived: bool = Query(False, description="Hide archived articles"),
    category_id: str | None = Query(None, description="Filter by category ID"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve a paginated list of articles, newest first."""
    articles = await service.list_articles(
        skip=skip,
        limit=limit,
        exclude_archived=exclude_archived,
        category_id=category_id,
    )
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/by-slug/{slug}", response_model=ArticleResponse)
async def get_article_by_slug(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by its URL slug."""
    try:
        article = await service.get_article_by_slug(slug)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    try:
        article = await service.create_article(data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Replace an article's editable state, including its archival flag."""
    try:
        article = await service.update_article(article_id, data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("/{article_id}/publish", response_model=ArticleResponse)
async def publish_article(
    article_id: str,
    data: ArticlePublish | None = Body(None),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Mark an article as published."""
    published_on = data.published_on if data else None
    try:
        article = await service.publish_article(article_id, published_on)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("/{article_id}/unpublish", response_model=ArticleResponse)
async def unpublish_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Withdraw a published article."""
    try:
        article = await service.unpublish_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)
