"""Category endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from myblog.application.schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from myblog.application.services import CategoryService
from myblog.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from myblog.infrastructure.dependencies import get_category_service

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    exclude_archived: bool = Query(False, description="Hide archived categories"),
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    categories = await service.list_categories(exclude_archived=exclude_archived)
    return [CategoryResponse.model_validate(c, from_attributes=True) for c in categories]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    try:
        category = await service.get_category(category_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CategoryResponse.model_validate(category, from_attributes=True)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    try:
        category = await service.create_category(data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return CategoryResponse.model_validate(category, from_attributes=True)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Rename a category and set its archival flag. Articles are not cascaded."""
    try:
        category = await service.update_category(category_id, data)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CategoryResponse.model_validate(category, from_attributes=True)
