"""SQLAlchemy repository tests against an in-memory SQLite database."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from myblog.domain.entities import Article, Category
from myblog.domain.exceptions import DuplicateEntityError
from myblog.infrastructure.database import Base
from myblog.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCategoryRepository,
)


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as s:
        yield s
    await engine.dispose()


def make_article(category: Category, title: str, slug: str) -> Article:
    return Article(
        title=title,
        introduction="",
        content="content",
        cover_image_url=None,
        slug=slug,
        author_id="auth0|author",
        category_id=category.id,
    )


@pytest.mark.asyncio
async def test_category_round_trip(session: AsyncSession):
    repo = SQLAlchemyCategoryRepository(session)
    created = await repo.create(Category("News"))

    fetched = await repo.get_by_id(created.id)

    assert fetched is not None
    assert fetched.category_name == "News"
    assert fetched.is_archived is False
    assert fetched.modified_on is None
    assert await repo.count() == 1
    assert await repo.get_by_id("missing") is None


@pytest.mark.asyncio
async def test_category_update_and_archived_filter(session: AsyncSession):
    repo = SQLAlchemyCategoryRepository(session)
    news = await repo.create(Category("News"))
    await repo.create(Category("Archive Me"))

    news.update("News - edited", True)
    await repo.update(news)

    names = [c.category_name for c in await repo.get_all()]
    active = [c.category_name for c in await repo.get_all(exclude_archived=True)]
    stored = await repo.get_by_id(news.id)

    assert names == ["Archive Me", "News - edited"]
    assert active == ["Archive Me"]
    assert stored.is_archived is True
    assert stored.modified_on is not None


@pytest.mark.asyncio
async def test_article_create_get_and_slug_lookup(session: AsyncSession):
    category = await SQLAlchemyCategoryRepository(session).create(Category("News"))
    repo = SQLAlchemyArticleRepository(session)

    created = await repo.create(make_article(category, "Hello", "hello"))

    by_id = await repo.get_by_id(created.id)
    by_slug = await repo.get_by_slug("hello")

    assert by_id is not None and by_id.title == "Hello"
    assert by_slug is not None and by_slug.id == created.id
    assert await repo.get_by_slug("missing") is None


@pytest.mark.asyncio
async def test_article_update_persists_all_fields(session: AsyncSession):
    category = await SQLAlchemyCategoryRepository(session).create(Category("News"))
    other = await SQLAlchemyCategoryRepository(session).create(Category("Other"))
    repo = SQLAlchemyArticleRepository(session)
    article = await repo.create(make_article(category, "Hello", "hello"))

    article.update(
        title="Hello again",
        introduction="intro",
        content="new content",
        cover_image_url="https://example.com/c.png",
        slug="hello_again",
        category_id=other.id,
        is_archived=True,
    )
    await repo.update(article)
    stored = await repo.get_by_id(article.id)

    assert stored.title == "Hello again"
    assert stored.slug == "hello_again"
    assert stored.category_id == other.id
    assert stored.cover_image_url == "https://example.com/c.png"
    assert stored.is_archived is True
    assert stored.modified_on is not None


@pytest.mark.asyncio
async def test_article_list_filters(session: AsyncSession):
    categories = SQLAlchemyCategoryRepository(session)
    news = await categories.create(Category("News"))
    tips = await categories.create(Category("Tips"))
    repo = SQLAlchemyArticleRepository(session)

    first = await repo.create(make_article(news, "One", "one"))
    await repo.create(make_article(tips, "Two", "two"))
    archived = await repo.create(make_article(news, "Three", "three"))
    archived.update(
        title=archived.title,
        introduction=archived.introduction,
        content=archived.content,
        cover_image_url=None,
        slug=archived.slug,
        category_id=archived.category_id,
        is_archived=True,
    )
    await repo.update(archived)

    assert len(await repo.get_all()) == 3
    assert len(await repo.get_all(exclude_archived=True)) == 2
    news_active = await repo.get_all(exclude_archived=True, category_id=news.id)
    assert [a.id for a in news_active] == [first.id]
    assert len(await repo.get_all(limit=1)) == 1


@pytest.mark.asyncio
async def test_update_unknown_article_raises(session: AsyncSession):
    category = Category("News")
    with pytest.raises(ValueError):
        await SQLAlchemyArticleRepository(session).update(make_article(category, "Ghost", "ghost"))


@pytest.mark.asyncio
async def test_create_with_taken_slug_raises_duplicate(session: AsyncSession):
    category = await SQLAlchemyCategoryRepository(session).create(Category("News"))
    repo = SQLAlchemyArticleRepository(session)
    await repo.create(make_article(category, "Hello", "hello"))

    with pytest.raises(DuplicateEntityError) as exc_info:
        await repo.create(make_article(category, "Hello twice", "hello"))
    assert exc_info.value.value == "hello"


@pytest.mark.asyncio
async def test_update_to_taken_slug_raises_duplicate(session: AsyncSession):
    category = await SQLAlchemyCategoryRepository(session).create(Category("News"))
    repo = SQLAlchemyArticleRepository(session)
    await repo.create(make_article(category, "One", "one"))
    second = await repo.create(make_article(category, "Two", "two"))

    second.slug = "one"
    with pytest.raises(DuplicateEntityError):
        await repo.update(second)
