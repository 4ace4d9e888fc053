"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    introduction: str = Field("", max_length=500)
    content: str = Field(..., min_length=1, examples=["This is the body of the article."])
    cover_image_url: str | None = Field(None, max_length=2048)
    slug: str | None = Field(
        None,
        max_length=255,
        description="Derived from the title when omitted",
    )
    author_id: str = Field(..., min_length=1, max_length=255)
    category_id: str = Field(..., min_length=1, max_length=36)


class ArticleUpdate(BaseModel):
    """Schema for updating an article — callers send the complete new state."""

    title: str = Field(..., min_length=1, max_length=255)
    introduction: str = Field("", max_length=500)
    content: str = Field(..., min_length=1)
    cover_image_url: str | None = Field(None, max_length=2048)
    slug: str | None = Field(None, max_length=255, description="Current slug is kept when omitted")
    category_id: str = Field(..., min_length=1, max_length=36)
    is_archived: bool
    is_published: bool | None = None
    published_on: datetime | None = None


class ArticlePublish(BaseModel):
    """Optional body for the publish action."""

    published_on: datetime | None = None


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    introduction: str
    content: str
    cover_image_url: str | None
    slug: str
    author_id: str
    category_id: str
    is_published: bool
    published_on: datetime | None
    is_archived: bool
    created_on: datetime
    modified_on: datetime | None

    model_config = {"from_attributes": True}
