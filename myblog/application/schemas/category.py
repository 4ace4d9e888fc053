"""Pydantic DTOs for the Category feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    category_name: str = Field(..., min_length=1, max_length=80, examples=["News"])


class CategoryUpdate(BaseModel):
    category_name: str = Field(..., min_length=1, max_length=80)
    is_archived: bool


class CategoryResponse(BaseModel):
    id: str
    category_name: str
    is_archived: bool
    created_on: datetime
    modified_on: datetime | None

    model_config = {"from_attributes": True}
