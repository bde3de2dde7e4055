"""
Pydantic models for category endpoints.

Responses embed the Category record directly; the id of an upserted
category comes from the URL path, not the body.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from catalog_backend.schemas.records import Category


class CategoryListResponse(BaseModel):
    """Response model for listing categories, in display order."""
    categories: List[Category] = Field(..., description="Categories ordered by sort_order")
    count: int = Field(..., description="Number of categories returned")
    max_age: Optional[int] = Field(None, description="Age filter applied, if any")


class CategoryUpsertRequest(BaseModel):
    """Request model for creating or replacing a category."""
    name: str = Field(..., min_length=1, max_length=100, description="Category display name")
    min_age: int = Field(..., ge=0, description="Minimum age for this category")
    sort_order: int = Field(0, description="Display-ordering key")


class CategoryUpsertResponse(BaseModel):
    """Response for a successful category upsert."""
    status: Literal["SAVED"] = Field(..., description="Status indicator")
    category: Category = Field(..., description="Stored category")


class CategoryDeleteResponse(BaseModel):
    """Response for a successful category deletion."""
    status: Literal["DELETED"] = Field(..., description="Status indicator")
    category_id: str = Field(..., description="Deleted category id")
