"""
Record shapes exchanged with the Supabase backend.

Rows live in the `categories` and `settings` tables. These models only
describe their shape; construct them through catalog_backend.db.records so
backend responses are validated before use.
"""

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    """
    A grouping entity shown to users.

    Fields:
        id: Unique identifier of the category
        name: Display label
        min_age: Minimum age associated with this category (>= 0)
        sort_order: Display-ordering key (not contiguous, not unique)
    """
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Category identifier")
    name: str = Field(..., min_length=1, max_length=100, description="Category display name")
    min_age: int = Field(..., ge=0, description="Minimum age for this category")
    sort_order: int = Field(..., description="Display-ordering key")


class Settings(BaseModel):
    """A single key/value configuration pair. `value` is opaque to this package."""
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    key: str = Field(..., min_length=1, description="Setting key")
    value: str = Field(..., description="Setting payload")
