"""
Pydantic models for settings endpoints.
"""

from typing import Dict, List, Literal

from pydantic import BaseModel, Field

from catalog_backend.schemas.records import Settings


class SettingsListResponse(BaseModel):
    """
    Response model for listing settings.

    `values` repeats the same data as a key -> value mapping for clients
    that only need lookups.
    """
    settings: List[Settings] = Field(..., description="Settings ordered by key")
    values: Dict[str, str] = Field(..., description="Settings as a key -> value mapping")
    count: int = Field(..., description="Number of settings returned")


class SettingUpsertRequest(BaseModel):
    """Request model for storing a setting value."""
    value: str = Field(..., description="Opaque setting payload")


class SettingUpsertResponse(BaseModel):
    """Response for a successful setting upsert."""
    status: Literal["SAVED"] = Field(..., description="Status indicator")
    setting: Settings = Field(..., description="Stored setting")
