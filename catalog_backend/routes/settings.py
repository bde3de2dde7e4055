"""
Settings API endpoints.

Endpoints:
- GET /settings - List all settings (as records and as a key -> value map)
- GET /settings/{key} - Get one setting
- PUT /settings/{key} - Store a value under key

Keys may contain "/"; the path converter passes the rest of the URL as the key.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from postgrest.exceptions import APIError
from supabase import Client

from catalog_backend.exceptions import RecordValidationError
from catalog_backend.routes.dependencies import get_supabase_client, write_failure
from catalog_backend.schemas.records import Settings
from catalog_backend.schemas.settings import (
    SettingsListResponse,
    SettingUpsertRequest,
    SettingUpsertResponse,
)
from catalog_backend.services.settings_service import (
    get_all_settings,
    get_setting,
    upsert_setting,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])

SupabaseClient = Annotated[Client, Depends(get_supabase_client)]


@router.get(
    "",
    response_model=SettingsListResponse,
    status_code=status.HTTP_200_OK,
    summary="List settings",
)
async def list_settings(supabase_client: SupabaseClient) -> SettingsListResponse:
    """List all settings ordered by key."""
    try:
        settings = await get_all_settings(supabase_client)
    except RecordValidationError as e:
        logger.error(f"Backend returned invalid settings data: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": "invalid_backend_data", "details": str(e)}
        )
    except Exception as e:
        logger.error(f"Failed to fetch settings: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "database_error", "details": "Failed to retrieve settings"}
        )

    return SettingsListResponse(
        settings=settings,
        values={setting.key: setting.value for setting in settings},
        count=len(settings)
    )


@router.get(
    "/{key:path}",
    response_model=Settings,
    status_code=status.HTTP_200_OK,
    summary="Get a setting",
)
async def read_setting(key: str, supabase_client: SupabaseClient) -> Settings:
    """Get a single setting by key."""
    try:
        setting = await get_setting(supabase_client, key)
    except RecordValidationError as e:
        logger.error(f"Backend returned invalid setting {key}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": "invalid_backend_data", "details": str(e)}
        )
    except Exception as e:
        logger.error(f"Failed to fetch setting {key}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "database_error", "details": "Failed to retrieve setting"}
        )

    if setting is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": f"Setting {key} not found"}
        )

    return setting


@router.put(
    "/{key:path}",
    response_model=SettingUpsertResponse,
    status_code=status.HTTP_200_OK,
    summary="Store a setting",
)
async def put_setting(
    key: str,
    request: SettingUpsertRequest,
    supabase_client: SupabaseClient,
) -> SettingUpsertResponse:
    """Store request.value under key, replacing any existing value."""
    if not key:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "validation_error", "details": "Setting key must not be empty"}
        )

    try:
        stored = await upsert_setting(supabase_client, key, request.value)
    except RecordValidationError as e:
        logger.error(f"Backend returned invalid setting {key}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": "invalid_backend_data", "details": str(e)}
        )
    except APIError as e:
        raise write_failure("save setting", e)
    except Exception as e:
        logger.error(f"Failed to save setting {key}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "database_error", "details": "Failed to save setting"}
        )

    return SettingUpsertResponse(status="SAVED", setting=stored)
