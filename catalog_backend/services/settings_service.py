"""
Settings persistence service.

Key/value pairs from the `settings` table. Values are opaque strings; the
consumer of a given key decides how to interpret it.
"""

import logging
from typing import Dict, List, Optional

from supabase import Client

from catalog_backend.db.records import decode_settings, decode_settings_list, encode_settings
from catalog_backend.schemas.records import Settings

logger = logging.getLogger(__name__)

SETTINGS_TABLE = "settings"


async def get_all_settings(supabase_client: Client) -> List[Settings]:
    """
    Fetch every setting, ordered by key.

    Raises:
        RecordValidationError: If the backend returns a malformed row
        DuplicateRecordError: If two rows share a key
    """
    logger.debug("Fetching all settings")

    result = (
        supabase_client.table(SETTINGS_TABLE)
        .select("*")
        .order("key")
        .execute()
    )

    settings = decode_settings_list(result.data or [])

    logger.info(f"Fetched {len(settings)} settings")

    return settings


async def get_settings_map(supabase_client: Client) -> Dict[str, str]:
    """Fetch every setting as a key -> value mapping."""
    settings = await get_all_settings(supabase_client)
    return {setting.key: setting.value for setting in settings}


async def get_setting(supabase_client: Client, key: str) -> Optional[Settings]:
    """
    Fetch a single setting.

    Returns:
        The Settings record, or None if the key is not present

    Raises:
        DuplicateRecordError: If more than one row has this key
    """
    logger.debug(f"Fetching setting {key}")

    result = (
        supabase_client.table(SETTINGS_TABLE)
        .select("*")
        .eq("key", key)
        .execute()
    )

    if not result.data:
        logger.warning(f"Setting {key} not found")
        return None

    return decode_settings_list(result.data)[0]


async def upsert_setting(supabase_client: Client, key: str, value: str) -> Settings:
    """
    Store a value under key, replacing any existing value.

    Raises:
        RecordValidationError: If key is empty
        Exception: If the backend returns no row
    """
    setting = decode_settings({"key": key, "value": value})

    # Values may be large or sensitive; log only the key
    logger.info(f"Upserting setting {key}")

    result = (
        supabase_client.table(SETTINGS_TABLE)
        .upsert(encode_settings(setting), on_conflict="key")
        .execute()
    )

    if not result.data:
        raise Exception(f"Failed to upsert setting {key}: no data returned")

    return decode_settings(result.data[0])
