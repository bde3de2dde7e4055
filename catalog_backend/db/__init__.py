"""
Database access layer for the catalog backend.

Includes:
- Supabase client construction (no module-level client)
- Validation of backend rows into Category / Settings records
"""

from .client import create_client_from_settings, create_supabase_client
from .records import (
    decode_categories,
    decode_category,
    decode_settings,
    decode_settings_list,
    encode_category,
    encode_settings,
)

__all__ = [
    "create_supabase_client",
    "create_client_from_settings",
    "decode_category",
    "decode_categories",
    "decode_settings",
    "decode_settings_list",
    "encode_category",
    "encode_settings",
]
