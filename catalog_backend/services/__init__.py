"""
Service layer for the catalog backend.

Services take the shared Supabase client as their first argument, run the
query and return validated records. Routes never touch raw rows.
"""

from .category_service import (
    delete_category,
    get_all_categories,
    get_categories_for_age,
    get_category_by_id,
    upsert_category,
)
from .settings_service import (
    get_all_settings,
    get_setting,
    get_settings_map,
    upsert_setting,
)

__all__ = [
    "get_all_categories",
    "get_categories_for_age",
    "get_category_by_id",
    "upsert_category",
    "delete_category",
    "get_all_settings",
    "get_setting",
    "get_settings_map",
    "upsert_setting",
]
