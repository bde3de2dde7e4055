"""
Category persistence service.

Reads and writes rows of the `categories` table through the shared Supabase
client. Every row is decoded into a Category before it is returned, and
listings with duplicate ids are rejected (DuplicateRecordError).
"""

import logging
from typing import List, Optional

from supabase import Client

from catalog_backend.db.records import decode_categories, decode_category, encode_category
from catalog_backend.schemas.records import Category

logger = logging.getLogger(__name__)

CATEGORY_TABLE = "categories"


async def get_all_categories(supabase_client: Client) -> List[Category]:
    """
    Fetch every category, ordered by sort_order then name.

    Args:
        supabase_client: Shared Supabase client

    Returns:
        Validated Category records in display order

    Raises:
        RecordValidationError: If the backend returns a malformed row
        DuplicateRecordError: If two rows share an id
    """
    logger.debug("Fetching all categories")

    result = (
        supabase_client.table(CATEGORY_TABLE)
        .select("*")
        .order("sort_order")
        .order("name")
        .execute()
    )

    categories = decode_categories(result.data or [])

    logger.info(f"Fetched {len(categories)} categories")

    return categories


async def get_categories_for_age(supabase_client: Client, age: int) -> List[Category]:
    """
    Fetch the categories open to someone of the given age (min_age <= age).

    Raises:
        ValueError: If age is negative
    """
    if age < 0:
        raise ValueError(f"age must be non-negative, got {age}")

    logger.debug(f"Fetching categories for age {age}")

    result = (
        supabase_client.table(CATEGORY_TABLE)
        .select("*")
        .lte("min_age", age)
        .order("sort_order")
        .order("name")
        .execute()
    )

    categories = decode_categories(result.data or [])

    logger.info(f"Fetched {len(categories)} categories for age {age}")

    return categories


async def get_category_by_id(supabase_client: Client, category_id: str) -> Optional[Category]:
    """
    Fetch a single category.

    Returns:
        The Category, or None if no row has this id

    Raises:
        DuplicateRecordError: If more than one row has this id
    """
    logger.debug(f"Fetching category {category_id}")

    result = (
        supabase_client.table(CATEGORY_TABLE)
        .select("*")
        .eq("id", category_id)
        .execute()
    )

    if not result.data:
        logger.warning(f"Category {category_id} not found")
        return None

    return decode_categories(result.data)[0]


async def upsert_category(supabase_client: Client, category: Category) -> Category:
    """
    Insert a category, or replace the existing row with the same id.

    Returns:
        The stored Category as returned by the backend

    Raises:
        Exception: If the backend returns no row
    """
    logger.info(
        f"Upserting category {category.id}: name={category.name}, "
        f"min_age={category.min_age}, sort_order={category.sort_order}"
    )

    result = (
        supabase_client.table(CATEGORY_TABLE)
        .upsert(encode_category(category), on_conflict="id")
        .execute()
    )

    if not result.data:
        raise Exception(f"Failed to upsert category {category.id}: no data returned")

    return decode_category(result.data[0])


async def delete_category(supabase_client: Client, category_id: str) -> bool:
    """
    Delete a category.

    Returns:
        True if a row was deleted, False if none matched
    """
    logger.info(f"Deleting category {category_id}")

    result = (
        supabase_client.table(CATEGORY_TABLE)
        .delete()
        .eq("id", category_id)
        .execute()
    )

    deleted = bool(result.data)
    if not deleted:
        logger.warning(f"Category {category_id} not found for deletion")

    return deleted
