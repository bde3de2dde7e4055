"""
Category API endpoints.

Endpoints:
- GET /categories - List categories in display order (optionally by age)
- GET /categories/{category_id} - Get single category
- PUT /categories/{category_id} - Create or replace a category
- DELETE /categories/{category_id} - Delete a category

Write access is decided by Row Level Security on the backend; a write the
policies reject is reported as 403.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from postgrest.exceptions import APIError
from supabase import Client

from catalog_backend.exceptions import RecordValidationError
from catalog_backend.routes.dependencies import get_supabase_client, write_failure
from catalog_backend.schemas.categories import (
    CategoryDeleteResponse,
    CategoryListResponse,
    CategoryUpsertRequest,
    CategoryUpsertResponse,
)
from catalog_backend.schemas.records import Category
from catalog_backend.services.category_service import (
    delete_category,
    get_all_categories,
    get_categories_for_age,
    get_category_by_id,
    upsert_category,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])

SupabaseClient = Annotated[Client, Depends(get_supabase_client)]


def _bad_backend_data(e: RecordValidationError) -> HTTPException:
    logger.error(f"Backend returned invalid category data: {e}")
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={"error": "invalid_backend_data", "details": str(e)}
    )


def _backend_failure(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": "database_error", "details": f"Failed to {action}"}
    )


def _not_found(category_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"error": "not_found", "details": f"Category {category_id} not found"}
    )


@router.get(
    "",
    response_model=CategoryListResponse,
    status_code=status.HTTP_200_OK,
    summary="List categories",
)
async def list_categories(
    supabase_client: SupabaseClient,
    max_age: Optional[int] = Query(
        None, ge=0, description="Only return categories with min_age <= max_age"
    ),
) -> CategoryListResponse:
    """List categories ordered by sort_order, optionally filtered by age."""
    logger.info(f"Listing categories (max_age={max_age})")

    try:
        if max_age is None:
            categories = await get_all_categories(supabase_client)
        else:
            categories = await get_categories_for_age(supabase_client, max_age)
    except RecordValidationError as e:
        raise _bad_backend_data(e)
    except Exception as e:
        raise _backend_failure("retrieve categories", e)

    return CategoryListResponse(
        categories=categories,
        count=len(categories),
        max_age=max_age
    )


@router.get(
    "/{category_id}",
    response_model=Category,
    status_code=status.HTTP_200_OK,
    summary="Get a category",
)
async def get_category(category_id: str, supabase_client: SupabaseClient) -> Category:
    """Get a single category by id."""
    try:
        category = await get_category_by_id(supabase_client, category_id)
    except RecordValidationError as e:
        raise _bad_backend_data(e)
    except Exception as e:
        raise _backend_failure("retrieve category", e)

    if category is None:
        raise _not_found(category_id)

    return category


@router.put(
    "/{category_id}",
    response_model=CategoryUpsertResponse,
    status_code=status.HTTP_200_OK,
    summary="Create or replace a category",
)
async def put_category(
    category_id: str,
    request: CategoryUpsertRequest,
    supabase_client: SupabaseClient,
) -> CategoryUpsertResponse:
    """Create the category, or replace the existing one with this id."""
    category = Category(
        id=category_id,
        name=request.name,
        min_age=request.min_age,
        sort_order=request.sort_order,
    )

    try:
        stored = await upsert_category(supabase_client, category)
    except RecordValidationError as e:
        raise _bad_backend_data(e)
    except APIError as e:
        raise write_failure("save category", e)
    except Exception as e:
        raise _backend_failure("save category", e)

    logger.info(f"Category {stored.id} saved")

    return CategoryUpsertResponse(status="SAVED", category=stored)


@router.delete(
    "/{category_id}",
    response_model=CategoryDeleteResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete a category",
)
async def remove_category(category_id: str, supabase_client: SupabaseClient) -> CategoryDeleteResponse:
    """Delete a category by id."""
    try:
        deleted = await delete_category(supabase_client, category_id)
    except APIError as e:
        raise write_failure("delete category", e)
    except Exception as e:
        raise _backend_failure("delete category", e)

    if not deleted:
        raise _not_found(category_id)

    return CategoryDeleteResponse(status="DELETED", category_id=category_id)
