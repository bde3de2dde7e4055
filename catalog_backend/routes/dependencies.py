"""
FastAPI dependencies and error helpers shared by the routers.
"""

import logging

from fastapi import HTTPException, Request, status
from postgrest.exceptions import APIError
from supabase import Client

logger = logging.getLogger(__name__)

# Postgres error code raised when RLS policies reject a write
INSUFFICIENT_PRIVILEGE = "42501"


def get_supabase_client(request: Request) -> Client:
    """
    Return the Supabase client owned by the running application.

    create_app() stores exactly one client on app.state; every request
    handled by that app receives the same instance.
    """
    return request.app.state.supabase_client


def write_failure(action: str, e: APIError) -> HTTPException:
    """Map a PostgREST error raised by a write to an HTTP error."""
    if e.code == INSUFFICIENT_PRIVILEGE:
        logger.warning(f"Row Level Security rejected attempt to {action}")
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "forbidden", "details": f"Not allowed to {action}"}
        )

    logger.error(f"Database error trying to {action}: {e}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": "database_error", "details": f"Failed to {action}"}
    )
