"""
FastAPI application factory for the catalog backend.

create_app() is the single place where configuration is read and the
Supabase client is built. A missing or malformed SUPABASE_URL /
SUPABASE_PUBLISHABLE_KEY raises ConfigurationError here, before any request
is served.

Run with:
    uvicorn catalog_backend.main:create_app --factory
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from supabase import Client

from catalog_backend import __version__
from catalog_backend.config import AppSettings, get_settings
from catalog_backend.db.client import create_client_from_settings
from catalog_backend.routes.categories import router as categories_router
from catalog_backend.routes.health import router as health_router
from catalog_backend.routes.settings import router as settings_router
from catalog_backend.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _get_cors_origins(settings: AppSettings) -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: CORS_ALLOWED_ORIGINS (empty means no web origins)
    - anything else: all origins, for local development
    """
    if settings.is_production():
        if settings.CORS_ALLOWED_ORIGINS:
            logger.info(
                f"CORS configured for production with {len(settings.CORS_ALLOWED_ORIGINS)} allowed origins"
            )
            return settings.CORS_ALLOWED_ORIGINS
        logger.warning(
            "CORS_ALLOWED_ORIGINS not set in production. "
            "No web origins allowed. Set CORS_ALLOWED_ORIGINS for web clients."
        )
        return []

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log detailed validation errors before returning the 422."""
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": _jsonable_errors(exc),
        }
    )


def _jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may carry exception instances, which are not JSON serializable
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]


def create_app(
    settings: Optional[AppSettings] = None,
    supabase_client: Optional[Client] = None,
) -> FastAPI:
    """
    Build the FastAPI application and its Supabase client.

    Args:
        settings: Application settings; read from the environment if omitted.
        supabase_client: Pre-built client (tests inject a mock here). Built
            from settings if omitted.

    Returns:
        The configured FastAPI app. The client is stored on
        app.state.supabase_client and shared by every request.

    Raises:
        ConfigurationError: If the client has to be built and the Supabase
            settings are missing or malformed.
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings.LOG_LEVEL)

    if supabase_client is None:
        supabase_client = create_client_from_settings(settings)

    app = FastAPI(
        title="Catalog API",
        description="Categories and site settings backed by Supabase",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = settings
    app.state.supabase_client = supabase_client

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_get_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(categories_router)
    app.include_router(settings_router)

    logger.info("FastAPI app initialized successfully")

    return app
