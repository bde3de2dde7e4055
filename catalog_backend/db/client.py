"""
Supabase client factory.

The client is built once by whoever wires the application together (see
catalog_backend.main.create_app) and passed to every consumer. There is no
module-level client: a misconfigured environment fails at the call site that
builds it, not at import time.

The publishable key is a non-secret credential. Row Level Security on the
backend decides what it may read or write.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

from supabase import Client, create_client

from catalog_backend.config import AppSettings
from catalog_backend.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _require(name: str, value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise ConfigurationError(f"{name} is required and must not be empty")
    return value.strip()


def _check_endpoint_url(endpoint_url: str) -> None:
    parsed = urlparse(endpoint_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(
            f"endpoint_url must be an http(s) URL with a host, got {endpoint_url!r}"
        )


def create_supabase_client(endpoint_url: Optional[str], publishable_key: Optional[str]) -> Client:
    """
    Create the Supabase client used by the rest of the application.

    Args:
        endpoint_url: Project URL, e.g. https://<project-id>.supabase.co
        publishable_key: Publishable (client-safe) API key for the project.

    Returns:
        The Supabase client, unwrapped. Its table/auth/storage APIs are used
        directly by the services.

    Raises:
        ConfigurationError: If either value is missing, empty or malformed,
            or if the Supabase library rejects them.

    Example:
        >>> client = create_supabase_client(
        ...     "https://abc.supabase.co", "sb_publishable_..."
        ... )
        >>> client.table("categories").select("*").execute()
    """
    endpoint_url = _require("endpoint_url", endpoint_url)
    publishable_key = _require("publishable_key", publishable_key)
    _check_endpoint_url(endpoint_url)

    try:
        client: Client = create_client(
            supabase_url=endpoint_url,
            supabase_key=publishable_key,
        )
    except Exception as e:
        raise ConfigurationError(f"Supabase client rejected configuration: {e}") from e

    logger.info(f"Created Supabase client for {urlparse(endpoint_url).netloc}")

    return client


def create_client_from_settings(settings: AppSettings) -> Client:
    """
    Validate the application settings and build the client from them.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_PUBLISHABLE_KEY is
            missing or malformed.
    """
    settings.validate()
    return create_supabase_client(
        settings.SUPABASE_URL,
        settings.SUPABASE_PUBLISHABLE_KEY,
    )
