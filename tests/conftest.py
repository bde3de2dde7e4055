"""
Pytest configuration for catalog backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_PUBLISHABLE_KEY", "test-publishable-key")

from catalog_backend.config import AppSettings  # noqa: E402
from catalog_backend.main import create_app  # noqa: E402


@pytest.fixture
def supabase_client():
    """
    Mock Supabase client.
    Returns a MagicMock that simulates Supabase query builder chains.
    """
    return MagicMock()


@pytest.fixture
def app(supabase_client):
    """FastAPI app wired to the mock Supabase client."""
    return create_app(settings=AppSettings(), supabase_client=supabase_client)


@pytest.fixture
def client(app):
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def category_rows():
    """Rows as returned by the `categories` table."""
    return [
        {"id": "c1", "name": "Toddlers", "min_age": 1, "sort_order": 10},
        {"id": "c2", "name": "Kids", "min_age": 5, "sort_order": 20},
        {"id": "c3", "name": "Teens", "min_age": 13, "sort_order": 30},
    ]


@pytest.fixture
def settings_rows():
    """Rows as returned by the `settings` table."""
    return [
        {"key": "contact_email", "value": "hello@example.com"},
        {"key": "site_title", "value": "My App"},
    ]
