"""
Tests for the settings service.
"""

import pytest
from unittest.mock import MagicMock

from catalog_backend.exceptions import DuplicateRecordError, RecordValidationError
from catalog_backend.schemas.records import Settings
from catalog_backend.services.settings_service import (
    get_all_settings,
    get_setting,
    get_settings_map,
    upsert_setting,
)


def _mock_listing(supabase_client, rows):
    query = supabase_client.table.return_value.select.return_value
    query.order.return_value.execute.return_value = MagicMock(data=rows)
    return query


class TestGetAllSettings:
    """Tests for get_all_settings and get_settings_map."""

    @pytest.mark.asyncio
    async def test_returns_settings_ordered_by_key(self, supabase_client, settings_rows):
        query = _mock_listing(supabase_client, settings_rows)

        settings = await get_all_settings(supabase_client)

        supabase_client.table.assert_called_once_with("settings")
        query.order.assert_called_once_with("key")
        assert settings == [
            Settings(key="contact_email", value="hello@example.com"),
            Settings(key="site_title", value="My App"),
        ]

    @pytest.mark.asyncio
    async def test_settings_map(self, supabase_client, settings_rows):
        _mock_listing(supabase_client, settings_rows)

        assert await get_settings_map(supabase_client) == {
            "contact_email": "hello@example.com",
            "site_title": "My App",
        }

    @pytest.mark.asyncio
    async def test_duplicate_keys_are_rejected(self, supabase_client):
        _mock_listing(
            supabase_client,
            [{"key": "site_title", "value": "A"}, {"key": "site_title", "value": "B"}],
        )

        with pytest.raises(DuplicateRecordError):
            await get_settings_map(supabase_client)

    @pytest.mark.asyncio
    async def test_none_data_is_treated_as_empty(self, supabase_client):
        _mock_listing(supabase_client, None)

        assert await get_all_settings(supabase_client) == []


class TestGetSetting:
    """Tests for get_setting."""

    @pytest.mark.asyncio
    async def test_found(self, supabase_client):
        query = supabase_client.table.return_value.select.return_value
        query.eq.return_value.execute.return_value = MagicMock(
            data=[{"key": "site_title", "value": "My App"}]
        )

        setting = await get_setting(supabase_client, "site_title")

        query.eq.assert_called_once_with("key", "site_title")
        assert setting == Settings(key="site_title", value="My App")

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self, supabase_client):
        query = supabase_client.table.return_value.select.return_value
        query.eq.return_value.execute.return_value = MagicMock(data=[])

        assert await get_setting(supabase_client, "missing") is None


class TestUpsertSetting:
    """Tests for upsert_setting."""

    @pytest.mark.asyncio
    async def test_upserts_on_key(self, supabase_client):
        table = supabase_client.table.return_value
        table.upsert.return_value.execute.return_value = MagicMock(
            data=[{"key": "site_title", "value": "New Title"}]
        )

        stored = await upsert_setting(supabase_client, "site_title", "New Title")

        table.upsert.assert_called_once_with(
            {"key": "site_title", "value": "New Title"}, on_conflict="key"
        )
        assert stored.value == "New Title"

    @pytest.mark.asyncio
    async def test_empty_key_never_reaches_backend(self, supabase_client):
        with pytest.raises(RecordValidationError):
            await upsert_setting(supabase_client, "", "value")

        supabase_client.table.assert_not_called()


class TestSettingLookupIntegrity:
    """Single-row lookups still enforce unique keys."""

    @pytest.mark.asyncio
    async def test_duplicate_rows_for_one_key_are_rejected(self, supabase_client):
        query = supabase_client.table.return_value.select.return_value
        query.eq.return_value.execute.return_value = MagicMock(
            data=[{"key": "k", "value": "A"}, {"key": "k", "value": "B"}]
        )

        with pytest.raises(DuplicateRecordError):
            await get_setting(supabase_client, "k")
