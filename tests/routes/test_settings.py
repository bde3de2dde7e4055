"""
Tests for settings endpoints.
"""

from unittest.mock import MagicMock, patch

from catalog_backend.exceptions import RecordValidationError
from catalog_backend.schemas.records import Settings


class TestListSettings:
    """Tests for GET /settings."""

    def test_list(self, client, settings_rows):
        with patch("catalog_backend.routes.settings.get_all_settings") as mock_get:
            mock_get.return_value = [Settings(**row) for row in settings_rows]

            response = client.get("/settings")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert data["values"] == {"contact_email": "hello@example.com", "site_title": "My App"}
        assert data["settings"][1] == {"key": "site_title", "value": "My App"}

    def test_invalid_backend_data_returns_502(self, client):
        with patch("catalog_backend.routes.settings.get_all_settings") as mock_get:
            mock_get.side_effect = RecordValidationError("Settings", "value: Input should be a valid string")

            response = client.get("/settings")

        assert response.status_code == 502


class TestReadSetting:
    """Tests for GET /settings/{key}."""

    def test_found(self, client):
        with patch("catalog_backend.routes.settings.get_setting") as mock_get:
            mock_get.return_value = Settings(key="site_title", value="My App")

            response = client.get("/settings/site_title")

        assert response.status_code == 200
        assert response.json() == {"key": "site_title", "value": "My App"}

    def test_not_found(self, client):
        with patch("catalog_backend.routes.settings.get_setting") as mock_get:
            mock_get.return_value = None

            response = client.get("/settings/missing")

        assert response.status_code == 404


class TestPutSetting:
    """Tests for PUT /settings/{key}."""

    def test_upsert(self, client, supabase_client):
        with patch("catalog_backend.routes.settings.upsert_setting") as mock_upsert:
            mock_upsert.return_value = Settings(key="site_title", value="New Title")

            response = client.put("/settings/site_title", json={"value": "New Title"})

        assert response.status_code == 200
        assert response.json()["setting"] == {"key": "site_title", "value": "New Title"}
        mock_upsert.assert_called_once_with(supabase_client, "site_title", "New Title")

    def test_missing_value_is_rejected(self, client):
        response = client.put("/settings/site_title", json={})

        assert response.status_code == 422

    def test_backend_error_returns_500(self, client):
        with patch("catalog_backend.routes.settings.upsert_setting") as mock_upsert:
            mock_upsert.side_effect = Exception("timeout")

            response = client.put("/settings/site_title", json={"value": "x"})

        assert response.status_code == 500


class TestSettingKeysAndBackendRows:
    """Keys containing "/" and malformed rows returned by writes."""

    def test_key_with_slash_is_passed_through(self, client, supabase_client):
        with patch("catalog_backend.routes.settings.get_setting") as mock_get:
            mock_get.return_value = Settings(key="theme/colors", value="dark")

            response = client.get("/settings/theme/colors")

        assert response.status_code == 200
        assert response.json() == {"key": "theme/colors", "value": "dark"}
        mock_get.assert_called_once_with(supabase_client, "theme/colors")

    def test_put_key_with_slash(self, client, supabase_client):
        with patch("catalog_backend.routes.settings.upsert_setting") as mock_upsert:
            mock_upsert.return_value = Settings(key="theme/colors", value="light")

            response = client.put("/settings/theme/colors", json={"value": "light"})

        assert response.status_code == 200
        mock_upsert.assert_called_once_with(supabase_client, "theme/colors", "light")

    def test_empty_key_is_rejected(self, client, supabase_client):
        response = client.put("/settings/", json={"value": "x"})

        assert response.status_code == 422
        supabase_client.table.assert_not_called()

    def test_malformed_stored_row_returns_502(self, client, supabase_client):
        table = supabase_client.table.return_value
        table.upsert.return_value.execute.return_value = MagicMock(
            data=[{"key": "site_title", "value": 5}]
        )

        response = client.put("/settings/site_title", json={"value": "My App"})

        assert response.status_code == 502
        assert response.json()["detail"]["error"] == "invalid_backend_data"
