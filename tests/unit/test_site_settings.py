"""
Tests for site-wide display settings.
"""

import pytest
from pydantic import ValidationError

from app.modules.site_settings.schemas import SiteSettingsUpdate, DEFAULT_SETTINGS
from app.modules.site_settings.service import merge_with_defaults


class TestSiteSettingsSchemas:

    @pytest.mark.parametrize("color", ["#fff", "#3B82F6"])
    def test_valid_accent_color(self, color):
        assert SiteSettingsUpdate(accent_color=color).accent_color == color

    @pytest.mark.parametrize("color", ["blue", "#12345", "3b82f6"])
    def test_invalid_accent_color(self, color):
        with pytest.raises(ValidationError):
            SiteSettingsUpdate(accent_color=color)

    def test_unknown_theme(self):
        with pytest.raises(ValidationError):
            SiteSettingsUpdate(default_theme="sepia")

    def test_blank_headline_becomes_none(self):
        assert SiteSettingsUpdate(hero_headline="  ").hero_headline is None


class TestMergeWithDefaults:

    def test_no_row(self):
        merged = merge_with_defaults(None)
        assert merged.accent_color == DEFAULT_SETTINGS["accent_color"]
        assert merged.contact_form_enabled is True

    def test_stored_values_win_over_defaults(self):
        merged = merge_with_defaults({"id": "1", "maintenance_mode": True, "accent_color": None})
        assert merged.maintenance_mode is True
        assert merged.accent_color == DEFAULT_SETTINGS["accent_color"]


class TestSiteSettingsRoutes:

    def test_get_defaults(self, client):
        body = client.get("/api/settings").json()
        assert body["visible_sections"] == DEFAULT_SETTINGS["visible_sections"]
        assert body["default_theme"] == "system"

    def test_update(self, client, fake_db, admin_headers):
        response = client.put(
            "/api/settings",
            json={"maintenance_mode": True, "default_theme": "dark"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["maintenance_mode"] is True
        assert fake_db.rows("settings")[0]["default_theme"] == "dark"

    def test_update_invalid_color(self, client, fake_db, admin_headers):
        response = client.put("/api/settings", json={"accent_color": "red"}, headers=admin_headers)
        assert response.status_code == 400
        assert fake_db.rows("settings") == []

    def test_update_requires_admin(self, client):
        assert client.put("/api/settings", json={"show_footer": False}).status_code == 401
