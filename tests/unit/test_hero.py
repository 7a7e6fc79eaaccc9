"""
Tests for the homepage hero section.
"""

import pytest
from pydantic import ValidationError

from app.modules.hero.schemas import HeroUpdate, DEFAULT_HERO
from app.modules.hero.service import sanitize_hero


class TestHeroSchemas:

    def test_typing_texts_deduped(self):
        hero = HeroUpdate(typing_texts=["Developer", " Developer ", "", "Writer"])
        assert hero.typing_texts == ["Developer", "Writer"]

    def test_blank_quote_becomes_none(self):
        assert HeroUpdate(quote="   ").quote is None

    def test_empty_social_links_dropped(self):
        hero = HeroUpdate(social_links={"github": " https://github.com/jane ", "twitter": ""})
        assert hero.social_links == {"github": "https://github.com/jane"}

    def test_name_length(self):
        with pytest.raises(ValidationError):
            HeroUpdate(name="x" * 101)

    def test_quote_length(self):
        with pytest.raises(ValidationError):
            HeroUpdate(quote="x" * 201)


class TestSanitizeHero:

    def test_fills_missing_values(self):
        hero = sanitize_hero({"id": "1", "name": "", "typing_texts": "not a list", "social_links": None})
        assert hero.name == DEFAULT_HERO["name"]
        assert hero.typing_texts == DEFAULT_HERO["typing_texts"]
        assert hero.social_links == {}
        assert hero.greeting == DEFAULT_HERO["greeting"]

    def test_keeps_stored_values(self):
        hero = sanitize_hero({"id": "1", "name": "Jane", "typing_texts": ["Dev"], "quote": "Ship it"})
        assert (hero.name, hero.typing_texts, hero.quote) == ("Jane", ["Dev"], "Ship it")


class TestHeroRoutes:

    def test_defaults_when_empty(self, client):
        body = client.get("/api/hero").json()
        assert body["name"] == DEFAULT_HERO["name"]
        assert body["typing_texts"] == DEFAULT_HERO["typing_texts"]

    def test_update_creates_row(self, client, fake_db, admin_headers):
        response = client.put(
            "/api/hero",
            json={"name": "Jane Doe", "typing_texts": ["Engineer", "Engineer"]},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["typing_texts"] == ["Engineer"]
        assert fake_db.rows("hero")[0]["name"] == "Jane Doe"
        assert client.get("/api/hero").json()["name"] == "Jane Doe"

    def test_update_name_too_long(self, client, admin_headers):
        response = client.put("/api/hero", json={"name": "x" * 101}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_requires_admin(self, client):
        assert client.put("/api/hero", json={"name": "Jane"}).status_code == 401
