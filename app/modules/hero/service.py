import logging
from supabase import Client
from app.database.singleton import SingletonTable
from app.modules.hero.schemas import HeroUpdate, HeroResponse, DEFAULT_HERO
from app.core.utils import utc_now_iso
from typing import Any, Dict
from fastapi import HTTPException

logger = logging.getLogger(__name__)


def sanitize_hero(row: Dict[str, Any]) -> HeroResponse:
    """Fill gaps in a stored hero row with the defaults the homepage expects"""
    data = dict(row)
    if not data.get("name"):
        data["name"] = DEFAULT_HERO["name"]
    if not isinstance(data.get("typing_texts"), list):
        data["typing_texts"] = DEFAULT_HERO["typing_texts"]
    if not isinstance(data.get("social_links"), dict):
        data["social_links"] = {}
    if data.get("greeting") is None:
        data["greeting"] = DEFAULT_HERO["greeting"]
    if data.get("quote") is None:
        data["quote"] = DEFAULT_HERO["quote"]
    return HeroResponse(**data)


class HeroService:
    def __init__(self, supabase: Client):
        self.table = SingletonTable(supabase, "hero")

    def get_hero(self) -> HeroResponse:
        try:
            row = self.table.get()
        except Exception as e:
            logger.error(f"Error fetching hero data: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch hero data")

        if not row:
            logger.debug("No hero row, serving defaults")
            return HeroResponse(**DEFAULT_HERO)
        return sanitize_hero(row)

    def update_hero(self, hero_data: HeroUpdate) -> HeroResponse:
        update_data = hero_data.model_dump(exclude_unset=True)
        update_data["updated_at"] = utc_now_iso()
        try:
            row = self.table.upsert(update_data)
        except Exception as e:
            logger.error(f"Error updating hero data: {e}")
            raise HTTPException(status_code=500, detail="Failed to update hero data")

        if not row:
            raise HTTPException(status_code=500, detail="Failed to update hero data")
        return sanitize_hero(row)
