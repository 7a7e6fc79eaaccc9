import logging
from supabase import Client
from app.database.singleton import SingletonTable
from app.modules.site_settings.schemas import SiteSettingsUpdate, SiteSettingsResponse, DEFAULT_SETTINGS
from app.core.utils import utc_now_iso
from typing import Any, Dict, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)


def merge_with_defaults(row: Optional[Dict[str, Any]]) -> SiteSettingsResponse:
    """Stored values win; columns that are missing or null take the default"""
    data = dict(DEFAULT_SETTINGS)
    for key, value in (row or {}).items():
        if value is not None:
            data[key] = value
    return SiteSettingsResponse(**data)


class SiteSettingsService:
    def __init__(self, supabase: Client):
        self.table = SingletonTable(supabase, "settings")

    def get_settings(self) -> SiteSettingsResponse:
        try:
            row = self.table.get()
        except Exception as e:
            logger.error(f"Error fetching settings: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch settings")
        return merge_with_defaults(row)

    def update_settings(self, settings_data: SiteSettingsUpdate) -> SiteSettingsResponse:
        update_data = settings_data.model_dump(exclude_unset=True)
        update_data["updated_at"] = utc_now_iso()
        try:
            row = self.table.upsert(update_data)
        except Exception as e:
            logger.error(f"Error updating settings: {e}")
            raise HTTPException(status_code=500, detail="Failed to update settings")

        if not row:
            raise HTTPException(status_code=500, detail="Failed to update settings")
        logger.info("Site settings updated: %s", ", ".join(sorted(update_data)))
        return merge_with_defaults(row)

    def contact_form_enabled(self) -> bool:
        """Defaults to enabled when the settings row cannot be read"""
        try:
            return self.get_settings().contact_form_enabled
        except HTTPException:
            logger.warning("Could not read settings; accepting contact form submission")
            return True
