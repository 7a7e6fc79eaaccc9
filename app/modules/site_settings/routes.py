from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.site_settings.schemas import SiteSettingsUpdate, SiteSettingsResponse
from app.modules.site_settings.service import SiteSettingsService
from app.core.dependencies import require_admin
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/settings", tags=["settings"])


def get_site_settings_service(supabase: Client = Depends(get_supabase)) -> SiteSettingsService:
    return SiteSettingsService(supabase)


def get_admin_site_settings_service(supabase: Client = Depends(get_admin_supabase)) -> SiteSettingsService:
    return SiteSettingsService(supabase)


@router.get("", response_model=SiteSettingsResponse)
async def get_settings(service: SiteSettingsService = Depends(get_site_settings_service)):
    """Section visibility, theme and feature flags for the site"""
    return service.get_settings()


@router.put("", response_model=SiteSettingsResponse)
async def update_settings(
    settings_data: SiteSettingsUpdate,
    admin: Dict = Depends(require_admin),
    service: SiteSettingsService = Depends(get_admin_site_settings_service)
):
    return service.update_settings(settings_data)
