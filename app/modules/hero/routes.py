from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.hero.schemas import HeroUpdate, HeroResponse
from app.modules.hero.service import HeroService
from app.core.dependencies import require_admin
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/hero", tags=["hero"])


def get_hero_service(supabase: Client = Depends(get_supabase)) -> HeroService:
    return HeroService(supabase)


def get_admin_hero_service(supabase: Client = Depends(get_admin_supabase)) -> HeroService:
    return HeroService(supabase)


@router.get("", response_model=HeroResponse)
async def get_hero(service: HeroService = Depends(get_hero_service)):
    """Homepage hero content, falling back to defaults"""
    return service.get_hero()


@router.put("", response_model=HeroResponse)
async def update_hero(
    hero_data: HeroUpdate,
    admin: Dict = Depends(require_admin),
    service: HeroService = Depends(get_admin_hero_service)
):
    return service.update_hero(hero_data)
