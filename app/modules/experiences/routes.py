from fastapi import APIRouter, Depends, Query
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.experiences.schemas import ExperienceCreate, ExperienceUpdate, ExperienceResponse
from app.modules.experiences.service import ExperienceService
from app.core.dependencies import require_admin
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/experiences", tags=["experiences"])


def get_experience_service(supabase: Client = Depends(get_supabase)) -> ExperienceService:
    return ExperienceService(supabase)


def get_admin_experience_service(supabase: Client = Depends(get_admin_supabase)) -> ExperienceService:
    return ExperienceService(supabase)


@router.get("", response_model=List[ExperienceResponse])
async def list_experiences(
    experience_type: Optional[str] = Query(None, alias="type"),
    service: ExperienceService = Depends(get_experience_service)
):
    """List work and education entries"""
    return service.list_experiences(experience_type)


@router.post("", response_model=ExperienceResponse, status_code=201)
async def create_experience(
    experience_data: ExperienceCreate,
    admin: Dict = Depends(require_admin),
    service: ExperienceService = Depends(get_admin_experience_service)
):
    return service.create_experience(experience_data)


@router.put("/{experience_id}", response_model=ExperienceResponse)
async def update_experience(
    experience_id: str,
    experience_data: ExperienceUpdate,
    admin: Dict = Depends(require_admin),
    service: ExperienceService = Depends(get_admin_experience_service)
):
    return service.update_experience(experience_id, experience_data)


@router.delete("/{experience_id}")
async def delete_experience(
    experience_id: str,
    admin: Dict = Depends(require_admin),
    service: ExperienceService = Depends(get_admin_experience_service)
):
    service.delete_experience(experience_id)
    return {"message": "Experience deleted successfully"}
