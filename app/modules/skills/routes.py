from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.skills.schemas import SkillCreate, SkillUpdate, SkillResponse
from app.modules.skills.service import SkillService
from app.core.dependencies import require_admin
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/skills", tags=["skills"])


def get_skill_service(supabase: Client = Depends(get_supabase)) -> SkillService:
    return SkillService(supabase)


def get_admin_skill_service(supabase: Client = Depends(get_admin_supabase)) -> SkillService:
    return SkillService(supabase)


@router.get("", response_model=List[SkillResponse])
async def list_skills(
    category: Optional[str] = None,
    service: SkillService = Depends(get_skill_service)
):
    """List skills in display order"""
    return service.list_skills(category=category)


@router.post("", response_model=SkillResponse, status_code=201)
async def create_skill(
    skill_data: SkillCreate,
    admin: Dict = Depends(require_admin),
    service: SkillService = Depends(get_admin_skill_service)
):
    return service.create_skill(skill_data)


@router.put("/{skill_id}", response_model=SkillResponse)
async def update_skill(
    skill_id: str,
    skill_data: SkillUpdate,
    admin: Dict = Depends(require_admin),
    service: SkillService = Depends(get_admin_skill_service)
):
    return service.update_skill(skill_id, skill_data)


@router.delete("/{skill_id}")
async def delete_skill(
    skill_id: str,
    admin: Dict = Depends(require_admin),
    service: SkillService = Depends(get_admin_skill_service)
):
    service.delete_skill(skill_id)
    return {"message": "Skill deleted successfully"}
