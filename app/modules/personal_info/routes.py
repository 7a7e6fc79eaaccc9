from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.personal_info.schemas import PersonalInfoUpdate, PersonalInfoResponse
from app.modules.personal_info.service import PersonalInfoService
from app.modules.skills.schemas import SkillResponse, SkillsReplace
from app.modules.skills.routes import get_skill_service, get_admin_skill_service
from app.modules.skills.service import SkillService
from app.modules.experiences.schemas import ExperienceCreate, ExperienceUpdate, ExperienceResponse
from app.modules.experiences.routes import get_experience_service, get_admin_experience_service
from app.modules.experiences.service import ExperienceService
from app.core.dependencies import require_admin
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/personal-info", tags=["personal-info"])


def get_personal_info_service(supabase: Client = Depends(get_supabase)) -> PersonalInfoService:
    return PersonalInfoService(supabase)


def get_admin_personal_info_service(supabase: Client = Depends(get_admin_supabase)) -> PersonalInfoService:
    return PersonalInfoService(supabase)


@router.get("", response_model=PersonalInfoResponse)
async def get_personal_info(service: PersonalInfoService = Depends(get_personal_info_service)):
    """Get the about/contact details shown on the site"""
    return service.get_personal_info()


@router.put("", response_model=PersonalInfoResponse)
async def update_personal_info(
    info_data: PersonalInfoUpdate,
    admin: Dict = Depends(require_admin),
    service: PersonalInfoService = Depends(get_admin_personal_info_service)
):
    return service.update_personal_info(info_data)


@router.get("/skills", response_model=List[SkillResponse])
async def list_skills(service: SkillService = Depends(get_skill_service)):
    return service.list_skills()


@router.put("/skills", response_model=List[SkillResponse])
async def replace_skills(
    payload: SkillsReplace,
    admin: Dict = Depends(require_admin),
    service: SkillService = Depends(get_admin_skill_service)
):
    """Replace the whole skill list; list order becomes display order"""
    return service.replace_all(payload.skills)


@router.get("/experiences", response_model=List[ExperienceResponse])
async def list_experiences(service: ExperienceService = Depends(get_experience_service)):
    return service.list_experiences()


@router.post("/experiences", response_model=ExperienceResponse, status_code=201)
async def create_experience(
    experience_data: ExperienceCreate,
    admin: Dict = Depends(require_admin),
    service: ExperienceService = Depends(get_admin_experience_service)
):
    return service.create_experience(experience_data)


@router.put("/experiences/{experience_id}", response_model=ExperienceResponse)
async def update_experience(
    experience_id: str,
    experience_data: ExperienceUpdate,
    admin: Dict = Depends(require_admin),
    service: ExperienceService = Depends(get_admin_experience_service)
):
    return service.update_experience(experience_id, experience_data)
