from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from app.database.supabase_client import get_admin_supabase
from app.modules.admin.schemas import DashboardResponse
from app.modules.admin.service import DashboardService
from app.modules.projects.schemas import ProjectCreate, ProjectUpdate, ProjectResponse
from app.modules.projects.routes import get_admin_project_service
from app.modules.projects.service import ProjectService
from app.modules.skills.schemas import SkillCreate, SkillUpdate, SkillResponse
from app.modules.skills.routes import get_admin_skill_service
from app.modules.skills.service import SkillService
from app.modules.experiences.schemas import ExperienceCreate, ExperienceUpdate, ExperienceResponse
from app.modules.experiences.routes import get_admin_experience_service
from app.modules.experiences.service import ExperienceService
from app.modules.contact.schemas import ContactMessageResponse, MessageStatus
from app.modules.contact.routes import get_admin_contact_service
from app.modules.contact.service import ContactService
from app.modules.personal_info.schemas import PersonalInfoUpdate, PersonalInfoResponse
from app.modules.personal_info.routes import get_admin_personal_info_service
from app.modules.personal_info.service import PersonalInfoService
from app.modules.hero.schemas import HeroUpdate, HeroResponse
from app.modules.hero.routes import get_admin_hero_service
from app.modules.hero.service import HeroService
from app.modules.site_settings.schemas import SiteSettingsUpdate, SiteSettingsResponse
from app.modules.site_settings.routes import get_admin_site_settings_service
from app.modules.site_settings.service import SiteSettingsService
from app.modules.uploads.schemas import ResumeUploadResponse
from app.modules.uploads.routes import get_upload_service
from app.modules.uploads.service import UploadService
from app.core.dependencies import require_admin
from supabase import Client
from typing import List, Literal, Optional

# Every route here requires the admin token; login lives in the auth module
router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def get_dashboard_service(supabase: Client = Depends(get_admin_supabase)) -> DashboardService:
    return DashboardService(supabase)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """Counts, recent messages and last 30 days of analytics"""
    return service.get_dashboard()


# Projects

@router.get("/projects", response_model=List[ProjectResponse])
async def list_projects(service: ProjectService = Depends(get_admin_project_service)):
    return service.list_projects()


@router.post("/projects", response_model=ProjectResponse, status_code=201)
async def create_project(
    project_data: ProjectCreate,
    service: ProjectService = Depends(get_admin_project_service)
):
    return service.create_project(project_data)


@router.put("/projects/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    service: ProjectService = Depends(get_admin_project_service)
):
    return service.update_project(project_id, project_data)


@router.delete("/projects/{project_id}")
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_admin_project_service)
):
    service.delete_project(project_id)
    return {"message": "Project deleted successfully"}


# Skills

@router.get("/skills", response_model=List[SkillResponse])
async def list_skills(service: SkillService = Depends(get_admin_skill_service)):
    return service.list_skills()


@router.post("/skills", response_model=SkillResponse, status_code=201)
async def create_skill(
    skill_data: SkillCreate,
    service: SkillService = Depends(get_admin_skill_service)
):
    return service.create_skill(skill_data)


@router.put("/skills/{skill_id}", response_model=SkillResponse)
async def update_skill(
    skill_id: str,
    skill_data: SkillUpdate,
    service: SkillService = Depends(get_admin_skill_service)
):
    return service.update_skill(skill_id, skill_data)


@router.delete("/skills/{skill_id}")
async def delete_skill(
    skill_id: str,
    service: SkillService = Depends(get_admin_skill_service)
):
    service.delete_skill(skill_id)
    return {"message": "Skill deleted successfully"}


# Experiences

@router.get("/experiences", response_model=List[ExperienceResponse])
async def list_experiences(service: ExperienceService = Depends(get_admin_experience_service)):
    return service.list_experiences()


@router.post("/experiences", response_model=ExperienceResponse, status_code=201)
async def create_experience(
    experience_data: ExperienceCreate,
    service: ExperienceService = Depends(get_admin_experience_service)
):
    return service.create_experience(experience_data)


@router.put("/experiences/{experience_id}", response_model=ExperienceResponse)
async def update_experience(
    experience_id: str,
    experience_data: ExperienceUpdate,
    service: ExperienceService = Depends(get_admin_experience_service)
):
    return service.update_experience(experience_id, experience_data)


@router.delete("/experiences/{experience_id}")
async def delete_experience(
    experience_id: str,
    service: ExperienceService = Depends(get_admin_experience_service)
):
    service.delete_experience(experience_id)
    return {"message": "Experience deleted successfully"}


# Messages

@router.get("/messages", response_model=List[ContactMessageResponse])
async def list_messages(
    status: Optional[MessageStatus] = None,
    service: ContactService = Depends(get_admin_contact_service)
):
    return service.list_messages(status=status)


@router.put("/messages/{message_id}/read", response_model=ContactMessageResponse)
async def mark_message_read(
    message_id: str,
    service: ContactService = Depends(get_admin_contact_service)
):
    return service.mark_read(message_id)


# Singletons

@router.get("/personal-info", response_model=PersonalInfoResponse)
async def get_personal_info(service: PersonalInfoService = Depends(get_admin_personal_info_service)):
    return service.get_personal_info()


@router.put("/personal-info", response_model=PersonalInfoResponse)
async def update_personal_info(
    info_data: PersonalInfoUpdate,
    service: PersonalInfoService = Depends(get_admin_personal_info_service)
):
    return service.update_personal_info(info_data)


@router.get("/hero", response_model=HeroResponse)
async def get_hero(service: HeroService = Depends(get_admin_hero_service)):
    return service.get_hero()


@router.put("/hero", response_model=HeroResponse)
async def update_hero(
    hero_data: HeroUpdate,
    service: HeroService = Depends(get_admin_hero_service)
):
    return service.update_hero(hero_data)


@router.get("/settings", response_model=SiteSettingsResponse)
async def get_settings(service: SiteSettingsService = Depends(get_admin_site_settings_service)):
    return service.get_settings()


@router.put("/settings", response_model=SiteSettingsResponse)
async def update_settings(
    settings_data: SiteSettingsUpdate,
    service: SiteSettingsService = Depends(get_admin_site_settings_service)
):
    return service.update_settings(settings_data)


# Files

@router.post("/upload/resume", response_model=ResumeUploadResponse)
async def upload_resume(
    resume: Optional[UploadFile] = File(None),
    attach: bool = Form(True),
    uploads: UploadService = Depends(get_upload_service),
    personal_info: PersonalInfoService = Depends(get_admin_personal_info_service)
):
    """Upload a resume PDF; with attach, also point personal_info.resume_url at it"""
    if resume is None:
        raise HTTPException(status_code=400, detail="No PDF file provided")
    uploaded = await uploads.upload_resume(resume)
    if attach:
        personal_info.set_resume_url(uploaded.url)
    return uploaded


@router.delete("/upload/file/{public_id:path}")
async def delete_file(
    public_id: str,
    resource_type: Literal["image", "raw"] = Query("image"),
    uploads: UploadService = Depends(get_upload_service)
):
    return uploads.delete_file(public_id, resource_type=resource_type)
