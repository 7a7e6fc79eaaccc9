from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.projects.schemas import ProjectCreate, ProjectUpdate, ProjectResponse
from app.modules.projects.service import ProjectService
from app.core.dependencies import require_admin
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/projects", tags=["projects"])


def get_project_service(supabase: Client = Depends(get_supabase)) -> ProjectService:
    return ProjectService(supabase)


def get_admin_project_service(supabase: Client = Depends(get_admin_supabase)) -> ProjectService:
    return ProjectService(supabase)


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    service: ProjectService = Depends(get_project_service)
):
    """List all projects"""
    return service.list_projects(category=category, featured=featured)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service)
):
    """Get project by ID"""
    return service.get_project_by_id(project_id)


@router.post("", response_model=ProjectResponse, status_code=201)
async def create_project(
    project_data: ProjectCreate,
    admin: Dict = Depends(require_admin),
    service: ProjectService = Depends(get_admin_project_service)
):
    """Create a project (admin)"""
    return service.create_project(project_data)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    admin: Dict = Depends(require_admin),
    service: ProjectService = Depends(get_admin_project_service)
):
    """Update a project (admin)"""
    return service.update_project(project_id, project_data)


@router.delete("/{project_id}")
async def delete_project(
    project_id: str,
    admin: Dict = Depends(require_admin),
    service: ProjectService = Depends(get_admin_project_service)
):
    """Delete a project (admin)"""
    service.delete_project(project_id)
    return {"message": "Project deleted successfully"}
