import logging
from supabase import Client
from app.modules.projects.schemas import ProjectCreate, ProjectUpdate, ProjectResponse
from app.core.utils import utc_now_iso
from typing import List, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)

TABLE = "projects"


class ProjectService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_projects(self, category: Optional[str] = None, featured: Optional[bool] = None) -> List[ProjectResponse]:
        """List projects by sort order, newest first within the same order"""
        try:
            query = self.supabase.table(TABLE).select("*")
            if category:
                query = query.eq("category", category)
            if featured is not None:
                query = query.eq("featured", featured)
            result = query.order("sort_order")\
                .order("created_at", desc=True)\
                .execute()
            return [ProjectResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching projects: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch projects")

    def get_project_by_id(self, project_id: str) -> ProjectResponse:
        """Get project by ID"""
        try:
            result = self.supabase.table(TABLE)\
                .select("*")\
                .eq("id", project_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching project {project_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch project")

        if not result.data:
            raise HTTPException(status_code=404, detail="Project not found")
        return ProjectResponse(**result.data[0])

    def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create a new project"""
        try:
            result = self.supabase.table(TABLE).insert(project_data.model_dump()).execute()
        except Exception as e:
            logger.error(f"Error creating project: {e}")
            raise HTTPException(status_code=500, detail="Failed to create project")

        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to create project")
        logger.info("Created project %s", result.data[0].get("id"))
        return ProjectResponse(**result.data[0])

    def update_project(self, project_id: str, project_data: ProjectUpdate) -> ProjectResponse:
        """Update only the fields the caller sent"""
        update_data = project_data.model_dump(exclude_unset=True)
        if not update_data:
            return self.get_project_by_id(project_id)
        update_data["updated_at"] = utc_now_iso()

        try:
            result = self.supabase.table(TABLE)\
                .update(update_data)\
                .eq("id", project_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating project {project_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to update project")

        if not result.data:
            raise HTTPException(status_code=404, detail="Project not found")
        return ProjectResponse(**result.data[0])

    def delete_project(self, project_id: str) -> None:
        try:
            result = self.supabase.table(TABLE)\
                .delete()\
                .eq("id", project_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting project {project_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete project")

        if not result.data:
            raise HTTPException(status_code=404, detail="Project not found")
