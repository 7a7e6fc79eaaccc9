import logging
from supabase import Client
from app.modules.experiences.schemas import ExperienceCreate, ExperienceUpdate, ExperienceResponse
from app.core.utils import utc_now_iso
from typing import List, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)

TABLE = "experiences"


class ExperienceService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_experiences(self, experience_type: Optional[str] = None) -> List[ExperienceResponse]:
        """List experiences, most recent start date first"""
        try:
            query = self.supabase.table(TABLE).select("*")
            if experience_type:
                query = query.eq("type", experience_type)
            result = query.order("start_date", desc=True).execute()
            return [ExperienceResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching experiences: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch experiences")

    def create_experience(self, experience_data: ExperienceCreate) -> ExperienceResponse:
        try:
            result = self.supabase.table(TABLE)\
                .insert(experience_data.model_dump(exclude_none=True))\
                .execute()
        except Exception as e:
            logger.error(f"Error creating experience: {e}")
            raise HTTPException(status_code=500, detail="Failed to create experience")

        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to create experience")
        return ExperienceResponse(**result.data[0])

    def update_experience(self, experience_id: str, experience_data: ExperienceUpdate) -> ExperienceResponse:
        update_data = experience_data.model_dump(exclude_unset=True)
        update_data["updated_at"] = utc_now_iso()
        try:
            result = self.supabase.table(TABLE)\
                .update(update_data)\
                .eq("id", experience_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating experience {experience_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to update experience")

        if not result.data:
            raise HTTPException(status_code=404, detail="Experience not found")
        return ExperienceResponse(**result.data[0])

    def delete_experience(self, experience_id: str) -> None:
        try:
            result = self.supabase.table(TABLE)\
                .delete()\
                .eq("id", experience_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting experience {experience_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete experience")

        if not result.data:
            raise HTTPException(status_code=404, detail="Experience not found")
