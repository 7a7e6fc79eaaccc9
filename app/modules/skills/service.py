import logging
from supabase import Client
from app.modules.skills.schemas import SkillCreate, SkillUpdate, SkillResponse
from app.core.utils import utc_now_iso
from typing import List, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)

TABLE = "skills"

# PostgREST refuses an unfiltered delete; no row carries the nil uuid
NIL_UUID = "00000000-0000-0000-0000-000000000000"


class SkillService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_skills(self, category: Optional[str] = None) -> List[SkillResponse]:
        """List skills in display order"""
        try:
            query = self.supabase.table(TABLE).select("*")
            if category:
                query = query.eq("category", category)
            result = query.order("sort_order").execute()
            return [SkillResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching skills: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch skills")

    def create_skill(self, skill_data: SkillCreate) -> SkillResponse:
        try:
            result = self.supabase.table(TABLE).insert(skill_data.model_dump()).execute()
        except Exception as e:
            logger.error(f"Error creating skill: {e}")
            raise HTTPException(status_code=500, detail="Failed to create skill")

        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to create skill")
        return SkillResponse(**result.data[0])

    def update_skill(self, skill_id: str, skill_data: SkillUpdate) -> SkillResponse:
        update_data = skill_data.model_dump(exclude_unset=True)
        update_data["updated_at"] = utc_now_iso()
        try:
            result = self.supabase.table(TABLE)\
                .update(update_data)\
                .eq("id", skill_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating skill {skill_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to update skill")

        if not result.data:
            raise HTTPException(status_code=404, detail="Skill not found")
        return SkillResponse(**result.data[0])

    def delete_skill(self, skill_id: str) -> None:
        try:
            result = self.supabase.table(TABLE)\
                .delete()\
                .eq("id", skill_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting skill {skill_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete skill")

        if not result.data:
            raise HTTPException(status_code=404, detail="Skill not found")

    def replace_all(self, skills: List[SkillCreate]) -> List[SkillResponse]:
        """Replace every skill with the given list; list position becomes sort_order"""
        rows = []
        for index, skill in enumerate(skills):
            row = skill.model_dump()
            row["sort_order"] = index
            rows.append(row)

        try:
            self.supabase.table(TABLE).delete().neq("id", NIL_UUID).execute()
            if not rows:
                return []
            result = self.supabase.table(TABLE).insert(rows).execute()
        except Exception as e:
            logger.error(f"Error replacing skills: {e}")
            raise HTTPException(status_code=500, detail="Failed to update skills")

        logger.info("Replaced skills with %d entries", len(rows))
        return [SkillResponse(**row) for row in result.data or []]
