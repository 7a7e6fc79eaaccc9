import logging
from supabase import Client
from app.database.singleton import SingletonTable
from app.modules.personal_info.schemas import PersonalInfoUpdate, PersonalInfoResponse
from app.core.utils import utc_now_iso
from fastapi import HTTPException

logger = logging.getLogger(__name__)


class PersonalInfoService:
    def __init__(self, supabase: Client):
        self.table = SingletonTable(supabase, "personal_info")

    def get_personal_info(self) -> PersonalInfoResponse:
        try:
            row = self.table.get()
        except Exception as e:
            logger.error(f"Error fetching personal info: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch personal information")

        if not row:
            raise HTTPException(status_code=404, detail="Personal info not found")
        return PersonalInfoResponse(**row)

    def update_personal_info(self, info_data: PersonalInfoUpdate) -> PersonalInfoResponse:
        """Write the provided fields to the single row, creating it if needed"""
        update_data = info_data.model_dump(exclude_unset=True)
        update_data["updated_at"] = utc_now_iso()
        try:
            row = self.table.upsert(update_data)
        except Exception as e:
            logger.error(f"Error updating personal info: {e}")
            raise HTTPException(status_code=500, detail="Failed to update personal information")

        if not row:
            raise HTTPException(status_code=500, detail="Failed to update personal information")
        return PersonalInfoResponse(**row)

    def set_resume_url(self, resume_url: str) -> PersonalInfoResponse:
        return self.update_personal_info(PersonalInfoUpdate(resume_url=resume_url))
