import logging
from supabase import Client
from app.modules.contact.schemas import ContactCreate, ContactMessageResponse
from app.core.utils import utc_now_iso
from typing import List, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)

TABLE = "contact_messages"


class ContactService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_message(self, contact: ContactCreate) -> ContactMessageResponse:
        """Store a contact form submission as unread"""
        row = contact.model_dump()
        row["email"] = str(contact.email)
        row["status"] = "unread"
        try:
            result = self.supabase.table(TABLE).insert(row).execute()
        except Exception as e:
            logger.error(f"Database error: {e}")
            raise HTTPException(status_code=500, detail="Failed to save message")

        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to save message")
        return ContactMessageResponse(**result.data[0])

    def list_messages(self, status: Optional[str] = None, limit: Optional[int] = None) -> List[ContactMessageResponse]:
        """Messages, newest first"""
        try:
            query = self.supabase.table(TABLE).select("*")
            if status:
                query = query.eq("status", status)
            query = query.order("created_at", desc=True)
            if limit:
                query = query.limit(limit)
            result = query.execute()
            return [ContactMessageResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching contact messages: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch messages")

    def update_status(self, message_id: str, status: str) -> ContactMessageResponse:
        try:
            result = self.supabase.table(TABLE)\
                .update({"status": status, "updated_at": utc_now_iso()})\
                .eq("id", message_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating message status: {e}")
            raise HTTPException(status_code=500, detail="Failed to update message status")

        if not result.data:
            raise HTTPException(status_code=404, detail="Message not found")
        return ContactMessageResponse(**result.data[0])

    def mark_read(self, message_id: str) -> ContactMessageResponse:
        return self.update_status(message_id, "read")
