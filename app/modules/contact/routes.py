from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.contact.schemas import (
    ContactCreate, ContactCreatedResponse, ContactStatusUpdate, ContactMessageResponse, MessageStatus
)
from app.modules.contact.service import ContactService
from app.modules.contact.mailer import Mailer, get_mailer
from app.modules.site_settings.routes import get_site_settings_service
from app.modules.site_settings.service import SiteSettingsService
from app.core.dependencies import require_admin
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/contact", tags=["contact"])


def get_contact_service(supabase: Client = Depends(get_supabase)) -> ContactService:
    return ContactService(supabase)


def get_admin_contact_service(supabase: Client = Depends(get_admin_supabase)) -> ContactService:
    return ContactService(supabase)


@router.post("", response_model=ContactCreatedResponse, status_code=201)
async def submit_contact(
    contact: ContactCreate,
    background_tasks: BackgroundTasks,
    service: ContactService = Depends(get_contact_service),
    site_settings: SiteSettingsService = Depends(get_site_settings_service),
    mailer: Mailer = Depends(get_mailer)
):
    """Store a contact form message and notify the site owner by email"""
    if not site_settings.contact_form_enabled():
        raise HTTPException(status_code=503, detail="Contact form is disabled")
    saved = service.create_message(contact)
    background_tasks.add_task(mailer.notify_new_message, contact)
    return ContactCreatedResponse(id=saved.id)


@router.get("", response_model=List[ContactMessageResponse])
async def list_messages(
    status: Optional[MessageStatus] = None,
    admin: Dict = Depends(require_admin),
    service: ContactService = Depends(get_admin_contact_service)
):
    return service.list_messages(status=status)


@router.patch("/{message_id}/status", response_model=ContactMessageResponse)
async def update_message_status(
    message_id: str,
    status_data: ContactStatusUpdate,
    admin: Dict = Depends(require_admin),
    service: ContactService = Depends(get_admin_contact_service)
):
    return service.update_status(message_id, status_data.status)
