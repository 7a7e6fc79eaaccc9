import logging
from typing import Optional

from fastapi import HTTPException
from supabase import create_client, Client
from app.config import settings

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Process-wide Supabase clients, created on first use"""
    _anon: Optional[Client] = None
    _service: Optional[Client] = None

    @staticmethod
    def _connect(key: Optional[str]) -> Client:
        if not settings.supabase_url or not key:
            raise ValueError("SUPABASE_URL and a Supabase key must be configured")
        return create_client(settings.supabase_url, key)

    @classmethod
    def anon(cls) -> Client:
        """Public reads and form submissions; subject to row level security"""
        if cls._anon is None:
            cls._anon = cls._connect(settings.supabase_key)
        return cls._anon

    @classmethod
    def service(cls) -> Client:
        """Admin writes. Falls back to the anon client without a service role key."""
        if cls._service is None:
            if not settings.supabase_service_role_key:
                logger.warning("SUPABASE_SERVICE_ROLE_KEY not set; admin writes use the anon key")
                return cls.anon()
            cls._service = cls._connect(settings.supabase_service_role_key)
        return cls._service


def get_supabase() -> Client:
    try:
        return SupabaseClient.anon()
    except ValueError as e:
        logger.error(str(e))
        raise HTTPException(status_code=503, detail="Database is not configured")


def get_admin_supabase() -> Client:
    try:
        return SupabaseClient.service()
    except ValueError as e:
        logger.error(str(e))
        raise HTTPException(status_code=503, detail="Database is not configured")
