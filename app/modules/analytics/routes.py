from fastapi import APIRouter, Depends, Query, Request
from app.database.supabase_client import get_supabase, get_admin_supabase
from app.modules.analytics.schemas import (
    PageViewCreate, EventCreate, TrackRequest, TrackedResponse,
    AnalyticsSummary, AnalyticsEventResponse, PAGE_VIEW
)
from app.modules.analytics.service import AnalyticsService
from app.core.dependencies import require_admin
from app.core.utils import client_ip
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/analytics", tags=["analytics"])


def get_analytics_service(supabase: Client = Depends(get_supabase)) -> AnalyticsService:
    return AnalyticsService(supabase)


def get_admin_analytics_service(supabase: Client = Depends(get_admin_supabase)) -> AnalyticsService:
    return AnalyticsService(supabase)


@router.post("/page-view", response_model=TrackedResponse, status_code=201)
async def track_page_view(
    view: PageViewCreate,
    request: Request,
    service: AnalyticsService = Depends(get_analytics_service)
):
    service.record(
        PAGE_VIEW,
        page=view.page,
        ip_address=client_ip(request),
        user_agent=view.user_agent,
        referrer=view.referrer,
    )
    return TrackedResponse(message="Page view tracked")


@router.post("/event", response_model=TrackedResponse, status_code=201)
async def track_event(
    event: EventCreate,
    request: Request,
    service: AnalyticsService = Depends(get_analytics_service)
):
    service.record(
        event.event_type,
        page=event.page,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent"),
        metadata=event.metadata,
    )
    return TrackedResponse(message="Event tracked")


@router.post("", response_model=TrackedResponse, status_code=201)
async def track(
    payload: TrackRequest,
    request: Request,
    service: AnalyticsService = Depends(get_analytics_service)
):
    """Generic tracker endpoint: event_data is stored as metadata"""
    page = payload.event_data.get("page")
    service.record(
        payload.event_type,
        page=str(page) if page is not None else None,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent"),
        referrer=payload.event_data.get("referrer"),
        metadata=payload.event_data,
    )
    return TrackedResponse(message="Event tracked")


@router.get("/summary", response_model=AnalyticsSummary)
async def get_summary(
    days: int = Query(30, ge=1, le=365),
    admin: Dict = Depends(require_admin),
    service: AnalyticsService = Depends(get_admin_analytics_service)
):
    return service.summary(days)


@router.get("/detailed", response_model=List[AnalyticsEventResponse])
async def get_detailed(
    page: Optional[str] = None,
    event_type: Optional[str] = None,
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    admin: Dict = Depends(require_admin),
    service: AnalyticsService = Depends(get_admin_analytics_service)
):
    return service.detailed(page=page, event_type=event_type, limit=limit, offset=offset)
