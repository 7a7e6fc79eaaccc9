from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, Union
from datetime import datetime

PAGE_VIEW = "page_view"


class PageViewCreate(BaseModel):
    page: Optional[str] = None
    referrer: Optional[str] = None
    user_agent: Optional[str] = None


class EventCreate(BaseModel):
    event_type: str = Field(min_length=1)
    page: Optional[str] = None
    metadata: Any = None


class TrackRequest(BaseModel):
    """Shape posted by the site's fire-and-forget tracker"""
    event_type: str = Field(min_length=1)
    event_data: Dict[str, Any] = {}


class TrackedResponse(BaseModel):
    message: str


class AnalyticsSummary(BaseModel):
    totalPageViews: int
    totalEvents: int
    pageViewsByPage: Dict[str, int]
    eventsByType: Dict[str, int]
    period: str


class AnalyticsEventResponse(BaseModel):
    id: Union[str, int]
    event_type: str
    page: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    referrer: Optional[str] = None
    metadata: Any = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
