import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from supabase import Client
from app.modules.analytics.schemas import AnalyticsSummary, AnalyticsEventResponse, PAGE_VIEW
from typing import Any, Dict, List, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)

TABLE = "analytics"


def page_key(page) -> str:
    return "null" if page is None else str(page)


class AnalyticsService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def record(
        self,
        event_type: str,
        page: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        referrer: Optional[str] = None,
        metadata: Any = None,
    ) -> None:
        """Insert one analytics row"""
        row = {
            "event_type": event_type,
            "page": page,
            "ip_address": ip_address,
            "user_agent": user_agent,
            "metadata": {} if metadata is None else metadata,
        }
        if referrer is not None:
            row["referrer"] = referrer
        try:
            self.supabase.table(TABLE).insert(row).execute()
        except Exception as e:
            logger.error(f"Error tracking {event_type}: {e}")
            detail = "Failed to track page view" if event_type == PAGE_VIEW else "Failed to track event"
            raise HTTPException(status_code=500, detail=detail)

    def summary(self, days: int = 30) -> AnalyticsSummary:
        """Page view and event counts over the last `days` days"""
        since = (datetime.now(timezone.utc) - timedelta(days=days)).isoformat()
        try:
            page_views = self.supabase.table(TABLE)\
                .select("page")\
                .eq("event_type", PAGE_VIEW)\
                .gte("created_at", since)\
                .execute()
            events = self.supabase.table(TABLE)\
                .select("event_type, page")\
                .neq("event_type", PAGE_VIEW)\
                .gte("created_at", since)\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching analytics summary: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch analytics summary")

        views = page_views.data or []
        others = events.data or []
        return AnalyticsSummary(
            totalPageViews=len(views),
            totalEvents=len(others),
            pageViewsByPage=dict(Counter(page_key(v.get("page")) for v in views)),
            eventsByType=dict(Counter(e["event_type"] for e in others)),
            period=f"{days} days",
        )

    def detailed(
        self,
        page: Optional[str] = None,
        event_type: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[AnalyticsEventResponse]:
        """Raw rows, newest first"""
        try:
            query = self.supabase.table(TABLE).select("*")
            if page:
                query = query.eq("page", page)
            if event_type:
                query = query.eq("event_type", event_type)
            result = query.order("created_at", desc=True)\
                .range(offset, offset + limit - 1)\
                .execute()
            return [AnalyticsEventResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching detailed analytics: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch detailed analytics")

    def recent(self, days: int = 30) -> List[Dict[str, Any]]:
        since = (datetime.now(timezone.utc) - timedelta(days=days)).isoformat()
        result = self.supabase.table(TABLE)\
            .select("*")\
            .gte("created_at", since)\
            .order("created_at", desc=True)\
            .execute()
        return result.data or []
