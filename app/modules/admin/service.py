import logging
from supabase import Client
from app.modules.admin.schemas import DashboardStats, DashboardResponse
from app.modules.analytics.service import AnalyticsService
from app.modules.contact.service import ContactService
from fastapi import HTTPException

logger = logging.getLogger(__name__)

RECENT_MESSAGES = 5
RECENT_VIEW_DAYS = 30


class DashboardService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def count_rows(self, table: str) -> int:
        result = self.supabase.table(table).select("id", count="exact").execute()
        return result.count or 0

    def get_dashboard(self) -> DashboardResponse:
        """Row counts plus the latest messages and a month of analytics"""
        try:
            stats = DashboardStats(
                projects=self.count_rows("projects"),
                skills=self.count_rows("skills"),
                messages=self.count_rows("contact_messages"),
                pageViews=self.count_rows("analytics"),
            )
            recent_views = AnalyticsService(self.supabase).recent(RECENT_VIEW_DAYS)
        except Exception as e:
            logger.error(f"Dashboard stats error: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch dashboard data")

        recent_messages = ContactService(self.supabase).list_messages(limit=RECENT_MESSAGES)
        return DashboardResponse(
            stats=stats,
            recentMessages=recent_messages,
            recentViews=recent_views,
        )
