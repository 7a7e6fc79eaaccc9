from pydantic import BaseModel
from typing import List, Dict, Any

from app.modules.contact.schemas import ContactMessageResponse


class DashboardStats(BaseModel):
    projects: int = 0
    skills: int = 0
    messages: int = 0
    pageViews: int = 0


class DashboardResponse(BaseModel):
    stats: DashboardStats
    recentMessages: List[ContactMessageResponse] = []
    recentViews: List[Dict[str, Any]] = []
