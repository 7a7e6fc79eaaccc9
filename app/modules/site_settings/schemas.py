from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal, Union
from datetime import datetime

Theme = Literal["light", "dark", "system"]

SECTIONS = ["hero", "about", "projects", "skills", "experiences", "contact"]

DEFAULT_SETTINGS = {
    "maintenance_mode": False,
    "maintenance_message": "The site is under maintenance. Please check back soon.",
    "visible_sections": SECTIONS,
    "featured_sections": ["projects", "skills", "experiences"],
    "show_footer": True,
    "show_navigation": True,
    "enable_animations": True,
    "contact_form_enabled": True,
    "show_social_links": True,
    "show_resume_button": True,
    "show_analytics": True,
    "hero_headline": None,
    "hero_subheadline": None,
    "default_theme": "system",
    "accent_color": "#3b82f6",
}

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class SiteSettingsUpdate(BaseModel):
    maintenance_mode: Optional[bool] = None
    maintenance_message: Optional[str] = None
    visible_sections: Optional[List[str]] = None
    featured_sections: Optional[List[str]] = None
    show_footer: Optional[bool] = None
    show_navigation: Optional[bool] = None
    enable_animations: Optional[bool] = None
    contact_form_enabled: Optional[bool] = None
    show_social_links: Optional[bool] = None
    show_resume_button: Optional[bool] = None
    show_analytics: Optional[bool] = None
    hero_headline: Optional[str] = None
    hero_subheadline: Optional[str] = None
    default_theme: Optional[Theme] = None
    accent_color: Optional[str] = Field(default=None, pattern=HEX_COLOR)

    @field_validator("hero_headline", "hero_subheadline")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v if v and v.strip() else None


class SiteSettingsResponse(BaseModel):
    id: Optional[Union[str, int]] = None
    maintenance_mode: bool
    maintenance_message: Optional[str] = None
    visible_sections: List[str]
    featured_sections: List[str]
    show_footer: bool
    show_navigation: bool
    enable_animations: bool
    contact_form_enabled: bool
    show_social_links: bool
    show_resume_button: bool
    show_analytics: bool
    hero_headline: Optional[str] = None
    hero_subheadline: Optional[str] = None
    default_theme: str
    accent_color: str
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
