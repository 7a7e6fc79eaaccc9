from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Union
from datetime import datetime

from app.core.utils import dedupe

DEFAULT_HERO = {
    "greeting": "Hello, I'm",
    "name": "Your Name",
    "typing_texts": ["Full Stack Developer", "Problem Solver"],
    "quote": "Building things for the web",
    "social_links": {},
}


class HeroUpdate(BaseModel):
    greeting: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    typing_texts: Optional[List[str]] = None
    quote: Optional[str] = Field(default=None, max_length=200)
    social_links: Optional[Dict[str, str]] = None

    @field_validator("typing_texts")
    @classmethod
    def _typing_texts(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return dedupe(v) if v is not None else None

    @field_validator("quote")
    @classmethod
    def _quote(cls, v: Optional[str]) -> Optional[str]:
        return v if v and v.strip() else None

    @field_validator("social_links")
    @classmethod
    def _social_links(cls, v: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if v is None:
            return None
        return {k: url.strip() for k, url in v.items() if url and url.strip()}


class HeroResponse(BaseModel):
    id: Optional[Union[str, int]] = None
    greeting: Optional[str] = DEFAULT_HERO["greeting"]
    name: str = DEFAULT_HERO["name"]
    typing_texts: List[str] = DEFAULT_HERO["typing_texts"]
    quote: Optional[str] = None
    social_links: Dict[str, str] = {}
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
