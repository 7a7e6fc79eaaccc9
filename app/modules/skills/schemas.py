from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Union
from datetime import datetime

from app.core.utils import reject_null


class SkillCreate(BaseModel):
    name: str = Field(min_length=1)
    level: int = Field(ge=0, le=100)
    category: str = Field(min_length=1)
    icon_name: Optional[str] = None
    sort_order: int = 0
    is_featured: bool = False


class SkillUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    level: Optional[int] = Field(default=None, ge=0, le=100)
    category: Optional[str] = Field(default=None, min_length=1)
    icon_name: Optional[str] = None
    sort_order: Optional[int] = None
    is_featured: Optional[bool] = None

    @field_validator("name", "level", "category", "sort_order", "is_featured", mode="before")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class SkillsReplace(BaseModel):
    skills: List[SkillCreate]


class SkillResponse(BaseModel):
    id: Union[str, int]
    name: str
    level: int
    category: Optional[str] = None
    icon_name: Optional[str] = None
    sort_order: Optional[int] = 0
    is_featured: Optional[bool] = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
