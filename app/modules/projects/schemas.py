from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal, Union
from datetime import datetime

from app.core.utils import split_csv, reject_null

ProjectStatus = Literal["completed", "in-progress", "planning"]


class ProjectBase(BaseModel):
    image_url: Optional[str] = None
    category: Optional[str] = None
    demo_url: Optional[str] = None
    github_url: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class ProjectCreate(ProjectBase):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    technologies: List[str] = []
    featured: bool = False
    status: ProjectStatus = "completed"
    sort_order: int = 0

    @field_validator("technologies", mode="before")
    @classmethod
    def _technologies(cls, v: Union[str, List[str], None]) -> List[str]:
        return split_csv(v)


class ProjectUpdate(ProjectBase):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    technologies: Optional[List[str]] = None
    featured: Optional[bool] = None
    status: Optional[ProjectStatus] = None
    sort_order: Optional[int] = None

    @field_validator("title", "description", "featured", "status", "sort_order", mode="before")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)

    @field_validator("technologies", mode="before")
    @classmethod
    def _technologies(cls, v: Union[str, List[str], None]) -> Optional[List[str]]:
        if v is None:
            return None
        return split_csv(v)


class ProjectResponse(ProjectBase):
    id: Union[str, int]
    title: str
    description: str
    technologies: List[str] = []
    featured: Optional[bool] = False
    status: Optional[str] = None
    sort_order: Optional[int] = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("technologies", mode="before")
    @classmethod
    def _technologies(cls, v):
        return split_csv(v)

    class Config:
        from_attributes = True
