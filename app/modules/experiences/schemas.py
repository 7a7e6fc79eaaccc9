from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal, Union
from datetime import datetime

from app.core.utils import split_lines, join_lines, reject_null

ExperienceType = Literal["experience", "education"]


class ExperienceBase(BaseModel):
    description: Optional[Union[List[str], str]] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, v):
        # Admin forms send one textarea; rows store one bullet per line
        return split_lines(v)


class ExperienceCreate(ExperienceBase):
    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    period: str = Field(min_length=1)
    type: ExperienceType


class ExperienceUpdate(ExperienceBase):
    title: Optional[str] = Field(default=None, min_length=1)
    company: Optional[str] = Field(default=None, min_length=1)
    period: Optional[str] = Field(default=None, min_length=1)
    type: Optional[ExperienceType] = None

    @field_validator("title", "company", "period", "type", mode="before")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class ExperienceResponse(BaseModel):
    id: Union[str, int]
    title: str
    company: str
    period: Optional[str] = None
    type: Optional[str] = None
    description: str = ""
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, v):
        return join_lines(v)

    class Config:
        from_attributes = True
