from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, Union
from datetime import datetime

from app.core.utils import reject_null


class PersonalInfoFields(BaseModel):
    phone: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    journey: Optional[str] = None
    degree: Optional[str] = None
    university: Optional[str] = None
    education_period: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    twitter_url: Optional[str] = None
    leetcode_url: Optional[str] = None
    website_url: Optional[str] = None
    resume_url: Optional[str] = None
    profile_image_url: Optional[str] = None


class PersonalInfoUpdate(PersonalInfoFields):
    name: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None

    @field_validator("name", "title", mode="before")
    @classmethod
    def _not_null(cls, v):
        return reject_null(v)


class PersonalInfoResponse(PersonalInfoFields):
    id: Union[str, int]
    name: Optional[str] = None
    title: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
