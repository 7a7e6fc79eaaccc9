from pydantic import BaseModel
from typing import Optional


class ImageUploadResponse(BaseModel):
    url: str
    publicId: str
    width: Optional[int] = None
    height: Optional[int] = None


class ResumeUploadResponse(BaseModel):
    url: str
    publicId: str
    originalName: Optional[str] = None
