from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Literal, Union
from datetime import datetime

MessageStatus = Literal["unread", "read", "replied"]


class ContactCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)
    phone: Optional[str] = None


class ContactCreatedResponse(BaseModel):
    message: str = "Message sent successfully"
    id: Union[str, int]


class ContactStatusUpdate(BaseModel):
    status: MessageStatus


class ContactMessageResponse(BaseModel):
    id: Union[str, int]
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    phone: Optional[str] = None
    status: Optional[str] = "unread"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
