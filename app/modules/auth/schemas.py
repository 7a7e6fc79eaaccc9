from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AdminUser(BaseModel):
    username: str
    role: str = "admin"


class LoginResponse(BaseModel):
    token: str
    user: AdminUser
    message: str = "Login successful"
