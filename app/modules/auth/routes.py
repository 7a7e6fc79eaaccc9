from fastapi import APIRouter, Depends
from app.modules.auth.schemas import LoginRequest, LoginResponse, AdminUser
from app.modules.auth.service import AuthService
from app.core.dependencies import get_auth_service, require_admin
from typing import Dict

router = APIRouter(prefix="/admin", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Exchange the admin credential for a bearer token"""
    return service.login(login_data)


@router.get("/verify", response_model=AdminUser)
async def verify(admin: Dict = Depends(require_admin)):
    """Return the admin user carried by the current token"""
    return admin
