"""
Core dependencies for route protection
"""

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.modules.auth.service import AuthService
from typing import Optional, Dict

# auto_error off so a missing header yields 401 rather than FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_auth_service() -> AuthService:
    return AuthService()


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict:
    """Decode the bearer token and return the admin user it carries"""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Access token required")
    return auth_service.decode_token(credentials.credentials)
