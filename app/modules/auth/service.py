import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from fastapi import HTTPException
from jose import JWTError, jwt

from app.config import settings
from app.modules.auth.schemas import AdminUser, LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def _matches(supplied: str, expected: str) -> bool:
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


class AuthService:
    """Single shared admin credential, exchanged for a signed bearer token."""

    def __init__(self, secret: str = None, algorithm: str = None, expires_hours: int = None):
        self.secret = secret or settings.jwt_secret
        self.algorithm = algorithm or settings.jwt_algorithm
        self.expires_hours = expires_hours if expires_hours is not None else settings.jwt_expires_hours

    def login(self, login_data: LoginRequest) -> LoginResponse:
        """Check the credential pair and issue a token"""
        # Evaluate both so a wrong username costs the same as a wrong password
        username_ok = _matches(login_data.username, settings.admin_username)
        password_ok = _matches(login_data.password, settings.admin_password)
        if not (username_ok and password_ok):
            logger.warning("Rejected admin login for username %r", login_data.username)
            raise HTTPException(status_code=401, detail="Invalid credentials")

        token = self.create_token(login_data.username)
        logger.info("Admin %s logged in", login_data.username)
        return LoginResponse(
            token=token,
            user=AdminUser(username=login_data.username, role=ADMIN_ROLE),
        )

    def create_token(self, username: str) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "username": username,
            "role": ADMIN_ROLE,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(hours=self.expires_hours)).timestamp()),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Verify signature, expiry and role claim; return the admin user dict."""
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.info("Rejected admin token: %s", e)
            raise HTTPException(status_code=401, detail="Invalid token")
        if claims.get("role") != ADMIN_ROLE or not claims.get("username"):
            raise HTTPException(status_code=401, detail="Invalid token")
        return {"username": claims["username"], "role": claims["role"]}
