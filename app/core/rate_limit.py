import logging
from fastapi import HTTPException, Request
from limits import parse
from slowapi import Limiter

from app.config import settings
from app.core.utils import client_ip

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=client_ip, default_limits=[settings.rate_limit])


def enforce_rate_limit(request: Request) -> None:
    """Shared per-client budget across every /api router"""
    if not limiter.enabled:
        return
    key = client_ip(request)
    if not limiter.limiter.hit(parse(settings.rate_limit), "api", key):
        logger.warning("Rate limit exceeded for %s", key)
        raise HTTPException(
            status_code=429,
            detail="Too many requests from this IP, please try again later."
        )
