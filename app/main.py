import logging
import re
from datetime import datetime, timezone
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.core.rate_limit import limiter, enforce_rate_limit
from app.modules.auth import routes as auth_routes
from app.modules.admin import routes as admin_routes
from app.modules.projects import routes as projects_routes
from app.modules.skills import routes as skills_routes
from app.modules.experiences import routes as experiences_routes
from app.modules.personal_info import routes as personal_info_routes
from app.modules.contact import routes as contact_routes
from app.modules.analytics import routes as analytics_routes
from app.modules.hero import routes as hero_routes
from app.modules.site_settings import routes as site_settings_routes
from app.modules.uploads import routes as uploads_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if exc.status_code == 404 and detail == "Not Found":
        detail = "Route not found"
    return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(e.get("loc", [])), "msg": e.get("msg"), "type": e.get("type")}
        for e in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"errors": errors})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
    return JSONResponse(status_code=500, content={"error": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                    (b"Referrer-Policy", b"no-referrer"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


def cors_options() -> dict:
    """Any origin outside production; otherwise exact entries plus "*.domain" wildcards"""
    if not settings.is_production:
        return {"allow_origins": [], "allow_origin_regex": ".*"}

    exact, patterns = [], []
    for entry in settings.get_cors_origins_list():
        if entry.startswith("*."):
            patterns.append(r"https?://.+" + re.escape(entry[1:]))
        else:
            exact.append(entry)
    return {
        "allow_origins": exact,
        "allow_origin_regex": "|".join(patterns) or None,
    }


app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    **cors_options(),
)

# Include module routes
for module_routes in (
    auth_routes,
    admin_routes,
    projects_routes,
    skills_routes,
    experiences_routes,
    personal_info_routes,
    contact_routes,
    analytics_routes,
    hero_routes,
    site_settings_routes,
    uploads_routes,
):
    app.include_router(module_routes.router, prefix="/api", dependencies=[Depends(enforce_rate_limit)])


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup (%s)", settings.environment)
    if settings.is_production:
        for name in settings.insecure_defaults():
            logger.warning("%s is still set to its default value", name)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": "Portfolio Backend API", "version": settings.app_version, "docs": "/docs"}


@app.get("/health")
@limiter.exempt
async def health(request: Request):
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }


@app.get("/api/health")
@limiter.exempt
async def api_health(request: Request):
    return {
        "status": "ok",
        "message": "Backend is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }
