from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List

DEFAULT_JWT_SECRET = "change-me-portfolio-jwt-secret"
DEFAULT_ADMIN_PASSWORD = "change-me"


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Bypasses RLS for admin writes

    # Cloudinary
    cloudinary_cloud_name: Optional[str] = None
    cloudinary_api_key: Optional[str] = None
    cloudinary_api_secret: Optional[str] = None

    # SMTP relay for contact form notifications
    smtp_host: Optional[str] = None
    smtp_port: int = 587
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    smtp_use_tls: bool = True
    email_from: Optional[str] = None
    email_to: Optional[str] = None

    # Admin
    admin_username: str = "admin"
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expires_hours: int = 24

    # App
    app_name: str = "portfolio-backend"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/15minutes"  # slowapi format

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def cloudinary_configured(self) -> bool:
        return all([self.cloudinary_cloud_name, self.cloudinary_api_key, self.cloudinary_api_secret])

    @property
    def smtp_configured(self) -> bool:
        return bool(self.smtp_host and self.email_to)

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def insecure_defaults(self) -> List[str]:
        """Names of secrets still set to their shipped defaults."""
        names = []
        if self.jwt_secret == DEFAULT_JWT_SECRET:
            names.append("JWT_SECRET")
        if self.admin_password == DEFAULT_ADMIN_PASSWORD:
            names.append("ADMIN_PASSWORD")
        return names

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore"
    )


settings = Settings()
