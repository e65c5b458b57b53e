from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: Optional[str] = None  # Webhook writes bypass RLS

    # Clerk
    clerk_webhook_secret: Optional[str] = None  # whsec_... from the Clerk dashboard
    clerk_jwt_public_key: Optional[str] = None  # PEM, used for session tokens on /api/v1

    # App
    app_name: str = "community-directory-backend"
    debug: bool = False
    environment: str = "production"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Signature verification is skipped only in this mode."""
        return self.environment == "development"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def missing_required(self) -> List[str]:
        """Names of required environment variables that are unset."""
        required = {
            "SUPABASE_URL": self.supabase_url,
            "SUPABASE_SERVICE_ROLE_KEY": self.supabase_service_role_key,
            "CLERK_WEBHOOK_SECRET": self.clerk_webhook_secret,
            "ENVIRONMENT": self.environment,
        }
        return [name for name, value in required.items() if not value]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
