from __future__ import annotations
import os

from dotenv import load_dotenv
from pydantic import BaseModel

# Load .env if present (no-op when missing)
load_dotenv()


class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "CareerForge")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    database_url: str = os.getenv("DATABASE_URL") or os.getenv("INTERNAL_DATABASE_URL") or "sqlite:///./data/careerforge.db"
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "5"))
    db_max_overflow: int = int(os.getenv("DB_MAX_OVERFLOW", "10"))

    openai_api_key: str = os.getenv("OPENAI_API_KEY", "")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    # Session tokens are issued by the external identity provider
    identity_jwt_secret: str = os.getenv("IDENTITY_JWT_SECRET", "change-me-in-env")
    identity_jwt_algorithm: str = os.getenv("IDENTITY_JWT_ALGORITHM", "HS256")
    identity_jwks_url: str = os.getenv("IDENTITY_JWKS_URL", "")
    identity_issuer: str = os.getenv("IDENTITY_ISSUER", "")

    insight_ttl_days: int = int(os.getenv("INSIGHT_TTL_DAYS", "7"))

settings = Settings()
