"""
Application settings (Pydantic Settings).
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

# .env next to backend/ (parent of eventspace/)
_env_path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    database_url: str = "sqlite:///./eventspace.db"
    # Calendar "today" for availability and booking dates (venues are in CDMX)
    catalog_timezone: str = "America/Mexico_City"
    seed_demo_data: bool = True
    # Extra CORS origins, comma-separated (e.g. https://eventspace.vercel.app)
    cors_origins: str = ""
    log_level: str = "INFO"

    class Config:
        env_file = _env_path
        extra = "ignore"

    @field_validator("database_url", "catalog_timezone", "cors_origins", mode="after")
    @classmethod
    def strip_value(cls, v: str) -> str:
        return (v or "").strip()

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()


settings = Settings()
