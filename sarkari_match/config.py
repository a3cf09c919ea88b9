"""
Configuration settings for the Sarkari Job Eligibility Matcher
"""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application Configuration
    app_name: str = Field(default="Sarkari Job Eligibility Matcher")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # API Configuration
    api_prefix: str = Field(default="")
    cors_origins: str = Field(default="http://localhost:3000,http://localhost:5173")

    # Storage Configuration ("memory" or "mongo")
    storage_backend: str = Field(default="memory")
    mongodb_url: str = Field(default="mongodb://localhost:27017")
    mongodb_db_name: str = Field(default="sarkari_jobs")
    seed_catalog: bool = Field(default=True)

    # Matching Configuration
    latest_jobs_limit: int = Field(default=4, ge=1)
    default_deadline_days: int = Field(default=3, ge=1)

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()

if settings.storage_backend not in ("memory", "mongo"):
    raise ValueError(
        "STORAGE_BACKEND must be either 'memory' or 'mongo'"
    )
