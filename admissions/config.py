"""Application configuration"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Webhook that receives submitted applications (CRM ingestion, notifications)
    webhook_url: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(
            "webhook_url", "application_webhook_url", "pipedream_webhook_url"
        ),
    )
    webhook_timeout: float = 10.0

    # Application
    environment: str = "development"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
