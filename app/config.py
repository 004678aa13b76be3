"""
Configuration settings for the Vehicle Registry service.
Uses Pydantic for type-safe configuration management.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Vehicle Registry"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://vehicle_user:vehicle_pass@db:5432/vehicle_db"

    # External validators; {plate} is substituted per request
    registration_url: str = "http://localhost:8081/api/registrations/{plate}"
    inspection_url: str = "http://localhost:8082/api/inspections/{plate}"
    validator_timeout_seconds: float = 3.0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # API
    api_v1_prefix: str = "/api/v1"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
