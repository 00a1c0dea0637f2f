"""
Configuration Management for the Skin Health Decision Engine

Environment-based configuration using Pydantic Settings.
"""
from pydantic_settings import BaseSettings
from pydantic import Field, ConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""
    
    model_config = ConfigDict(
        env_prefix="SKINCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Application
    app_name: str = "Skin Health Decision Engine"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False, description="Enable debug mode")
    
    # Logging
    log_level: str = Field(default="INFO", description="Root level for skincheck loggers")
    
    # Confidence estimation
    confidence_ceiling: int = Field(default=100, description="Upper bound applied to the coverage confidence")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
