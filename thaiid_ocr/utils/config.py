"""Configuration and settings management."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator

from ..core.constants import VISION_API_URL, VISION_FEATURE_TYPE


class Settings(BaseSettings):
    # Google Cloud Vision
    API_KEY: Optional[str] = None
    VISION_API_URL: str = VISION_API_URL
    VISION_FEATURE_TYPE: str = VISION_FEATURE_TYPE
    VISION_TIMEOUT_S: float = 30.0

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator('API_KEY', mode='before')
    @classmethod
    def validate_api_key(cls, v):
        """Convert empty/whitespace strings to None."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('PORT', mode='before')
    @classmethod
    def validate_port(cls, v):
        """Convert empty/whitespace strings to default."""
        if isinstance(v, str) and not v.strip():
            return 8080
        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Convert empty/whitespace strings to default."""
        if isinstance(v, str) and not v.strip():
            return "INFO"
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }

# Global settings instance
settings = Settings()
