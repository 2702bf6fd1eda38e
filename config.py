"""
Configuration management for the SONV-112 screening engine.

All environment variables are loaded here with their default values.
Every setting is optional; the engine runs with built-in defaults.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment Variable Reference:
    - THRESHOLDS_FILE: JSON file overriding validity and condition thresholds.
      Cut-off points are clinical parameters; supply them from a domain expert
      rather than editing code.
    """

    # Application settings
    app_name: str = "SONV-112 Screening Engine"
    app_version: str = "1.0.0"
    debug: bool = False

    # Threshold overrides, e.g.
    # {"validity": {"L": {"moderate": 50, "critical": 75}},
    #  "conditions": {"adhd": {"cut": 60, "borderline_band": 10}}}
    thresholds_file: Optional[str] = None

    # Share links: fragment is "<marker><112-char code>"
    share_marker: str = "r="

    # Result cache for share-code lookups
    cache_ttl_seconds: int = 3600
    cache_max_size: int = 1000

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_service_status() -> dict:
    """
    Returns the configuration status of engine services.
    Used by the health endpoint.
    """
    return {
        "thresholds": "file" if settings.thresholds_file else "default",
        "cache": f"ttl={settings.cache_ttl_seconds}s max={settings.cache_max_size}",
    }
