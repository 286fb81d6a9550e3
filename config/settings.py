"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Diagnostic API origin (HTTPS, no credentials)
    API_BASE_URL: str = os.getenv("API_BASE_URL", "https://pdda.shuwantech.com").rstrip("/")

    # Tables
    PAGE_SIZE: int = int(os.getenv("PAGE_SIZE", "8"))
    HANDOFF_DEVICE_LIMIT: int = int(os.getenv("HANDOFF_DEVICE_LIMIT", "100"))

    # Detail view defaults
    DEFAULT_DATE: str = os.getenv("DEFAULT_DATE", "2020-06-13")
    DEFAULT_CHANNEL: str = os.getenv("DEFAULT_CHANNEL", "UHF")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
