# File: foxy_admin/core/settings.py
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

# Package dir = foxy_admin/core/../; assets ship inside it
PACKAGE_DIR = Path(__file__).resolve().parents[1]

SERVICE_NAME = "foxy-fabrications-admin"

# .env never overrides variables already set in the process environment
load_dotenv(override=False)


class Settings(BaseModel):
    model_config = {"frozen": True}

    SERVICE_NAME: str = SERVICE_NAME
    ENVIRONMENT: str = "unknown"
    VERSION_FILE: str = "version.txt"
    FALLBACK_IMAGE: str = "local-dev-admin"
    STATIC_DIR: str = str(PACKAGE_DIR / "static")
    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")
    DATA_DIR: str = "data"
    UPLOADS_DIR: str = "private_uploads"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = ""


def _port_from_env() -> int:
    raw = os.getenv("PORT") or os.getenv("ADMIN_PORT") or "3000"
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None


def get_settings() -> Settings:
    """Build settings from the current process environment."""
    defaults = Settings()
    return Settings(
        SERVICE_NAME=os.getenv("SERVICE_NAME", defaults.SERVICE_NAME),
        ENVIRONMENT=os.getenv("ENVIRONMENT", defaults.ENVIRONMENT),
        VERSION_FILE=os.getenv("VERSION_FILE", defaults.VERSION_FILE),
        FALLBACK_IMAGE=os.getenv("FALLBACK_IMAGE", defaults.FALLBACK_IMAGE),
        STATIC_DIR=os.getenv("STATIC_DIR", defaults.STATIC_DIR),
        TEMPLATES_DIR=os.getenv("TEMPLATES_DIR", defaults.TEMPLATES_DIR),
        DATA_DIR=os.getenv("DATA_DIR", defaults.DATA_DIR),
        UPLOADS_DIR=os.getenv("UPLOADS_DIR", defaults.UPLOADS_DIR),
        HOST=os.getenv("HOST", defaults.HOST),
        PORT=_port_from_env(),
        LOG_LEVEL=os.getenv("LOG_LEVEL", defaults.LOG_LEVEL),
        LOG_DIR=os.getenv("LOG_DIR", defaults.LOG_DIR),
    )
