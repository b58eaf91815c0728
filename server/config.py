"""Configuration management for the WhatsApp dispatch service."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


def _load_env_file() -> None:
    """Load .env from root directory if present."""
    env_path = Path(__file__).parent.parent / ".env"
    if not env_path.is_file():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#") and "=" in stripped:
            key, value = stripped.split("=", 1)
            key, value = key.strip(), value.strip().strip("'\"")
            if key and value and key not in os.environ:
                os.environ[key] = value


_load_env_file()


DEFAULT_APP_NAME = "WhatsApp Dispatch"
DEFAULT_APP_VERSION = "0.1.0"
DEFAULT_DISPATCH_TIMEOUT = 15.0


def _env(name: str, fallback: Optional[str] = None):
    return lambda: os.getenv(name, fallback)


def _env_float(name: str, fallback: float) -> float:
    try:
        return float(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


class Settings(BaseModel):
    """Application settings read from the environment when instantiated."""

    # App metadata
    app_name: str = Field(default=DEFAULT_APP_NAME)
    app_version: str = Field(default=DEFAULT_APP_VERSION)

    # Environment
    env: str = Field(default_factory=_env("ENV", "dev"))
    log_level: str = Field(default_factory=_env("LOG_LEVEL", "INFO"))

    # HTTP behaviour
    cors_allow_origins_raw: str = Field(default_factory=_env("CORS_ORIGINS", "*"))
    enable_docs: bool = Field(default_factory=lambda: os.getenv("ENABLE_DOCS", "1") != "0")
    docs_url: Optional[str] = Field(default_factory=_env("DOCS_URL", "/docs"))

    # DigitalSac gateway
    digitalsac_host: Optional[str] = Field(default_factory=_env("DIGITALSAC_HOST"))
    digitalsac_token: Optional[str] = Field(default_factory=_env("DIGITALSAC_TOKEN"), repr=False)
    digitalsac_connection_id: Optional[str] = Field(
        default_factory=_env("DIGITALSAC_CONNECTION_ID")
    )

    # Dispatch
    messaging_provider: str = Field(default_factory=_env("MESSAGING_PROVIDER", "digitalsac"))
    dispatch_timeout_seconds: float = Field(
        default_factory=lambda: _env_float("DISPATCH_TIMEOUT_SECONDS", DEFAULT_DISPATCH_TIMEOUT)
    )

    @property
    def cors_allow_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_allow_origins_raw.strip() in {"", "*"}:
            return ["*"]
        return [origin.strip() for origin in self.cors_allow_origins_raw.split(",") if origin.strip()]

    @property
    def resolved_docs_url(self) -> Optional[str]:
        """Return documentation URL when docs are enabled."""
        return (self.docs_url or "/docs") if self.enable_docs else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
