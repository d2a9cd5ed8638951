"""Centralised settings for pho.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the working
directory (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)


class ConfigError(Exception):
    """Required configuration is missing or invalid."""


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Gallery server
    # ------------------------------------------------------------------
    gallery_url: str | None = field(
        default_factory=lambda: os.environ.get("PHOTO_GALLERY_URL") or None
    )
    albums_prefix: str = field(
        default_factory=lambda: os.environ.get("PHO_ALBUMS_PREFIX", "/var/albums")
    )

    # ------------------------------------------------------------------
    # HTTP client
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("PHO_REQUEST_TIMEOUT", "15.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("PHO_USER_AGENT", "pho/1.2.1")
    )

    # ------------------------------------------------------------------
    # Retry / backoff
    # ------------------------------------------------------------------
    retry_initial_interval: float = field(
        default_factory=lambda: float(os.environ.get("PHO_RETRY_INITIAL_INTERVAL", "0.5"))
    )
    retry_multiplier: float = field(
        default_factory=lambda: float(os.environ.get("PHO_RETRY_MULTIPLIER", "1.5"))
    )
    retry_max_interval: float = field(
        default_factory=lambda: float(os.environ.get("PHO_RETRY_MAX_INTERVAL", "60.0"))
    )

    def require_gallery_url(self) -> str:
        """Return the gallery base address or raise :class:`ConfigError`."""
        if not self.gallery_url:
            raise ConfigError(
                "a gallery url must be provided (--url or PHOTO_GALLERY_URL)"
            )
        return self.gallery_url


# Module-level singleton; import this everywhere:
#   from pho.config import settings
settings = Settings()
