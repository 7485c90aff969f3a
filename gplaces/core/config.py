"""Configuration helpers for the Places client."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    google_api_key: str = ""
    google_access_token: str = ""
    request_timeout: float = 10.0
    default_language: Optional[str] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    google_api_key = os.getenv("GOOGLE_API_KEY", "")
    google_access_token = os.getenv("GOOGLE_ACCESS_TOKEN", "")
    request_timeout = float(os.getenv("GOOGLE_PLACES_TIMEOUT", "10"))
    default_language_raw = os.getenv("GOOGLE_PLACES_LANGUAGE")
    default_language = default_language_raw.strip() if default_language_raw and default_language_raw.strip() else None

    if not google_api_key and not google_access_token:
        logger.warning("Neither GOOGLE_API_KEY nor GOOGLE_ACCESS_TOKEN is configured; Places requests will be denied.")

    return Settings(
        google_api_key=google_api_key,
        google_access_token=google_access_token,
        request_timeout=request_timeout,
        default_language=default_language,
    )
