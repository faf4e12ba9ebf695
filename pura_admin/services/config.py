"""
Configuration for the dashboard.
Reads a .env file (python-dotenv) and CMS_* environment variables.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from pura_admin.utils.logging import logger


@dataclass
class Settings:
    """Runtime settings for one dashboard process.

    ``storage_key_prefix`` is prepended to the last URL segment when an old
    image's storage key has to be derived from its URL. The stock backend
    stores uploads under ``uploads/``, so deployments against it usually set
    ``CMS_STORAGE_KEY_PREFIX=uploads/``; with the empty default,
    ``.../uploads/abc.jpg`` is deleted as ``abc.jpg``.
    """
    api_url: str = ""
    request_timeout: float = 30.0
    max_upload_mb: float = 2.0
    storage_key_prefix: str = ""
    page_size: int = 9
    recaptcha_token: Optional[str] = None
    log_dir: str = "~/.config/pura_admin/logs"
    log_level: str = "INFO"

    @property
    def max_upload_bytes(self) -> int:
        return int(self.max_upload_mb * 1024 * 1024)


def _number(name: str, default: float, cast=float):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring non-positive {name}={raw!r}, using {default}")
        return default
    return value


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build Settings from the environment, after loading ``env_file`` (or ./.env)."""
    load_dotenv(env_file, override=False)

    defaults = Settings()
    settings = Settings(
        api_url=os.environ.get("CMS_API_URL", defaults.api_url).rstrip("/"),
        request_timeout=_number("CMS_REQUEST_TIMEOUT", defaults.request_timeout),
        max_upload_mb=_number("CMS_MAX_UPLOAD_MB", defaults.max_upload_mb),
        storage_key_prefix=os.environ.get("CMS_STORAGE_KEY_PREFIX", defaults.storage_key_prefix),
        page_size=_number("CMS_PAGE_SIZE", defaults.page_size, cast=int),
        recaptcha_token=os.environ.get("CMS_RECAPTCHA_TOKEN") or None,
        log_dir=os.environ.get("CMS_LOG_DIR", defaults.log_dir),
        log_level=os.environ.get("CMS_LOG_LEVEL", defaults.log_level),
    )
    logger.debug("Settings loaded: api_url=%r timeout=%s", settings.api_url, settings.request_timeout)
    return settings


# Cached instance
_settings = None

def get_settings() -> Settings:
    """Get the cached Settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings

def reset_settings() -> None:
    global _settings
    _settings = None
