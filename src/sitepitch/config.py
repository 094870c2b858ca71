from dotenv import load_dotenv
from dataclasses import dataclass
from typing import Optional
import logging
import os

from sitepitch.constants import (
    DEFAULT_LOCALE,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_REPORT_FILE,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

load_dotenv()  # Loads variables from .env file

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %d", name, value, default)
        return default


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    logger.warning("Ignoring %s=%r (not a boolean), using %s", name, value, default)
    return default


@dataclass
class Config:
    """Configuration for one report run."""
    target_url: Optional[str] = None
    output_file: str = DEFAULT_REPORT_FILE
    locale: str = DEFAULT_LOCALE
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = DEFAULT_REQUEST_TIMEOUT_SECONDS
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    include_navigation: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            target_url=os.getenv("TARGET_URL") or None,
            output_file=os.getenv("REPORT_FILE", DEFAULT_REPORT_FILE),
            locale=os.getenv("REPORT_LOCALE", DEFAULT_LOCALE),
            user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
            timeout=_env_int("TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS),
            max_redirects=_env_int("MAX_REDIRECTS", DEFAULT_MAX_REDIRECTS),
            include_navigation=_env_bool("INCLUDE_NAVIGATION", True),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
