"""
Desktop configuration.

Reads settings from environment variables, loading a ``.env`` file
first when one is present.
"""
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from .base import BaseConfiguration, ConfigurationError

ENV_PREFIX = "SHEETDECK_"


class DesktopConfiguration(BaseConfiguration):
    """Environment-backed configuration for the desktop shell."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, load_env_file: bool = True) -> None:
        """
        Initialize configuration.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``
            load_env_file: If True, load ``.env`` into the process environment first
        """
        if load_env_file and environ is None:
            load_dotenv()
        self._environ = environ if environ is not None else os.environ

    def _get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self._environ.get(ENV_PREFIX + name)
        if value is None or value.strip() == "":
            return default
        return value.strip()

    @property
    def api_key(self) -> Optional[str]:
        return self._get("API_KEY")

    @property
    def range(self) -> Optional[str]:
        return self._get("RANGE")

    @property
    def access_token(self) -> Optional[str]:
        return self._get("ACCESS_TOKEN")

    @property
    def sheet_id(self) -> int:
        raw = self._get("SHEET_ID", "0")
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{ENV_PREFIX}SHEET_ID must be an integer, got '{raw}'")

    @property
    def base_url(self) -> str:
        return self._get("BASE_URL", super().base_url)

    @property
    def log_level(self) -> str:
        return self._get("LOG_LEVEL", "INFO").upper()

    def validate(self) -> None:
        if not self.api_key:
            raise ConfigurationError(f"{ENV_PREFIX}API_KEY is not set")
        if not self.range:
            raise ConfigurationError(f"{ENV_PREFIX}RANGE is not set")
        # Surfaces a bad sheet id before the first delete
        self.sheet_id
