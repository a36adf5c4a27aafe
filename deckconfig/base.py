"""
Abstract configuration interface.

Core components receive their settings through this interface instead
of reading the process environment themselves.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from deckcore.exceptions import ConfigurationError
from deckcore.sheets_client import SheetsClient
from deckcore.sync_controller import DataSyncController

logger = logging.getLogger(__name__)


class BaseConfiguration(ABC):
    """Settings every deployment must provide."""

    @property
    @abstractmethod
    def api_key(self) -> Optional[str]:
        """API key used to read the spreadsheet."""

    @property
    @abstractmethod
    def range(self) -> Optional[str]:
        """A1 range fetched from the spreadsheet."""

    @property
    def access_token(self) -> Optional[str]:
        """Bearer token for row deletion; the API key is used when unset."""
        return None

    @property
    def sheet_id(self) -> int:
        """Numeric id of the sheet rows are deleted from."""
        return 0

    @property
    def base_url(self) -> str:
        return "https://sheets.googleapis.com"

    @property
    def log_level(self) -> str:
        return "INFO"

    def validate(self) -> None:
        """
        Check that required settings are present.

        Raises:
            ConfigurationError: Naming the first missing setting
        """
        if not self.api_key:
            raise ConfigurationError("API key is not configured")
        if not self.range:
            raise ConfigurationError("Sheet range is not configured")

    def create_client(self) -> SheetsClient:
        """Build a Sheets client from these settings."""
        self.validate()
        return SheetsClient(
            self.api_key,
            access_token=self.access_token,
            sheet_id=self.sheet_id,
            base_url=self.base_url,
        )

    def create_controller(self) -> DataSyncController:
        """Build a sync controller wired to a fresh Sheets client."""
        client = self.create_client()
        logger.debug("Controller configured for range %s", self.range)
        return DataSyncController(client, self.range)
