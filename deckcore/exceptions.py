"""Exception hierarchy for the card deck core."""
from typing import Optional


class SheetDeckError(Exception):
    """Base class for all card deck errors."""


class ConfigurationError(SheetDeckError):
    """Raised when required configuration is missing or invalid."""


class StoreError(SheetDeckError):
    """A call to the tabular data store failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FetchError(StoreError):
    """Retrieving the table failed in transport or while parsing the body."""


class MalformedResponse(FetchError):
    """The fetch succeeded but the body carries no usable ``values`` table."""


class DeleteError(StoreError):
    """Removing a row from the store failed."""
