"""
Google Sheets implementation of the tabular data store.

Fetches a value range and deletes single rows through the Sheets v4
REST API using a shared ``requests`` session.
"""
import logging
from typing import Any, Dict, Optional, Protocol
from urllib.parse import quote

import requests

from .exceptions import DeleteError, FetchError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://sheets.googleapis.com"


class TabularDataStore(Protocol):
    """Operations the deck needs from a remote table."""

    def fetch_range(self, store_id: str, range_: str) -> Dict[str, Any]:
        ...

    def delete_rows(self, store_id: str, row_start_index: int, row_end_index: int) -> None:
        ...


class SheetsClient:
    """Minimal Sheets v4 client: ``values.get`` and a row ``deleteDimension``."""

    def __init__(
        self,
        api_key: str,
        *,
        access_token: Optional[str] = None,
        sheet_id: int = 0,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.access_token = access_token
        self.sheet_id = sheet_id
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _auth_headers(self) -> Dict[str, str]:
        token = self.access_token or self.api_key
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def fetch_range(self, store_id: str, range_: str) -> Dict[str, Any]:
        """
        Fetch the cell values of ``range_``.

        Returns:
            Decoded response body, normally ``{"range": ..., "values": [[...], ...]}``

        Raises:
            FetchError: On network failure, non-200 status or a non-JSON body
        """
        url = f"{self.base_url}/v4/spreadsheets/{store_id}/values/{quote(range_, safe='!:$')}"
        logger.info("Fetching range %s from spreadsheet %s", range_, store_id)

        try:
            response = self.session.get(url, params={"key": self.api_key})
        except requests.RequestException as e:
            logger.error("Fetch request failed: %s", e)
            raise FetchError(f"Failed to fetch data: {e}") from e

        if response.status_code != 200:
            logger.error("Fetch failed: %s - %s", response.status_code, response.text)
            raise FetchError("Failed to fetch data", status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error("Fetch returned a non-JSON body: %s", e)
            raise FetchError("Failed to fetch data: response is not valid JSON") from e

    def delete_rows(self, store_id: str, row_start_index: int, row_end_index: int) -> None:
        """
        Delete the half-open row range ``[row_start_index, row_end_index)``.

        Raises:
            DeleteError: On network failure or non-200 status
        """
        url = f"{self.base_url}/v4/spreadsheets/{store_id}:batchUpdate"
        body = {
            "requests": [
                {
                    "deleteDimension": {
                        "range": {
                            "sheetId": self.sheet_id,
                            "dimension": "ROWS",
                            "startIndex": row_start_index,
                            "endIndex": row_end_index,
                        }
                    }
                }
            ]
        }
        logger.info(
            "Deleting rows [%d, %d) from spreadsheet %s sheet %d",
            row_start_index, row_end_index, store_id, self.sheet_id,
        )

        try:
            response = self.session.post(url, json=body, headers=self._auth_headers())
        except requests.RequestException as e:
            logger.error("Delete request failed: %s", e)
            raise DeleteError(f"Failed to delete row: {e}") from e

        if response.status_code != 200:
            logger.error("Delete failed: %s - %s", response.status_code, response.text)
            raise DeleteError("Failed to delete row", status_code=response.status_code)

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

