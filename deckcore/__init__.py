"""
Card deck core - portable across platforms.

Store client, synchronisation controller, field decoding and the
cursor/gesture logic behind the card browser.
"""
from .data_models import SyncState, SyncStatus
from .exceptions import (
    SheetDeckError,
    ConfigurationError,
    StoreError,
    FetchError,
    MalformedResponse,
    DeleteError,
)
from .field_decoder import decode_date, decode_list
from .sheets_client import SheetsClient, TabularDataStore
from .sync_controller import DataSyncController
from .url_parser import extract_spreadsheet_id

__all__ = [
    'SyncState',
    'SyncStatus',
    'SheetDeckError',
    'ConfigurationError',
    'StoreError',
    'FetchError',
    'MalformedResponse',
    'DeleteError',
    'decode_date',
    'decode_list',
    'SheetsClient',
    'TabularDataStore',
    'DataSyncController',
    'extract_spreadsheet_id'
]
