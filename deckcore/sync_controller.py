"""
Store synchronisation for the card deck.

Loads a sheet into a RecordSequence and commits deletions to the
remote store before touching local state, so the two never diverge.
Every store failure ends in the ERROR state with a displayable
message; nothing is retried.
"""
import logging
from typing import Any, Callable, List, Optional

from .data_models import SyncState, SyncStatus
from .exceptions import MalformedResponse, StoreError
from .sheets_client import TabularDataStore
from .ui_logic.gesture import GestureIntent, apply_intent
from .ui_logic.record_sequence import RecordSequence, store_row_index

logger = logging.getLogger(__name__)

StateCallback = Callable[[SyncStatus], None]


class DataSyncController:
    """
    Owns the record sequence and the fetch/delete lifecycle.

    States: IDLE -> LOADING -> READY | ERROR, READY -> DELETING -> READY | ERROR.
    Only one store request may be in flight; commands arriving meanwhile
    are rejected.
    """

    def __init__(self, store: TabularDataStore, range_: str) -> None:
        """
        Initialize the controller.

        Args:
            store: Tabular data store implementation
            range_: Range specifier passed through to ``fetch_range``
        """
        self.store = store
        self.range = range_
        self.store_id: Optional[str] = None
        self.sequence: Optional[RecordSequence] = None

        self._state = SyncState.IDLE
        self._message = ""
        self._in_flight = False
        self._callbacks: List[StateCallback] = []

    # -- state -------------------------------------------------------------

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def message(self) -> str:
        """Error message of the last failure, empty otherwise."""
        return self._message

    @property
    def status(self) -> SyncStatus:
        return SyncStatus(state=self._state, message=self._message, store_id=self.store_id)

    @property
    def is_busy(self) -> bool:
        return self._in_flight

    def register_state_callback(self, callback: StateCallback) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unregister_state_callback(self, callback: StateCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _transition(self, state: SyncState, message: str = "") -> None:
        self._state = state
        self._message = message
        logger.debug("Sync state -> %s", state.value)

        status = self.status
        for callback in list(self._callbacks):
            try:
                callback(status)
            except Exception as e:
                logger.error("State callback error: %s", e)

    # -- commands ----------------------------------------------------------

    def _finish_request(self, state: SyncState, message: str = "") -> None:
        self._in_flight = False
        self._transition(state, message)

    def connect(self, store_id: str) -> bool:
        """
        Select the store to browse; the next ``refresh`` loads it.

        Returns:
            False if a request is in flight and the store was kept
        """
        if self._in_flight:
            logger.warning("Request in progress, connect to %s ignored", store_id)
            return False
        self.store_id = store_id
        logger.info("Connecting to spreadsheet %s", store_id)
        self._transition(SyncState.LOADING)
        return True

    def refresh(self) -> bool:
        """
        Fetch the table and replace the record sequence.

        Returns:
            True if the table was loaded
        """
        if self.store_id is None:
            logger.warning("Refresh requested with no spreadsheet selected")
            return False
        if self._in_flight:
            logger.warning("Request already in progress, refresh ignored")
            return False

        self._in_flight = True
        self._transition(SyncState.LOADING)
        try:
            payload = self.store.fetch_range(self.store_id, self.range)
            header, data_rows = self._split_table(payload)
        except StoreError as e:
            logger.error("Error fetching data: %s", e)
            self._finish_request(SyncState.ERROR, str(e))
            return False
        except Exception as e:
            logger.exception("Unexpected error fetching data: %s", e)
            self._finish_request(SyncState.ERROR, f"Failed to fetch data: {e}")
            return False

        # Newest record first, header stays at position 0
        data_rows.reverse()
        sequence = RecordSequence()
        sequence.load(header, data_rows)
        self.sequence = sequence

        logger.info("Loaded %d records from spreadsheet %s", sequence.count, self.store_id)
        self._finish_request(SyncState.READY)
        return True

    def connect_and_refresh(self, store_id: str) -> bool:
        if not self.connect(store_id):
            return False
        return self.refresh()

    def delete_current(self) -> bool:
        """
        Delete the shown record from the store, then from the sequence.

        A failed remote delete leaves the sequence untouched.

        Returns:
            True if the record was deleted
        """
        if self._in_flight:
            logger.warning("Request already in progress, delete ignored")
            return False
        if self._state is not SyncState.READY or self.sequence is None or self.sequence.is_empty:
            logger.warning("Nothing to delete in state %s", self._state.value)
            return False

        row_index = store_row_index(self.sequence.total_rows, self.sequence.cursor)

        self._in_flight = True
        self._transition(SyncState.DELETING)
        try:
            self.store.delete_rows(self.store_id, row_index, row_index + 1)
        except StoreError as e:
            logger.error("Error deleting row: %s", e)
            self._finish_request(SyncState.ERROR, str(e))
            return False
        except Exception as e:
            logger.exception("Unexpected error deleting row: %s", e)
            self._finish_request(SyncState.ERROR, f"Failed to delete row: {e}")
            return False

        self.sequence.delete_current()
        logger.info("Deleted sheet row %d, %d records left", row_index, self.sequence.count)
        self._finish_request(SyncState.READY)
        return True

    def reset(self) -> None:
        """Forget the store and its records, back to store selection."""
        if self._in_flight:
            logger.warning("Request in progress, reset ignored")
            return
        self.store_id = None
        self.sequence = None
        self._transition(SyncState.IDLE)

    # -- navigation --------------------------------------------------------

    def _navigable(self) -> Optional[RecordSequence]:
        if self._state is not SyncState.READY:
            return None
        return self.sequence

    def go_previous(self) -> bool:
        sequence = self._navigable()
        return sequence.go_previous() if sequence else False

    def go_next(self) -> bool:
        sequence = self._navigable()
        return sequence.go_next() if sequence else False

    def handle_gesture(self, intent: GestureIntent) -> bool:
        sequence = self._navigable()
        return apply_intent(intent, sequence) if sequence else False

    def field_value(self, name: str) -> str:
        if self.sequence is None:
            return ""
        return self.sequence.field_value(name)

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def _split_table(payload: Any):
        """Validate a fetch payload and split it into header and data rows."""
        values = payload.get("values") if isinstance(payload, dict) else None
        if not isinstance(values, list) or not values:
            raise MalformedResponse("Failed to fetch data: response has no values")
        if not all(isinstance(row, list) for row in values):
            raise MalformedResponse("Failed to fetch data: values is not a table")

        header = [str(cell) for cell in values[0]]
        data_rows = [[str(cell) for cell in row] for row in values[1:]]
        return header, data_rows
