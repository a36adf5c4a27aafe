import logging
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Property, QThread, Signal, Slot

from deckcore.data_models import SyncState, SyncStatus
from deckcore.sync_controller import DataSyncController
from deckcore.ui_logic.card_view import CardView, build_card_view
from deckcore.ui_logic.gesture import GestureRecognizer
from deckcore.url_parser import extract_spreadsheet_id

logger = logging.getLogger(__name__)


class StoreRequestWorker(QThread):
    """Runs one blocking store operation off the GUI thread."""

    errorOccurred = Signal(str)

    def __init__(self, operation: Callable[[], bool]) -> None:
        super().__init__()
        self.operation = operation

    def run(self) -> None:
        try:
            self.operation()
        except Exception as e:
            logger.exception("Unexpected error during store request: %s", e)
            self.errorOccurred.emit(str(e))


class DeckCoordinator(QObject):
    """
    Bridges the deck controller to QML.

    Exposes the current card, navigation flags, drag offset and sync
    state as Qt properties, and runs fetch/delete on a worker thread.
    """

    stateChanged = Signal()
    cardChanged = Signal()
    dragOffsetChanged = Signal()
    invalidUrl = Signal(str)
    statusReceived = Signal(object)

    def __init__(self, controller: DataSyncController) -> None:
        super().__init__()
        self.controller = controller
        self.gesture = GestureRecognizer()
        self._card = CardView()
        self._status = controller.status
        self._worker: Optional[StoreRequestWorker] = None

        # Delivered on the GUI thread, queued when the worker reports it
        self.statusReceived.connect(self._apply_status)
        self.controller.register_state_callback(self._on_state_change)
        logger.info("Deck coordinator initialized")

    # -- controller events ---------------------------------------------------

    def _on_state_change(self, status: SyncStatus) -> None:
        self.statusReceived.emit(status)

    @Slot(object)
    def _apply_status(self, status: SyncStatus) -> None:
        self._status = status
        logger.debug("State change: %s", status)
        self.stateChanged.emit()
        if status.state in (SyncState.READY, SyncState.IDLE):
            self._refresh_card()

    def _refresh_card(self) -> None:
        sequence = self.controller.sequence
        self._card = build_card_view(sequence) if sequence else CardView()
        self.cardChanged.emit()

    def _request_running(self) -> bool:
        return self._worker is not None and self._worker.isRunning()

    def _run_request(self, operation: Callable[[], bool]) -> bool:
        if self._request_running():
            logger.warning("Store request already in progress")
            return False

        self._worker = StoreRequestWorker(operation)
        self._worker.errorOccurred.connect(self._on_worker_error)
        self._worker.finished.connect(self._on_worker_finished)
        self._worker.start()
        return True

    def _on_worker_error(self, message: str) -> None:
        self._status = SyncStatus(SyncState.ERROR, message, self.controller.store_id)
        self.stateChanged.emit()

    def _on_worker_finished(self) -> None:
        if self._worker:
            self._worker.deleteLater()
            self._worker = None
        self.stateChanged.emit()

    # -- slots ---------------------------------------------------------------

    @Slot(str, result=bool)
    def loadSheet(self, url: str) -> bool:
        """Parse a spreadsheet URL and start loading it."""
        store_id = extract_spreadsheet_id(url)
        if not store_id:
            logger.warning("Invalid Google Sheets URL: %s", url)
            self.invalidUrl.emit("Invalid Google Sheets URL")
            return False
        if self._request_running():
            logger.warning("Store request already in progress, %s not loaded", store_id)
            return False
        if not self.controller.connect(store_id):
            return False
        return self._run_request(self.controller.refresh)

    @Slot(result=bool)
    def refresh(self) -> bool:
        return self._run_request(self.controller.refresh)

    @Slot()
    def previous(self) -> None:
        if self.controller.go_previous():
            self._refresh_card()

    @Slot()
    def next(self) -> None:
        if self.controller.go_next():
            self._refresh_card()

    @Slot(result=bool)
    def deleteCurrent(self) -> bool:
        if self.controller.state is not SyncState.READY:
            return False
        return self._run_request(self.controller.delete_current)

    @Slot()
    def backToSelection(self) -> None:
        self.gesture.cancel()
        self.controller.reset()

    @Slot(float)
    def touchStart(self, x: float) -> None:
        self.gesture.on_start(x)
        self.dragOffsetChanged.emit()

    @Slot(float)
    def touchMove(self, x: float) -> None:
        self.gesture.on_move(x)
        self.dragOffsetChanged.emit()

    @Slot()
    def touchEnd(self) -> None:
        intent = self.gesture.on_end()
        self.dragOffsetChanged.emit()
        if self.controller.handle_gesture(intent):
            self._refresh_card()

    # -- properties ----------------------------------------------------------

    @Property(str, notify=stateChanged)
    def state(self) -> str:
        """Current lifecycle state: idle, loading, ready, deleting, error"""
        return self._status.state.value

    @Property(str, notify=stateChanged)
    def errorMessage(self) -> str:
        return self._status.message

    @Property(bool, notify=stateChanged)
    def isBusy(self) -> bool:
        return self._status.is_busy or self._request_running()

    @Property(bool, notify=stateChanged)
    def hasSheet(self) -> bool:
        return self._status.store_id is not None

    @Property(float, notify=dragOffsetChanged)
    def dragOffset(self) -> float:
        return float(self.gesture.offset_x)

    @Property(bool, notify=cardChanged)
    def isEmpty(self) -> bool:
        return self._card.is_empty

    @Property(str, notify=cardChanged)
    def cardLabel(self) -> str:
        return self._card.label

    @Property(bool, notify=cardChanged)
    def canGoPrevious(self) -> bool:
        return self._card.can_go_previous

    @Property(bool, notify=cardChanged)
    def canGoNext(self) -> bool:
        return self._card.can_go_next

    @Property(str, notify=cardChanged)
    def title(self) -> str:
        return self._card.title

    @Property(str, notify=cardChanged)
    def companyName(self) -> str:
        return self._card.company_name

    @Property(str, notify=cardChanged)
    def location(self) -> str:
        return self._card.location

    @Property(str, notify=cardChanged)
    def jobType(self) -> str:
        return self._card.job_type

    @Property(str, notify=cardChanged)
    def experience(self) -> str:
        return self._card.experience

    @Property(str, notify=cardChanged)
    def salary(self) -> str:
        return self._card.salary

    @Property(str, notify=cardChanged)
    def description(self) -> str:
        return self._card.description

    @Property("QVariantList", notify=cardChanged)
    def skills(self) -> List[str]:
        return [str(skill) for skill in self._card.skills]

    @Property(str, notify=cardChanged)
    def companyWebsite(self) -> str:
        return self._card.company_website

    @Property(str, notify=cardChanged)
    def posted(self) -> str:
        return self._card.posted

    def wait_for_request(self, timeout_ms: int = 5000) -> None:
        """Block until the running store request, if any, has finished."""
        if self._worker is not None:
            self._worker.wait(timeout_ms)

    def cleanup(self) -> None:
        """Clean up resources before shutdown."""
        logger.info("Cleaning up deck coordinator")
        self.wait_for_request()
        self.controller.unregister_state_callback(self._on_state_change)
        close = getattr(self.controller.store, "close", None)
        if close:
            close()
