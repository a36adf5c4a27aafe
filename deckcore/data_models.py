"""Core data structures shared by the controller and UI implementations."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SyncState(Enum):
    """Lifecycle of the connection between the deck and its store."""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    DELETING = "deleting"
    ERROR = "error"


@dataclass(frozen=True)
class SyncStatus:
    """Snapshot handed to state listeners on every transition."""
    state: SyncState
    message: str = ""
    store_id: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        return self.state in (SyncState.LOADING, SyncState.DELETING)

    def __str__(self) -> str:
        if self.message:
            return f"SyncStatus({self.state.value}: {self.message})"
        return f"SyncStatus({self.state.value})"
