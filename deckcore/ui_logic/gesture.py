"""
Horizontal swipe recognition for card navigation.

Turns touch start/move/end samples into a discrete navigation intent.
No UI framework dependencies - the desktop shell feeds it pointer
positions from QML, but any input source works.
"""
import logging
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .record_sequence import RecordSequence

logger = logging.getLogger(__name__)

SWIPE_THRESHOLD = 100


class GestureIntent(Enum):
    """Navigation requested by a completed gesture."""
    NONE = "none"
    PREVIOUS = "previous"
    NEXT = "next"


class GestureRecognizer:
    """
    Tracks a single touch session and classifies it on release.

    Dragging right past the threshold asks for the previous card,
    dragging left asks for the next one.
    """

    def __init__(self, threshold: float = SWIPE_THRESHOLD) -> None:
        self.threshold = threshold
        self.start_x: Optional[float] = None
        self.offset_x: float = 0

    @property
    def is_active(self) -> bool:
        """True while a touch is in progress."""
        return self.start_x is not None

    def on_start(self, x: float) -> None:
        self.start_x = x
        self.offset_x = 0

    def on_move(self, x: float) -> None:
        if self.start_x is None:
            return
        self.offset_x = x - self.start_x

    def on_end(self) -> GestureIntent:
        """
        Finish the touch session.

        Returns:
            The navigation intent; the session is cleared in every case
        """
        if self.start_x is None:
            return GestureIntent.NONE

        offset = self.offset_x
        self.start_x = None
        self.offset_x = 0

        if abs(offset) > self.threshold:
            intent = GestureIntent.PREVIOUS if offset > 0 else GestureIntent.NEXT
        else:
            intent = GestureIntent.NONE

        logger.debug("Gesture ended: offset=%s intent=%s", offset, intent.value)
        return intent

    def cancel(self) -> None:
        """Drop the current session without producing an intent."""
        self.start_x = None
        self.offset_x = 0


def apply_intent(intent: GestureIntent, sequence: "RecordSequence") -> bool:
    """
    Move a record sequence according to a gesture intent.

    Returns:
        True if the cursor moved
    """
    if intent is GestureIntent.PREVIOUS:
        return sequence.go_previous()
    if intent is GestureIntent.NEXT:
        return sequence.go_next()
    return False
