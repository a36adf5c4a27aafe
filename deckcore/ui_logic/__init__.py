"""
UI logic package - portable across platforms.

Record cursor management, swipe recognition and card snapshots.
No UI framework dependencies.
"""
from .record_sequence import RecordSequence, store_row_index
from .gesture import GestureRecognizer, GestureIntent, apply_intent, SWIPE_THRESHOLD
from .card_view import CardView, build_card_view

__all__ = [
    'RecordSequence',
    'store_row_index',
    'GestureRecognizer',
    'GestureIntent',
    'apply_intent',
    'SWIPE_THRESHOLD',
    'CardView',
    'build_card_view'
]
