"""
Display snapshot of the record under the cursor.

Collects the job-posting fields shown on a card, decoded for display,
along with the navigation flags the renderer needs.
"""
from dataclasses import dataclass, field
from typing import Any, List

from ..field_decoder import decode_date, decode_list
from .record_sequence import RecordSequence


@dataclass
class CardView:
    """Everything a renderer needs to draw one card."""
    position: int = 0
    total: int = 0
    title: str = ""
    company_name: str = ""
    location: str = ""
    job_type: str = ""
    experience: str = ""
    salary: str = ""
    description: str = ""
    skills: List[Any] = field(default_factory=list)
    company_website: str = ""
    posted: str = ""
    can_go_previous: bool = False
    can_go_next: bool = False

    @property
    def label(self) -> str:
        return f"Job {self.position} of {self.total}"

    @property
    def is_empty(self) -> bool:
        return self.position == 0

    def __str__(self) -> str:
        return f"CardView({self.label}, title='{self.title}')"


def build_card_view(sequence: RecordSequence) -> CardView:
    """
    Build the card snapshot for the current cursor position.

    Args:
        sequence: Loaded record sequence

    Returns:
        CardView; an empty one when the sequence has no records
    """
    if sequence.is_empty:
        return CardView()

    value = sequence.field_value
    return CardView(
        position=sequence.cursor,
        total=sequence.count,
        title=value("title"),
        company_name=value("company_name"),
        location=value("location"),
        job_type=value("type"),
        experience=value("experience"),
        salary=value("salary"),
        description=value("description"),
        skills=decode_list(value("skills")),
        company_website=value("company_website"),
        posted=decode_date(value("currentDate")),
        can_go_previous=sequence.can_go_previous(),
        can_go_next=sequence.can_go_next(),
    )
