"""
Cursor state over the rows of a fetched sheet.

Holds the header row and the data rows in display order, tracks the
currently shown record, and keeps the cursor on a valid data row
through navigation and deletion. No UI framework dependencies.
"""
import logging
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

Row = List[str]


def store_row_index(total_rows: int, cursor: int) -> int:
    """
    Translate a display cursor into the row index used by the store.

    Data rows are displayed newest first, so the record under ``cursor``
    sits ``cursor`` rows from the end of the sheet as retrieved.

    Args:
        total_rows: Rows held by the sequence, header included
        cursor: Current cursor position (1 = first data row)

    Returns:
        0-based sheet row index, where the header is row 0
    """
    return total_rows - cursor


class RecordSequence:
    """
    Navigable, deletable sequence of records backed by a header/row table.

    Row 0 is always the header; the cursor ranges over 1..len(table)-1
    and is None when no data rows are loaded.
    """

    def __init__(self) -> None:
        self._table: List[Row] = [[]]
        self._cursor: Optional[int] = None

    def load(self, header_row: Sequence[str], data_rows: Sequence[Sequence[str]]) -> None:
        """
        Replace the table contents.

        Args:
            header_row: Column names
            data_rows: Records, already in display order
        """
        header = [str(name) for name in header_row]
        width = len(header)
        rows = []
        for raw in data_rows:
            row = [str(cell) for cell in raw]
            if len(row) < width:
                row.extend([""] * (width - len(row)))
            rows.append(row)

        self._table = [header] + rows
        self._cursor = 1 if rows else None
        logger.debug("Loaded %d records with %d columns", len(rows), width)

    @property
    def header(self) -> Row:
        return list(self._table[0])

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    @property
    def total_rows(self) -> int:
        """Number of rows held, header included."""
        return len(self._table)

    @property
    def count(self) -> int:
        """Number of data rows."""
        return len(self._table) - 1

    @property
    def is_empty(self) -> bool:
        return self._cursor is None

    @property
    def current_row(self) -> Optional[Row]:
        if self._cursor is None:
            return None
        return list(self._table[self._cursor])

    def field_value(self, name: str) -> str:
        """
        Look up a field of the current record by column name.

        Matching is case-insensitive; the first matching column wins.

        Returns:
            Cell text, or "" when the column is unknown or nothing is shown
        """
        if self._cursor is None:
            return ""
        wanted = name.lower()
        for index, column in enumerate(self._table[0]):
            if column.lower() == wanted:
                row = self._table[self._cursor]
                return row[index] if index < len(row) else ""
        return ""

    def can_go_previous(self) -> bool:
        return self._cursor is not None and self._cursor > 1

    def can_go_next(self) -> bool:
        return self._cursor is not None and self._cursor < len(self._table) - 1

    def go_previous(self) -> bool:
        if not self.can_go_previous():
            return False
        self._cursor -= 1
        logger.debug("Cursor moved back to %d", self._cursor)
        return True

    def go_next(self) -> bool:
        if not self.can_go_next():
            return False
        self._cursor += 1
        logger.debug("Cursor moved forward to %d", self._cursor)
        return True

    def delete_current(self) -> Optional[Row]:
        """
        Remove the record under the cursor.

        When the removed record was at the tail, the cursor is pulled back
        to max(1, new_length - 2).

        Returns:
            The removed row, or None when nothing was shown
        """
        if self._cursor is None:
            return None

        removed = self._table.pop(self._cursor)
        new_length = len(self._table)

        if new_length < 2:
            self._cursor = None
        elif self._cursor >= new_length - 1:
            self._cursor = max(1, new_length - 2)

        logger.debug("Removed record, %d left, cursor=%s", new_length - 1, self._cursor)
        return removed
