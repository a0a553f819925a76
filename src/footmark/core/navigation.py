"""
footmark.core.navigation - Move between footnote references.

Content definition lines are skipped in both directions, so stepping
through references never lands inside the footnote list.
"""

from __future__ import annotations

from footmark.core.document import Document
from footmark.core.markers import Reference, is_content_line, iter_references


def find_next(document: Document, row: int, col: int) -> Reference | None:
    """First reference that starts strictly after ``(row, col)``."""
    lines = document.get_range(row, document.line_count())
    for offset, line in enumerate(lines):
        current_row = row + offset
        if is_content_line(line):
            continue
        for ref in iter_references(line, current_row):
            if current_row > row or ref.start_col > col:
                return ref
    return None


def find_prev(document: Document, row: int, col: int) -> Reference | None:
    """Last reference that ends at or before ``(row, col)``."""
    lines = document.get_range(1, row)
    for current_row in range(row, 0, -1):
        line = lines[current_row - 1]
        if is_content_line(line):
            continue
        candidates = [
            ref
            for ref in iter_references(line, current_row)
            if current_row < row or ref.end_col <= col
        ]
        if candidates:
            return candidates[-1]
    return None


def _jump(document: Document, ref: Reference | None) -> Reference | None:
    # Cursor lands on the label digits
    if ref is not None:
        document.set_cursor(ref.row, ref.digits_span[0])
    return ref


def next_footnote(document: Document) -> Reference | None:
    """Move the cursor to the next reference; no-op if there is none."""
    row, col = document.cursor
    return _jump(document, find_next(document, row, col))


def prev_footnote(document: Document) -> Reference | None:
    """Move the cursor to the previous reference; no-op if there is none."""
    row, col = document.cursor
    return _jump(document, find_prev(document, row, col))
