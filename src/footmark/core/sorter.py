"""
footmark.core.sorter - Reorder content definition lines by label.
"""

from __future__ import annotations

import logging

from footmark.core.document import Document
from footmark.core.markers import ContentDefinition, content_label

logger = logging.getLogger(__name__)


def sort_contents(
    document: Document,
    contents: list[ContentDefinition],
    cursor_row: int,
) -> tuple[int, int]:
    """Swap whole content lines so the i-th content row carries label i.

    Only the rows that already hold content definitions are permuted;
    blank lines or prose between definitions stay where they are.

    Args:
        document: Document whose labels are already canonical.
        contents: Content definitions of a scan taken after renumbering.
        cursor_row: Row the cursor is on; followed through each swap.

    Returns:
        ``(swaps, cursor_row)`` - number of line swaps and the remapped row.
    """
    rows = [content.row for content in contents]
    swaps = 0

    for position, target in enumerate(rows, start=1):
        for current in rows[position - 1 :]:
            if content_label(document.line(current)) != position:
                continue
            if current != target:
                target_text = document.line(target)
                document.replace_line(target, document.line(current))
                document.replace_line(current, target_text)
                swaps += 1
                logger.debug("Swapped content rows %d and %d", target, current)

                if cursor_row == current:
                    cursor_row = target
                elif cursor_row == target:
                    cursor_row = current
            break

    return swaps, cursor_row
