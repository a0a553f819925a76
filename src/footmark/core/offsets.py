"""
footmark.core.offsets - Keep scanned columns valid across same-row edits.

One scan is reused for a whole renumbering pass. When the text of a marker
changes width (``[^9]`` -> ``[^10]``) or a marker is removed, every later
marker on the same row moves by the same amount. Reference lists are in
reading order, so the markers to shift are exactly the run of entries that
follow the edited one and share its row.
"""

from __future__ import annotations

import logging

from footmark.core.markers import Reference

logger = logging.getLogger(__name__)


def shift_following(references: list[Reference], index: int, delta: int) -> int:
    """Shift the references after ``index`` that sit on the same row.

    Args:
        references: Location list of the current scan.
        index: Position of the reference that was just edited.
        delta: Change in line length caused by that edit.

    Returns:
        Number of references shifted.
    """
    if delta == 0:
        return 0

    row = references[index].row
    shifted = 0
    for ref in references[index + 1 :]:
        if ref.row != row:
            break
        ref.start_col += delta
        ref.end_col += delta
        shifted += 1
        logger.debug("shifted(%d): %d, %d:%d", delta, ref.row, ref.start_col, ref.end_col)
    return shifted
