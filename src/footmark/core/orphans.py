"""
footmark.core.orphans - Remove references whose label has no content line.
"""

from __future__ import annotations

import logging

from footmark.core.document import Document
from footmark.core.markers import ScanResult
from footmark.core.offsets import shift_following

logger = logging.getLogger(__name__)


def resolve_orphan(document: Document, scan: ScanResult, label: int) -> bool:
    """Delete every reference to ``label`` if no content definition carries it.

    Deleted references are tombstoned in ``scan.references`` so indices stay
    stable for a caller that is iterating the same list.

    Args:
        document: Document being organized.
        scan: Location lists of the current pass.
        label: Label to check.

    Returns:
        True if ``label`` was an orphan (and its references were removed).
    """
    if scan.has_content(label):
        return False

    for index, ref in scan.live_references():
        if ref.label != label:
            continue
        delta = document.replace_span(ref.row, ref.start_col, ref.end_col, "")
        ref.deleted = True
        logger.debug("cleanup_orphan: %d at row %d", label, ref.row)
        shift_following(scan.references, index, delta)

    return True
