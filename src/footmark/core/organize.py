"""
footmark.core.organize - Batch renumber, orphan cleanup and content sort.

Phases:
1. scan the document
2. renumber labels in first-occurrence order, removing orphan references
3. re-scan (rows and columns may have moved)
4. sort content lines by label, keeping the cursor on the same text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from footmark.core.document import Document
from footmark.core.markers import scan_markers
from footmark.core.renumber import renumber_labels
from footmark.core.sorter import sort_contents

logger = logging.getLogger(__name__)


@dataclass
class OrganizeReport:
    """Summary of an organize pass."""

    renames: list[tuple[int, int]] = field(default_factory=list)
    orphans: list[int] = field(default_factory=list)
    footnotes: int = 0
    swaps: int = 0
    changed: bool = False

    def __str__(self) -> str:
        if not self.changed:
            return "Footnotes already organized"
        parts = [f"{self.footnotes} footnotes"]
        if self.renames:
            parts.append(f"{len(self.renames)} relabeled")
        if self.orphans:
            parts.append(f"{len(self.orphans)} orphan labels removed")
        if self.swaps:
            parts.append(f"{self.swaps} content lines moved")
        return ", ".join(parts)


def organize_footnotes(document: Document) -> OrganizeReport:
    """Bring every footnote in ``document`` into canonical numbering.

    After this runs, content labels are ``1..K`` in order of first
    reference, each content line sits at the position matching its label,
    and references without content are gone. Running it again is a no-op.

    Args:
        document: Document to organize in place.

    Returns:
        OrganizeReport describing the changes.
    """
    before = document.lines()
    scan = scan_markers(before)
    if not scan.references:
        return OrganizeReport()

    cursor_row, cursor_col = document.cursor

    renumbered = renumber_labels(document, scan)

    rescan = scan_markers(document.lines())
    swaps, cursor_row = sort_contents(document, rescan.contents, cursor_row)

    document.set_cursor(cursor_row, cursor_col)

    report = OrganizeReport(
        renames=renumbered.renames,
        orphans=renumbered.orphans,
        footnotes=renumbered.assigned,
        swaps=swaps,
        changed=document.lines() != before,
    )
    logger.debug("organize: %s", report)
    return report
