"""
footmark.core.renumber - Relabel footnotes into first-occurrence order.

A single left-to-right pass over the references. The counter holds the next
canonical label; the first live reference carrying a label at or above the
counter either gets removed as an orphan or has its label *swapped* with the
counter value everywhere (references and content). Swapping rather than
overwriting keeps every label pointing at some content line at each step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from footmark.core.document import Document
from footmark.core.markers import CONTENT_PATTERN, ScanResult
from footmark.core.offsets import shift_following
from footmark.core.orphans import resolve_orphan

logger = logging.getLogger(__name__)


@dataclass
class RenumberResult:
    """Outcome of one renumbering pass.

    Attributes:
        renames: ``(old, new)`` label pairs, in the order they were applied.
        orphans: Labels whose references were removed.
        assigned: Number of canonical labels handed out.
    """

    renames: list[tuple[int, int]] = field(default_factory=list)
    orphans: list[int] = field(default_factory=list)
    assigned: int = 0


def swap_reference_labels(document: Document, scan: ScanResult, a: int, b: int) -> int:
    """Exchange labels ``a`` and ``b`` on every live reference.

    Returns:
        Number of references rewritten.
    """
    if a == b:
        return 0

    rewritten = 0
    for index, ref in scan.live_references():
        if ref.label == a:
            new_label = b
        elif ref.label == b:
            new_label = a
        else:
            continue

        logger.debug("ref_rename: %d -> %d", ref.label, new_label)
        digits_start, digits_end = ref.digits_span
        delta = document.replace_span(ref.row, digits_start, digits_end, str(new_label))
        ref.end_col += delta
        ref.label = new_label
        shift_following(scan.references, index, delta)
        rewritten += 1
    return rewritten


def swap_content_labels(document: Document, scan: ScanResult, a: int, b: int) -> int:
    """Exchange labels ``a`` and ``b`` on every content definition line.

    Returns:
        Number of content lines rewritten.
    """
    if a == b:
        return 0

    rewritten = 0
    for content in scan.contents:
        if content.label == a:
            new_label = b
        elif content.label == b:
            new_label = a
        else:
            continue

        match = CONTENT_PATTERN.match(document.line(content.row))
        if match is None:
            logger.warning("Row %d is no longer a content definition", content.row)
            continue
        document.replace_span(
            content.row, match.start("label"), match.end("label"), str(new_label)
        )
        content.label = new_label
        rewritten += 1
    return rewritten


def renumber_labels(document: Document, scan: ScanResult) -> RenumberResult:
    """Relabel references and content so labels follow first occurrence.

    Args:
        document: Document being organized.
        scan: A fresh scan of ``document``; updated in place.

    Returns:
        RenumberResult describing what changed.
    """
    result = RenumberResult()
    counter = 1

    for _index, ref in scan.live_references():
        label = ref.label
        if label < counter:
            continue

        if resolve_orphan(document, scan, label):
            result.orphans.append(label)
            continue

        if label != counter:
            logger.debug("%d -> %d", label, counter)
            swap_reference_labels(document, scan, label, counter)
            swap_content_labels(document, scan, label, counter)
            result.renames.append((label, counter))
        counter += 1

    result.assigned = counter - 1
    return result
