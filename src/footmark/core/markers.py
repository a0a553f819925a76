"""
footmark.core.markers - Footnote marker patterns and the document scanner.

Recognizes exactly two syntaxes:
- reference: ``[^N]`` anywhere on a line
- content definition: a line starting with ``[^N]:``

A content line is classified only as content; references inside its
body are not collected.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

REFERENCE_PATTERN = re.compile(r"\[\^(?P<label>\d+)\]")
CONTENT_PATTERN = re.compile(r"^\[\^(?P<label>\d+)\]:")
# WORD[^N] where WORD is the non-whitespace run right before the marker
WORD_REFERENCE_PATTERN = re.compile(r"(?P<word>\S+?)\[\^(?P<label>\d+)\]")

# Width of the fixed "[^" and "]" parts around the digits
MARKER_OVERHEAD = 3


def format_reference(label: int) -> str:
    return f"[^{label}]"


def format_content(label: int) -> str:
    return f"[^{label}]: "


@dataclass
class Reference:
    """An inline ``[^label]`` marker.

    Attributes:
        row: 1-based row.
        start_col: Column of ``[``.
        end_col: Column just past ``]``.
        label: Numeric label.
        deleted: Tombstone set when the marker was removed during a pass.
    """

    row: int
    start_col: int
    end_col: int
    label: int
    deleted: bool = False

    @property
    def digits_span(self) -> tuple[int, int]:
        """Columns of the label digits, excluding ``[^`` and ``]``."""
        return self.start_col + 2, self.end_col - 1

    def contains(self, row: int, col: int) -> bool:
        return row == self.row and self.start_col <= col < self.end_col


@dataclass
class ContentDefinition:
    """A ``[^label]: ...`` definition line."""

    row: int
    label: int


@dataclass
class ScanResult:
    """Location lists produced by one scan, in reading order."""

    references: list[Reference] = field(default_factory=list)
    contents: list[ContentDefinition] = field(default_factory=list)

    def live_references(self) -> Iterator[tuple[int, Reference]]:
        """Yield ``(index, reference)`` for references not tombstoned."""
        for index, ref in enumerate(self.references):
            if not ref.deleted:
                yield index, ref

    def has_content(self, label: int) -> bool:
        return any(content.label == label for content in self.contents)


def content_label(line: str) -> int | None:
    """Return the label if ``line`` is a content definition."""
    match = CONTENT_PATTERN.match(line)
    return int(match.group("label")) if match else None


def is_content_line(line: str) -> bool:
    return CONTENT_PATTERN.match(line) is not None


def iter_references(line: str, row: int) -> Iterator[Reference]:
    """Yield every reference on a single non-content line, left to right."""
    for match in REFERENCE_PATTERN.finditer(line):
        yield Reference(
            row=row,
            start_col=match.start(),
            end_col=match.end(),
            label=int(match.group("label")),
        )


def scan_markers(lines: list[str]) -> ScanResult:
    """Scan the whole document once.

    Args:
        lines: Every row of the document (index 0 is row 1).

    Returns:
        ScanResult with references and content definitions in reading order.
    """
    result = ScanResult()
    for row, line in enumerate(lines, start=1):
        label = content_label(line)
        if label is not None:
            result.contents.append(ContentDefinition(row=row, label=label))
            continue
        result.references.extend(iter_references(line, row))

    logger.debug(
        "Scanned %d references and %d content definitions",
        len(result.references),
        len(result.contents),
    )
    return result


def reference_at(line: str, col: int) -> tuple[int, int, int] | None:
    """Find the reference whose span covers ``col``.

    Returns:
        ``(start_col, end_col, label)`` or None.
    """
    for match in REFERENCE_PATTERN.finditer(line):
        if match.start() <= col < match.end():
            return match.start(), match.end(), int(match.group("label"))
    return None


def next_footnote_number(lines: list[str]) -> int:
    """One past the highest label anywhere in the document (1 if none)."""
    highest = 0
    for line in lines:
        for match in REFERENCE_PATTERN.finditer(line):
            highest = max(highest, int(match.group("label")))
    return highest + 1
