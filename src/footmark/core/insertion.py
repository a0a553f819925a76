"""
footmark.core.insertion - "Act on the footnote at the cursor".

``new_footnote`` looks at the cursor context once and does exactly one of:

- on a reference (or on a word directly followed by one): jump to its
  content line, or delete the reference if it has no content
- on a content line: jump to the first reference with that label, or
  delete the content line if nothing references it
- on a word that is already footnoted elsewhere: reuse that label
- otherwise: mint a new label, insert the reference after the word and
  append an empty content stub at the end of the document
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from footmark.config import FootnoteConfig
from footmark.core.document import Document
from footmark.core.markers import (
    REFERENCE_PATTERN,
    WORD_REFERENCE_PATTERN,
    content_label,
    format_content,
    format_reference,
    is_content_line,
    next_footnote_number,
    reference_at,
    scan_markers,
)
from footmark.core.organize import organize_footnotes

logger = logging.getLogger(__name__)

WORD_CHAR = re.compile(r"\w")
TOKEN_PATTERN = re.compile(r"\S+")


class InsertOutcome(Enum):
    """What ``new_footnote`` did."""

    JUMPED_TO_CONTENT = "jumped_to_content"
    JUMPED_TO_REFERENCE = "jumped_to_reference"
    REMOVED_ORPHAN_REFERENCE = "removed_orphan_reference"
    REMOVED_ORPHAN_CONTENT = "removed_orphan_content"
    REUSED_LABEL = "reused_label"
    CREATED = "created"


_MESSAGES = {
    InsertOutcome.JUMPED_TO_CONTENT: "Jumped to footnote {label}",
    InsertOutcome.JUMPED_TO_REFERENCE: "Jumped to reference of footnote {label}",
    InsertOutcome.REMOVED_ORPHAN_REFERENCE: "Removed orphan reference {label}",
    InsertOutcome.REMOVED_ORPHAN_CONTENT: "Removed orphan footnote {label}",
    InsertOutcome.REUSED_LABEL: "Referenced existing footnote: {label}",
    InsertOutcome.CREATED: "New footnote created",
}


@dataclass(frozen=True)
class InsertResult:
    outcome: InsertOutcome
    label: int

    @property
    def message(self) -> str:
        return _MESSAGES[self.outcome].format(label=self.label)


def word_bounds(line: str, col: int) -> tuple[int, int]:
    """Columns ``[start, end)`` of the word touching ``col``.

    The word may extend left of the cursor, so a cursor sitting right after
    the last letter (insert mode) still resolves to that word.
    """
    start = col
    while start > 0 and WORD_CHAR.match(line, start - 1):
        start -= 1
    end = col
    while end < len(line) and WORD_CHAR.match(line, end):
        end += 1
    return start, end


def existing_footnote(lines: list[str], word: str) -> int | None:
    """Label of the first ``word[^N]`` in the document, if any."""
    for line in lines:
        if is_content_line(line):
            continue
        for match in WORD_REFERENCE_PATTERN.finditer(line):
            if match.group("word") == word:
                return int(match.group("label"))
    return None


def new_footnote(document: Document, config: FootnoteConfig | None = None) -> InsertResult:
    """Create, reuse, jump to or clean up the footnote at the cursor.

    Args:
        document: Document to act on; the cursor gives the context.
        config: Settings; ``organize_on_new`` organizes after creating.

    Returns:
        InsertResult naming the branch taken and the label involved.
    """
    config = config or FootnoteConfig()
    row, col = document.cursor
    lines = document.lines()
    line = lines[row - 1]

    # The [^N]: marker of a definition line is not a reference
    label = content_label(line)
    if label is not None:
        return _act_on_content(document, lines, row, label)

    word_start, word_end = word_bounds(line, col)
    hit = reference_at(line, col)
    if hit is None:
        match = REFERENCE_PATTERN.match(line, word_end)
        if match is not None:
            hit = (match.start(), match.end(), int(match.group("label")))
    if hit is not None:
        return _act_on_reference(document, lines, row, hit)

    word = line[word_start:word_end]
    if word:
        existing = existing_footnote(lines, word)
        if existing is not None:
            marker = format_reference(existing)
            document.insert_text(row, word_end, marker)
            document.set_cursor(row, word_end + len(marker))
            result = InsertResult(InsertOutcome.REUSED_LABEL, existing)
            logger.info(result.message)
            return result

    return _create(document, lines, row, word_end, config)


def _act_on_reference(
    document: Document, lines: list[str], row: int, hit: tuple[int, int, int]
) -> InsertResult:
    start_col, end_col, label = hit
    for content_row in range(len(lines), 0, -1):
        if content_label(lines[content_row - 1]) == label:
            document.set_cursor(content_row, len(format_content(label)))
            return InsertResult(InsertOutcome.JUMPED_TO_CONTENT, label)

    document.replace_span(row, start_col, end_col, "")
    document.set_cursor(row, start_col)
    result = InsertResult(InsertOutcome.REMOVED_ORPHAN_REFERENCE, label)
    logger.info(result.message)
    return result


def _act_on_content(document: Document, lines: list[str], row: int, label: int) -> InsertResult:
    # TODO: cycle through the remaining references when a label is used more than once
    for ref in scan_markers(lines).references:
        if ref.label == label:
            document.set_cursor(ref.row, ref.digits_span[0])
            return InsertResult(InsertOutcome.JUMPED_TO_REFERENCE, label)

    document.delete_line(row)
    document.set_cursor(min(row, document.line_count()), 0)
    result = InsertResult(InsertOutcome.REMOVED_ORPHAN_CONTENT, label)
    logger.info(result.message)
    return result


def _create(
    document: Document, lines: list[str], row: int, word_end: int, config: FootnoteConfig
) -> InsertResult:
    label = next_footnote_number(lines)
    document.insert_text(row, word_end, format_reference(label))

    stub = format_content(label)
    document.append_lines(["", stub])
    document.set_cursor(document.line_count(), len(stub))
    logger.info("New footnote created")

    if config.organize_on_new:
        organize_footnotes(document)
        cursor_row, _ = document.cursor
        label = content_label(document.line(cursor_row)) or label

    return InsertResult(InsertOutcome.CREATED, label)


def auto_reference_all(document: Document) -> int:
    """Footnote every repeated occurrence of an already footnoted word.

    The first ``WORD[^N]`` seen for a word decides its label. Every other
    whitespace-delimited occurrence of that word not already followed by a
    marker gets ``[^N]`` appended. Content lines are left alone.

    Returns:
        Number of references inserted.
    """
    lines = document.lines()
    labels: dict[str, int] = {}
    for line in lines:
        if is_content_line(line):
            continue
        for match in WORD_REFERENCE_PATTERN.finditer(line):
            labels.setdefault(match.group("word"), int(match.group("label")))

    if not labels:
        return 0

    inserted = 0
    for row, line in enumerate(lines, start=1):
        if is_content_line(line):
            continue
        pieces: list[str] = []
        last = 0
        for token in TOKEN_PATTERN.finditer(line):
            label = labels.get(token.group())
            if label is None or REFERENCE_PATTERN.match(line, token.end()):
                continue
            pieces.append(line[last : token.end()])
            pieces.append(format_reference(label))
            last = token.end()
            inserted += 1
        if pieces:
            pieces.append(line[last:])
            document.replace_line(row, "".join(pieces))

    logger.info("Auto-referenced all repeated words with footnotes")
    return inserted
