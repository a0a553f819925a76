"""
footmark.core - Footnote scanning, renumbering and editing
"""

from footmark.core.document import Buffer, Document, TextBuffer
from footmark.core.insertion import (
    InsertOutcome,
    InsertResult,
    auto_reference_all,
    new_footnote,
)
from footmark.core.markers import ContentDefinition, Reference, ScanResult, scan_markers
from footmark.core.navigation import find_next, find_prev, next_footnote, prev_footnote
from footmark.core.organize import OrganizeReport, organize_footnotes

__all__ = [
    "Buffer",
    "ContentDefinition",
    "Document",
    "InsertOutcome",
    "InsertResult",
    "OrganizeReport",
    "Reference",
    "ScanResult",
    "TextBuffer",
    "auto_reference_all",
    "find_next",
    "find_prev",
    "new_footnote",
    "next_footnote",
    "organize_footnotes",
    "prev_footnote",
    "scan_markers",
]
