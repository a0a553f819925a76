"""Shared pytest fixtures."""

import os

import pytest

from footmark.core.document import Document
from footmark.core.markers import scan_markers


@pytest.fixture(autouse=True)
def _clear_footmark_env(monkeypatch):
    """Keep FOOTMARK_* variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("FOOTMARK_"):
            monkeypatch.delenv(name)


@pytest.fixture
def make_document():
    """Build an in-memory document from lines."""

    def _make(*lines: str, cursor: tuple[int, int] = (1, 0)) -> Document:
        return Document.from_lines(list(lines), cursor=cursor)

    return _make


@pytest.fixture
def assert_canonical():
    """Check the numbering a fully organized document must have."""

    def _check(document: Document) -> None:
        scan = scan_markers(document.lines())
        first_seen: list[int] = []
        for ref in scan.references:
            if ref.label not in first_seen:
                first_seen.append(ref.label)
        content_labels = [content.label for content in scan.contents]

        assert first_seen == list(range(1, len(first_seen) + 1))
        assert content_labels == list(range(1, len(content_labels) + 1))
        assert set(first_seen) <= set(content_labels)

    return _check
