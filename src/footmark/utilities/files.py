"""File I/O for documents edited from the command line.

Every read and write uses ``encoding="utf-8"`` explicitly.
"""

from __future__ import annotations

from pathlib import Path

from footmark.config import FootnoteConfig
from footmark.core.document import Document, TextBuffer


def read_document(path: Path, cursor: tuple[int, int] = (1, 0)) -> Document:
    """Load ``path`` into an in-memory document."""
    text = Path(path).read_text(encoding="utf-8")
    return Document(TextBuffer.from_text(text, cursor=cursor))


def document_text(document: Document) -> str:
    buffer = document.buffer
    if isinstance(buffer, TextBuffer):
        return buffer.to_text()
    return "\n".join(document.lines())


def write_document(path: Path, document: Document) -> None:
    Path(path).write_text(document_text(document), encoding="utf-8")


def expand_paths(paths: list[Path], config: FootnoteConfig) -> list[Path]:
    """Expand directories into the files matching ``config.patterns``.

    Files named explicitly are kept even if they do not match.
    """
    expanded: list[Path] = []
    seen: set[Path] = set()
    for path in paths:
        path = Path(path)
        if path.is_dir():
            candidates = sorted(
                p for p in path.rglob("*") if p.is_file() and config.matches(p)
            )
        else:
            candidates = [path]
        for candidate in candidates:
            key = candidate.resolve()
            if key not in seen:
                seen.add(key)
                expanded.append(candidate)
    return expanded
