"""
footmark.core.document - Line-addressable view of a text buffer.

The footnote algorithms never own the text they edit. They talk to a host
buffer through the small ``Buffer`` protocol (an editor window, or the
in-memory ``TextBuffer`` used by the CLI), wrapped by ``Document``.

Coordinates:
- rows are 1-based
- columns are 0-based string indices, spans are half-open ``[start, end)``
"""

from __future__ import annotations

from typing import Protocol


class Buffer(Protocol):
    """Host collaborator interface consumed by the footnote core."""

    def line_count(self) -> int: ...

    def get_lines(self, first: int, last: int) -> list[str]:
        """Return rows ``first..last`` (inclusive)."""
        ...

    def set_text(self, row: int, start_col: int, end_col: int, text: str) -> None:
        """Replace ``[start_col, end_col)`` on ``row`` with ``text``."""
        ...

    def set_lines(self, first: int, last: int, lines: list[str]) -> None:
        """Replace rows ``first..last`` (inclusive) with ``lines``.

        ``last == first - 1`` inserts before ``first`` without replacing.
        """
        ...

    def get_cursor(self) -> tuple[int, int]: ...

    def set_cursor(self, row: int, col: int) -> None: ...


class TextBuffer:
    """In-memory ``Buffer`` backed by a list of strings.

    Example:
        >>> buf = TextBuffer.from_text("Hello[^1]\\n\\n[^1]: hi\\n")
        >>> buf.line_count()
        3
        >>> buf.to_text()
        'Hello[^1]\\n\\n[^1]: hi\\n'
    """

    def __init__(
        self,
        lines: list[str] | None = None,
        cursor: tuple[int, int] = (1, 0),
        trailing_newline: bool = False,
    ) -> None:
        self._lines: list[str] = list(lines) if lines else [""]
        self._cursor = (1, 0)
        self.trailing_newline = trailing_newline
        self.set_cursor(*cursor)

    @classmethod
    def from_text(cls, text: str, cursor: tuple[int, int] = (1, 0)) -> TextBuffer:
        """Split ``text`` into rows, remembering whether it ended with a newline."""
        trailing = text.endswith("\n")
        body = text[:-1] if trailing else text
        return cls(body.split("\n"), cursor=cursor, trailing_newline=trailing)

    def to_text(self) -> str:
        text = "\n".join(self._lines)
        if self.trailing_newline:
            text += "\n"
        return text

    def line_count(self) -> int:
        return len(self._lines)

    def get_lines(self, first: int, last: int) -> list[str]:
        self._check_row(first)
        self._check_row(last)
        return self._lines[first - 1 : last]

    def set_text(self, row: int, start_col: int, end_col: int, text: str) -> None:
        self._check_row(row)
        line = self._lines[row - 1]
        self._lines[row - 1] = line[:start_col] + text + line[end_col:]

    def set_lines(self, first: int, last: int, lines: list[str]) -> None:
        if not 1 <= first <= len(self._lines) + 1 or last < first - 1:
            raise IndexError(f"Invalid row range {first}..{last}")
        self._lines[first - 1 : last] = lines
        if not self._lines:
            self._lines = [""]

    def get_cursor(self) -> tuple[int, int]:
        return self._cursor

    def set_cursor(self, row: int, col: int) -> None:
        row = min(max(row, 1), len(self._lines))
        col = min(max(col, 0), len(self._lines[row - 1]))
        self._cursor = (row, col)

    def _check_row(self, row: int) -> None:
        if not 1 <= row <= len(self._lines):
            raise IndexError(f"Row {row} out of range 1..{len(self._lines)}")


class Document:
    """Line-addressable view of a ``Buffer``.

    Reads always go to the buffer; nothing is cached, so a caller that has
    just mutated rows sees the shifted text on its next read.
    """

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer

    @classmethod
    def from_text(cls, text: str, cursor: tuple[int, int] = (1, 0)) -> Document:
        return cls(TextBuffer.from_text(text, cursor=cursor))

    @classmethod
    def from_lines(cls, lines: list[str], cursor: tuple[int, int] = (1, 0)) -> Document:
        return cls(TextBuffer(lines, cursor=cursor))

    # -- reads ---------------------------------------------------------------

    def line_count(self) -> int:
        return self.buffer.line_count()

    def lines(self) -> list[str]:
        """Return every row of the document."""
        return self.buffer.get_lines(1, self.buffer.line_count())

    def get_range(self, first: int, last: int) -> list[str]:
        """Return rows ``first..last`` (inclusive)."""
        return self.buffer.get_lines(first, last)

    def line(self, row: int) -> str:
        return self.buffer.get_lines(row, row)[0]

    # -- writes --------------------------------------------------------------

    def replace_span(self, row: int, start_col: int, end_col: int, text: str) -> int:
        """Replace ``[start_col, end_col)`` on ``row``.

        Returns:
            The change in line length (``len(text) - (end_col - start_col)``).
        """
        self.buffer.set_text(row, start_col, end_col, text)
        return len(text) - (end_col - start_col)

    def insert_text(self, row: int, col: int, text: str) -> None:
        self.buffer.set_text(row, col, col, text)

    def replace_line(self, row: int, text: str) -> None:
        self.buffer.set_lines(row, row, [text])

    def delete_line(self, row: int) -> None:
        self.buffer.set_lines(row, row, [])

    def append_lines(self, lines: list[str]) -> None:
        end = self.buffer.line_count()
        self.buffer.set_lines(end + 1, end, lines)

    # -- cursor --------------------------------------------------------------

    @property
    def cursor(self) -> tuple[int, int]:
        return self.buffer.get_cursor()

    def set_cursor(self, row: int, col: int) -> None:
        self.buffer.set_cursor(row, col)
