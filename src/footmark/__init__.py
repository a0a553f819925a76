"""
footmark - Markdown footnote organizer

Keeps inline footnote references (``[^N]``) and footnote definitions
(``[^N]: ...``) numbered 1..K in order of first reference, removes
references whose footnote is gone, and helps create, reuse and navigate
footnotes from an editor or the command line.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("footmark")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__author__ = "Anspar"
__license__ = "MIT"

from footmark.config import FootnoteConfig
from footmark.core import Document, TextBuffer, new_footnote, organize_footnotes
from footmark.editor import FootnoteEditor, setup

__all__ = [
    "__version__",
    "Document",
    "FootnoteConfig",
    "FootnoteEditor",
    "TextBuffer",
    "new_footnote",
    "organize_footnotes",
    "setup",
]
