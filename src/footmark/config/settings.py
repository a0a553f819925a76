"""
footmark.config.settings - Immutable settings read by every operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import PurePath
from typing import Any

from footmark.config.defaults import DEFAULT_KEYS, DEFAULT_PATTERNS


@dataclass(frozen=True)
class FootnoteConfig:
    """
    Settings built once from the merged configuration mapping.

    Attributes:
        debug_print: Log every rename, shift and orphan removal.
        organize_on_save: Organize matching files when they are saved.
        organize_on_new: Organize right after a new footnote is created.
        patterns: File globs the save hook and directory expansion accept.
        keys: Command name -> key sequence; an empty string disables it.
    """

    debug_print: bool = False
    organize_on_save: bool = False
    organize_on_new: bool = False
    patterns: tuple[str, ...] = tuple(DEFAULT_PATTERNS)
    keys: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_KEYS))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FootnoteConfig":
        """Create FootnoteConfig from a (merged) configuration dictionary."""
        keys = dict(DEFAULT_KEYS)
        keys.update(data.get("keys", {}))
        return cls(
            debug_print=bool(data.get("debug_print", False)),
            organize_on_save=bool(data.get("organize_on_save", False)),
            organize_on_new=bool(data.get("organize_on_new", False)),
            patterns=tuple(data.get("patterns", DEFAULT_PATTERNS)),
            keys=keys,
        )

    def matches(self, path: str | PurePath) -> bool:
        """Whether ``path``'s file name matches one of ``patterns``."""
        name = PurePath(path).name
        return any(fnmatch(name, pattern) for pattern in self.patterns)
