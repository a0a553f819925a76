"""
footmark.editor - Session object a host editor drives.

A host adapter calls ``setup()`` once with the user's options, wraps each
open buffer in a ``FootnoteEditor`` and registers ``keymap()`` entries and
the ``on_save`` hook with its own event system.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import PurePath
from typing import Any

from footmark.config import DEFAULT_CONFIG, FootnoteConfig, merge_configs
from footmark.core.document import Document
from footmark.core.insertion import InsertResult, auto_reference_all, new_footnote
from footmark.core.markers import Reference
from footmark.core.navigation import next_footnote, prev_footnote
from footmark.core.organize import OrganizeReport, organize_footnotes

logger = logging.getLogger(__name__)


def setup(opts: dict[str, Any] | None = None) -> FootnoteConfig:
    """Merge user options over the defaults and freeze them.

    Example:
        >>> config = setup({"organize_on_new": True, "keys": {"next_footnote": ""}})
        >>> config.keys["new_footnote"]
        '<C-f>'
    """
    config = FootnoteConfig.from_dict(merge_configs(DEFAULT_CONFIG, opts or {}))
    if config.debug_print:
        logging.getLogger("footmark").setLevel(logging.DEBUG)
    return config


class FootnoteEditor:
    """Footnote operations bound to one document and one configuration."""

    def __init__(self, document: Document, config: FootnoteConfig | None = None) -> None:
        self.document = document
        self.config = config or FootnoteConfig()

    def new_footnote(self) -> InsertResult:
        return new_footnote(self.document, self.config)

    def organize(self) -> OrganizeReport:
        return organize_footnotes(self.document)

    def next_footnote(self) -> Reference | None:
        return next_footnote(self.document)

    def prev_footnote(self) -> Reference | None:
        return prev_footnote(self.document)

    def auto_reference_all(self) -> int:
        return auto_reference_all(self.document)

    def on_save(self, path: str | PurePath) -> OrganizeReport | None:
        """Save hook: organize if enabled and ``path`` matches ``patterns``."""
        if not self.config.organize_on_save or not self.config.matches(path):
            return None
        logger.debug("Organizing %s on save", path)
        return self.organize()

    def keymap(self) -> dict[str, Callable[[], Any]]:
        """Key sequence -> operation, for every non-empty configured key."""
        commands: dict[str, Callable[[], Any]] = {
            "new_footnote": self.new_footnote,
            "organize_footnotes": self.organize,
            "next_footnote": self.next_footnote,
            "prev_footnote": self.prev_footnote,
        }
        return {
            key: commands[name]
            for name, key in self.config.keys.items()
            if key and name in commands
        }
