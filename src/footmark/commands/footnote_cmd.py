"""
footmark.commands.footnote_cmd - Cursor-driven footnote commands.

- new:            act on the footnote at --line/--col (create, jump, clean up)
- next / prev:    print the neighbouring reference as FILE:ROW:COL
- auto-reference: footnote repeated occurrences of footnoted words
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from footmark.commands.config_cmd import load_configuration
from footmark.config import FootnoteConfig
from footmark.core.insertion import auto_reference_all, new_footnote
from footmark.core.navigation import next_footnote, prev_footnote
from footmark.editor import setup
from footmark.utilities.files import document_text, read_document, write_document


def run(args: argparse.Namespace) -> int:
    """Dispatch on ``args.command``."""
    config = load_configuration(args)
    if config is None:
        return 1
    settings = setup(config)

    path = Path(args.file)
    if not path.is_file():
        print(f"Error: {path} not found", file=sys.stderr)
        return 1

    if args.command == "new":
        return _new(args, path, settings)
    elif args.command in ("next", "prev"):
        return _navigate(args, path)
    elif args.command == "auto-reference":
        return _auto_reference(args, path)
    else:
        print(f"Unknown footnote command: {args.command}", file=sys.stderr)
        return 1


def _new(args: argparse.Namespace, path: Path, settings: FootnoteConfig) -> int:
    before = path.read_text(encoding="utf-8")
    document = read_document(path, cursor=(args.line, args.col))
    if document.cursor != (args.line, args.col):
        print(f"Error: position {args.line}:{args.col} is outside {path}", file=sys.stderr)
        return 1

    result = new_footnote(document, settings)
    if document_text(document) != before:
        write_document(path, document)

    if not getattr(args, "quiet", False):
        row, col = document.cursor
        print(result.message)
        print(f"{path}:{row}:{col}")
    return 0


def _navigate(args: argparse.Namespace, path: Path) -> int:
    document = read_document(path, cursor=(args.line, args.col))
    step = next_footnote if args.command == "next" else prev_footnote
    ref = step(document)
    if ref is None:
        return 1

    row, col = document.cursor
    print(f"{path}:{row}:{col}")
    return 0


def _auto_reference(args: argparse.Namespace, path: Path) -> int:
    document = read_document(path)
    inserted = auto_reference_all(document)
    if inserted:
        write_document(path, document)
    if not getattr(args, "quiet", False):
        print(f"Inserted {inserted} reference(s) in {path}")
    return 0
