"""
footmark.commands.organize_cmd - Organize footnotes in markdown files.

Renumbers footnotes into first-occurrence order, removes orphan references
and sorts the footnote definitions. ``--check`` only reports.
"""

from __future__ import annotations

import argparse
import difflib
import sys
from pathlib import Path

from footmark.commands.config_cmd import load_configuration
from footmark.core.organize import organize_footnotes
from footmark.editor import setup
from footmark.utilities.files import document_text, expand_paths, read_document


def run(args: argparse.Namespace) -> int:
    """Run the organize command.

    Returns:
        0 on success, 1 if a file is missing or ``--check`` found work to do.
    """
    config = load_configuration(args)
    if config is None:
        return 1
    settings = setup(config)

    paths = expand_paths(args.paths, settings)
    missing = [p for p in paths if not p.is_file()]
    if missing:
        for path in missing:
            print(f"Error: {path} not found", file=sys.stderr)
        return 1

    check = getattr(args, "check", False)
    show_diff = getattr(args, "diff", False)
    quiet = getattr(args, "quiet", False)
    pending = 0

    for path in paths:
        before = path.read_text(encoding="utf-8")
        document = read_document(path)
        report = organize_footnotes(document)
        after = document_text(document)

        if after == before:
            if getattr(args, "verbose", False):
                print(f"{path}: {report}")
            continue

        pending += 1
        if show_diff:
            _print_diff(path, before, after)
        if check:
            if not quiet:
                print(f"Would reorganize {path}")
            continue

        path.write_text(after, encoding="utf-8")
        if not quiet:
            print(f"{path}: {report}")

    if check and pending:
        if not quiet:
            print(f"{pending} file(s) would be reorganized")
        return 1
    return 0


def _print_diff(path: Path, before: str, after: str) -> None:
    diff = difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile=f"{path} (before)",
        tofile=f"{path} (after)",
    )
    sys.stdout.writelines(diff)
