"""
footmark.cli - Command-line interface.

Main entry point for the footmark CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from footmark import __version__
from footmark.commands import config_cmd, footnote_cmd, organize_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="footmark",
        description="Keep markdown footnotes numbered, ordered and consistent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  footmark organize notes.md            # Renumber and sort footnotes in place
  footmark organize docs/ --check       # Exit 1 if any file needs organizing
  footmark organize notes.md --diff     # Show what organize changes
  footmark new notes.md --line 3 --col 10
  footmark next notes.md --line 1 --col 0
  footmark auto-reference notes.md      # Footnote repeated footnoted words

Positions use 1-based lines and 0-based columns.

Configuration:
  footmark config path                  # Show config file location
  footmark config show                  # View all settings
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"footmark {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output (debug logging)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # organize command
    organize_parser = subparsers.add_parser(
        "organize",
        help="Renumber footnotes, drop orphan references and sort definitions",
    )
    organize_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Files or directories (directories are searched for configured patterns)",
        metavar="PATH",
    )
    organize_parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if any file would change",
    )
    organize_parser.add_argument(
        "--diff",
        action="store_true",
        help="Print a unified diff of the changes",
    )

    # cursor-driven commands
    for name, help_text in (
        ("new", "Create, jump to or clean up the footnote at a position"),
        ("next", "Print the next footnote reference after a position"),
        ("prev", "Print the previous footnote reference before a position"),
    ):
        cmd_parser = subparsers.add_parser(name, help=help_text)
        cmd_parser.add_argument("file", type=Path, help="Markdown file", metavar="FILE")
        cmd_parser.add_argument(
            "--line", type=int, default=1, help="1-based line (default: 1)", metavar="N"
        )
        cmd_parser.add_argument(
            "--col", type=int, default=0, help="0-based column (default: 0)", metavar="N"
        )

    auto_parser = subparsers.add_parser(
        "auto-reference",
        help="Footnote every repeated occurrence of an already footnoted word",
    )
    auto_parser.add_argument("file", type=Path, help="Markdown file", metavar="FILE")

    # config command
    config_parser = subparsers.add_parser("config", help="Inspect configuration")
    config_parser.add_argument(
        "config_action",
        nargs="?",
        choices=["path", "show"],
        help="path: config file location, show: merged settings",
    )

    subparsers.add_parser("version", help="Show version")

    return parser


def configure_logging(verbose: bool) -> None:
    """Send footmark log records to stderr."""
    logger = logging.getLogger("footmark")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install footmark[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    try:
        if args.command == "organize":
            return organize_cmd.run(args)
        elif args.command in ("new", "next", "prev", "auto-reference"):
            return footnote_cmd.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        elif args.command == "version":
            print(f"footmark {__version__}")
            return 0
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1
