"""
footmark.commands.config_cmd - Inspect the active configuration.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import tomlkit

from footmark.config import (
    DEFAULT_CONFIG,
    _apply_env_overrides,
    find_config_file,
    load_config,
    merge_configs,
)


def resolve_config_path(args: argparse.Namespace) -> Path | None:
    config_path = getattr(args, "config", None)
    if config_path:
        return Path(config_path)
    return find_config_file(Path.cwd())


def load_configuration(args: argparse.Namespace) -> dict[str, Any] | None:
    """Load configuration from file or use defaults."""
    config_path = resolve_config_path(args)

    if config_path and config_path.exists():
        try:
            return load_config(config_path)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return None
    elif getattr(args, "config", None):
        print(f"Error loading config: {config_path} not found", file=sys.stderr)
        return None
    else:
        return _apply_env_overrides(merge_configs(DEFAULT_CONFIG, {}))


def run(args: argparse.Namespace) -> int:
    """Run the config command.

    Subcommands:
    - path: Show which config file is in effect
    - show: Print the merged configuration as TOML
    """
    action = getattr(args, "config_action", None)

    if action == "path":
        config_path = resolve_config_path(args)
        if config_path and config_path.exists():
            print(config_path)
        else:
            print("No config file found (using defaults)")
        return 0
    elif action == "show":
        config = load_configuration(args)
        if config is None:
            return 1
        print(tomlkit.dumps(config), end="")
        return 0
    else:
        print("Usage: footmark config <path|show>", file=sys.stderr)
        return 1
