"""
footmark.config.loader - Locate, parse and merge ``.footmark.toml``.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit

from footmark.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX


def find_config_file(start: Path) -> Path | None:
    """Walk up from ``start`` looking for ``.footmark.toml``.

    Args:
        start: Directory (or file) to start from.

    Returns:
        Path to the config file, or None if no ancestor has one.
    """
    current = Path(start).resolve()
    if current.is_file():
        current = current.parent

    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def merge_configs(defaults: dict[str, Any], user: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``user`` over ``defaults`` without mutating either."""
    merged = copy.deepcopy(defaults)
    for key, value in user.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_config_text(text: str) -> dict[str, Any]:
    """Parse TOML text into plain Python containers."""
    return tomlkit.parse(text).unwrap()


def load_config(config_path: Path) -> dict[str, Any]:
    """Load a config file merged over defaults, then apply env overrides.

    Raises:
        OSError: If the file cannot be read.
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    content = Path(config_path).read_text(encoding="utf-8")
    user_config = parse_config_text(content)
    return _apply_env_overrides(merge_configs(DEFAULT_CONFIG, user_config))


def _try_parse_env_value(value: str) -> Any:
    """Type an environment variable value.

    JSON lists and objects are decoded, ``true``/``false`` become booleans
    (any case), anything else (including malformed JSON) stays a string.
    """
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if value.lstrip().startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply ``FOOTMARK_*`` environment variables to ``config``.

    ``FOOTMARK_ORGANIZE_ON_SAVE`` sets the top-level ``organize_on_save``;
    ``FOOTMARK_KEYS_NEW_FOOTNOTE`` sets ``keys.new_footnote``.
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        path = name[len(ENV_PREFIX) :].lower()
        if not path:
            continue
        value = _try_parse_env_value(raw)

        if path in config and not isinstance(config[path], dict):
            config[path] = value
            continue

        section, _, key = path.partition("_")
        if key and isinstance(config.get(section), dict):
            config[section][key] = value
        else:
            config[path] = value
    return config
