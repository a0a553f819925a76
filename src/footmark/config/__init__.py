"""
footmark.config - Configuration loading and defaults
"""

from footmark.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from footmark.config.loader import (
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    load_config,
    merge_configs,
)
from footmark.config.settings import FootnoteConfig

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "FootnoteConfig",
    "find_config_file",
    "load_config",
    "merge_configs",
]
