"""
footmark.config.defaults - Default configuration values.
"""

DEFAULT_KEYS = {
    "new_footnote": "<C-f>",
    "organize_footnotes": "<leader>of",
    "next_footnote": "]f",
    "prev_footnote": "[f",
}

DEFAULT_PATTERNS = ["*.md", "*.markdown"]

DEFAULT_CONFIG = {
    "debug_print": False,
    "organize_on_save": False,
    "organize_on_new": False,
    "patterns": list(DEFAULT_PATTERNS),
    "keys": dict(DEFAULT_KEYS),
}

CONFIG_FILENAME = ".footmark.toml"

ENV_PREFIX = "FOOTMARK_"
