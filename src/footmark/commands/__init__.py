"""
footmark.commands - CLI command implementations
"""

__all__ = [
    "config_cmd",
    "footnote_cmd",
    "organize_cmd",
]
