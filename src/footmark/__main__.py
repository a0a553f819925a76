"""Entry point for running footmark as a module.

Usage:
    python -m footmark
"""

import sys

from footmark.cli import main

if __name__ == "__main__":
    sys.exit(main())
