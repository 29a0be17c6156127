"""Allow running cellquill as ``python -m cellquill``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
