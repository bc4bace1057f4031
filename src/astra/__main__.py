"""CLI entry point exposed via ``python -m astra``."""

from __future__ import annotations

import sys

from astra.cli import main

if __name__ == "__main__":
    sys.exit(main())
