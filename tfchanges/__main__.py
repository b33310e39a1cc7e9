"""Entry point for `python -m tfchanges`.

Usage:
    python -m tfchanges
    uv run python -m tfchanges

Reads its parameters from ``INPUT_*`` environment variables, the way a CI
step receives them.
"""

from __future__ import annotations

from tfchanges.app import main

main()
