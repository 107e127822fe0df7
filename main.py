"""CLI entrypoint for the crossword layout generator."""

from __future__ import annotations

import sys

from crossword_layout.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
