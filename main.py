"""Development entrypoint for the WarTycoon terminal game."""

from __future__ import annotations

from wartycoon.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
