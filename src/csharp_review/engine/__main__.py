"""``python -m csharp_review.engine`` — run the analyzer process in-tree."""

from __future__ import annotations

from csharp_review.engine.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
