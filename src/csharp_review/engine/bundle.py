"""Build step — package the engine into a self-contained zipapp.

Usage:
    python -m csharp_review.engine.bundle --output csharp-review-engine.pyz

The archive carries the pure-Python ``csharp_review`` package and runs
``csharp_review.engine.cli:main``. Compiled dependencies (tree-sitter and
its C# grammar) are resolved from the interpreter that runs the archive.
"""

from __future__ import annotations

import argparse
import shutil
import sys
import tempfile
import zipapp
from pathlib import Path

ENTRY_POINT = "csharp_review.engine.cli:main"
DEFAULT_OUTPUT = "csharp-review-engine.pyz"

# Archive entry script; exits with the entry point's return code.
_MAIN_TEMPLATE = """\
import sys
from {module} import {function}
sys.exit({function}())
"""

_PACKAGE_DIR = Path(__file__).resolve().parents[1]


def build_bundle(output: Path, *, package_dir: Path = _PACKAGE_DIR) -> Path:
    """Write the zipapp to *output* and return its path."""
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.TemporaryDirectory(prefix="csharp_review_bundle_") as tmp:
        staging = Path(tmp)
        shutil.copytree(
            package_dir,
            staging / package_dir.name,
            ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
        )
        module, function = ENTRY_POINT.split(":")
        (staging / "__main__.py").write_text(
            _MAIN_TEMPLATE.format(module=module, function=function), encoding="utf-8"
        )
        zipapp.create_archive(staging, target=output, interpreter=None, compressed=True)
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m csharp_review.engine.bundle",
        description="Build the csharp-review analyzer artifact.",
    )
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="artifact path (default: %(default)s)")
    args = parser.parse_args(argv)

    try:
        path = build_bundle(Path(args.output))
    except (OSError, zipapp.ZipAppError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Built {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
