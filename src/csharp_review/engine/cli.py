"""Analyzer process entry point.

Usage:
    python -m csharp_review.engine <file.cs|code> [--display-name NAME]
    python csharp-review-engine.pyz <file.cs|code> [--display-name NAME]

Writes the serialized ``AnalysisResult`` to stdout and exits 0. Usage and
runtime errors go to stderr with a non-zero exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from csharp_review.engine.aggregate import serialize
from csharp_review.engine.pipeline import analyze_source
from csharp_review.syntax.provider import DEFAULT_DISPLAY_NAME
from csharp_review.utils.exit_codes import ExitCode


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="csharp-review-engine",
        description="Analyzes C# code and outputs JSON with diagnostics, metrics and suggestions.",
    )
    p.add_argument("input", nargs="?", help="path to a .cs file, or C# source text")
    p.add_argument("--display-name", default=None, help="file name reported in diagnostic locations")
    return p


def _read_input(arg: str) -> tuple[str, str]:
    """Return ``(source_text, default_display_name)`` for the positional argument."""
    if os.path.isfile(arg):
        # Undecodable bytes are replaced so legacy-encoded sources still get a result.
        return Path(arg).read_bytes().decode("utf-8-sig", errors="replace"), arg
    return arg, DEFAULT_DISPLAY_NAME


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.input is None:
        print("Usage: csharp-review-engine <file.cs|code>", file=sys.stderr)
        print("  Analyzes C# code and outputs JSON with diagnostics and metrics", file=sys.stderr)
        return ExitCode.ERROR

    try:
        text, default_name = _read_input(args.input)
    except OSError as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        result = analyze_source(text, args.display_name or default_name)
    except Exception as e:  # reported as a process failure, not a traceback
        print(f"error: analysis failed: {type(e).__name__}: {e}", file=sys.stderr)
        return ExitCode.ERROR

    sys.stdout.write(serialize(result))
    sys.stdout.flush()
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
