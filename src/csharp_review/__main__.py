"""CLI entry-point for csharp_review.

Usage:
    python -m csharp_review analyze <file.cs> [--display-name NAME] [--json]
    python -m csharp_review analyze --code "<C# source>" [--json]
    python -m csharp_review status
    python -m csharp_review build
    python -m csharp_review rules [--category basic|security|performance|linq]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from csharp_review import __version__
from csharp_review.api import analyze_code, analyze_file, build_analyzer, check_availability
from csharp_review.exceptions import CSharpReviewError, remediation_hint
from csharp_review.model import Availability, Category
from csharp_review.reports.exporters import export_json, export_markdown
from csharp_review.utils.exit_codes import ExitCode


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="csharp-review",
        description="Heuristic static analysis for C# source code.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log orchestration steps to stderr.",
    )
    sub = p.add_subparsers(dest="command")

    # ── analyze ─────────────────────────────────────────────────────
    analyze = sub.add_parser("analyze", help="Analyze a .cs file or inline source text.")
    analyze.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=None,
        help="Path to an existing .cs file.",
    )
    analyze.add_argument(
        "--code",
        default=None,
        help="C# source text to analyze instead of a file.",
    )
    analyze.add_argument(
        "--display-name",
        dest="display_name",
        default=None,
        help="File name reported in diagnostic locations.",
    )
    analyze.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the raw AnalysisResult JSON instead of Markdown.",
    )

    # ── status / build ──────────────────────────────────────────────
    sub.add_parser("status", help="Report whether the analyzer artifact is built.")
    sub.add_parser("build", help="Build the analyzer artifact.")

    # ── rules ───────────────────────────────────────────────────────
    rules = sub.add_parser("rules", help="List the registered detector rules.")
    rules.add_argument(
        "--category",
        choices=[c.value for c in Category],
        default=None,
        help="Only list rules in this category.",
    )
    return p


def _print_error(exc: CSharpReviewError) -> None:
    print(f"error: {exc}", file=sys.stderr)
    hint = remediation_hint(exc)
    if hint:
        print(f"hint: {hint}", file=sys.stderr)


def _handle_analyze(args: argparse.Namespace) -> int:
    try:
        if args.code is not None and args.file is not None:
            print("error: pass either FILE or --code, not both", file=sys.stderr)
            return ExitCode.ERROR
        if args.code is not None:
            result = analyze_code(args.code, display_name=args.display_name)
        elif args.file is not None:
            result = analyze_file(args.file, display_name=args.display_name)
        else:
            print("error: nothing to analyze; pass FILE or --code", file=sys.stderr)
            return ExitCode.ERROR
    except CSharpReviewError as e:
        _print_error(e)
        return ExitCode.ERROR

    if args.json_out:
        sys.stdout.write(export_json(result))
    else:
        print(export_markdown(result))
    return ExitCode.SUCCESS


def _handle_status(args: argparse.Namespace) -> int:
    if check_availability() is Availability.BUILT:
        print("✓ Analyzer is built and ready to use.")
        return ExitCode.SUCCESS
    print("✗ Analyzer is not built.\n\nTo build it, run: csharp-review build")
    return ExitCode.NOT_READY


def _handle_build(args: argparse.Namespace) -> int:
    outcome = build_analyzer()
    if outcome.success:
        print(f"✓ Analyzer built successfully!\n\n{outcome.output}".rstrip())
        return ExitCode.SUCCESS
    print(f"✗ Failed to build analyzer:\n\n{outcome.output}".rstrip(), file=sys.stderr)
    return ExitCode.ERROR


def _handle_rules(args: argparse.Namespace) -> int:
    from csharp_review.detectors import registered_detectors

    category = Category(args.category) if args.category else None
    for det in registered_detectors(category):
        doc = (det.detect.__doc__ or "").strip().splitlines()
        summary = doc[0] if doc else ""
        print(f"{det.rule_id:<28} {det.category.value:<12} {summary}".rstrip())
    return ExitCode.SUCCESS


_HANDLERS = {
    "analyze": _handle_analyze,
    "status": _handle_status,
    "build": _handle_build,
    "rules": _handle_rules,
}


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok, 1 = not built, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    return _HANDLERS[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
