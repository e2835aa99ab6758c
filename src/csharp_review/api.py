"""
csharp_review.api
=================

Programmatic entrypoints for using csharp_review as a backend engine.

Goals:
  - No argparse / CLI dependencies
  - Typed errors from ``csharp_review.exceptions`` instead of exit codes
  - Results that serialize to the analyzer wire contract

Non-goals:
  - Owning presentation — callers render results (see ``reports.exporters``)

Usage::

    from csharp_review.api import analyze_code, build_analyzer, check_availability

    if check_availability() is Availability.NOT_BUILT:
        build_analyzer()
    result = analyze_code("public class A { }")
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from csharp_review.core.config import AnalyzerSettings
from csharp_review.core.orchestrator import AnalyzerOrchestrator, BuildResult
from csharp_review.model import Availability
from csharp_review.model.analysis_result import AnalysisResult
from csharp_review.model.request import AnalysisRequest


def _orchestrator(settings: Optional[AnalyzerSettings]) -> AnalyzerOrchestrator:
    return AnalyzerOrchestrator(settings)


# ── availability / build ────────────────────────────────────────────


def check_availability(*, settings: Optional[AnalyzerSettings] = None) -> Availability:
    """Return ``Built`` when the analyzer artifact exists, else ``NotBuilt``."""
    return _orchestrator(settings).availability()


def build_analyzer(*, settings: Optional[AnalyzerSettings] = None) -> BuildResult:
    """Build the analyzer artifact. Failures are reported, not raised."""
    return _orchestrator(settings).build()


# ── analyze ─────────────────────────────────────────────────────────


def analyze_code(
    code: str,
    *,
    display_name: Optional[str] = None,
    settings: Optional[AnalyzerSettings] = None,
) -> AnalysisResult:
    """Analyze inline C# source text in a fresh analyzer process."""
    request = AnalysisRequest.from_text(code, display_name)
    return _orchestrator(settings).analyze(request)


def analyze_file(
    path: str | Path,
    *,
    display_name: Optional[str] = None,
    settings: Optional[AnalyzerSettings] = None,
) -> AnalysisResult:
    """Analyze an existing ``.cs`` file in a fresh analyzer process."""
    request = AnalysisRequest.from_path(path, display_name)
    return _orchestrator(settings).analyze(request)

