"""Pipeline — parse, measure, detect, aggregate.

This is the only entry point that wires tree provider → metrics →
detectors → aggregator. It runs inside the analyzer process.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from csharp_review.detectors import Detector, run_detectors
from csharp_review.engine.aggregate import aggregate
from csharp_review.engine.metrics import compute_metrics
from csharp_review.model.analysis_result import AnalysisResult
from csharp_review.syntax.provider import DEFAULT_DISPLAY_NAME, TreeProvider, default_provider

_logger = logging.getLogger(__name__)


def analyze_source(
    text: str,
    display_name: str = DEFAULT_DISPLAY_NAME,
    *,
    provider: Optional[TreeProvider] = None,
    detectors: Optional[Sequence[Detector]] = None,
) -> AnalysisResult:
    """Analyze one compilation unit of C# source text.

    Syntax errors are not failures: they come back as diagnostics next to
    best-effort metrics and suggestions.
    """
    tree_provider = provider if provider is not None else default_provider()
    tree, diagnostics = tree_provider.parse(text, display_name)

    metrics = compute_metrics(tree)
    groups = run_detectors(tree, diagnostics, detectors)
    result = aggregate(diagnostics, metrics, groups)

    _logger.debug(
        "analyzed %s: %d diagnostic(s), %d suggestion(s), CC=%d",
        display_name,
        len(result.diagnostics),
        len(result.suggestions),
        metrics.cyclomatic_complexity,
    )
    return result
