"""Result aggregator — merge diagnostics, metrics and suggestions; wire codec."""

from __future__ import annotations

import json
from typing import Iterable, Mapping, Sequence

import jsonschema

from csharp_review.contracts.load import validate_instance
from csharp_review.exceptions import ResultParseError
from csharp_review.model import CATEGORY_ORDER, Category, Severity
from csharp_review.model.analysis_result import AnalysisResult
from csharp_review.model.diagnostic import Diagnostic
from csharp_review.model.metrics import Metrics
from csharp_review.utils.json_norm import stable_json_dumps

SCHEMA_NAME = "analysis_result.schema.json"


def aggregate(
    diagnostics: Iterable[Diagnostic],
    metrics: Metrics,
    suggestion_groups: Mapping[Category, Sequence[str]],
) -> AnalysisResult:
    """Assemble an ``AnalysisResult``.

    Hidden diagnostics are dropped. Suggestion groups are concatenated in
    ``CATEGORY_ORDER`` without de-duplication; a missing group counts as empty.
    """
    suggestions: list[str] = []
    for category in CATEGORY_ORDER:
        suggestions.extend(suggestion_groups.get(category, ()))
    return AnalysisResult(
        diagnostics=[d for d in diagnostics if d.severity != Severity.HIDDEN],
        metrics=metrics,
        suggestions=suggestions,
    )


def serialize(result: AnalysisResult) -> str:
    """Canonical wire form of *result* (JSON, trailing newline)."""
    return stable_json_dumps(result.to_dict())


def parse(raw: str | bytes) -> AnalysisResult:
    """Inverse of :func:`serialize`.

    Raises ``ResultParseError`` carrying *raw* when the text is not JSON or
    does not satisfy ``analysis_result.schema.json``.
    """
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResultParseError(str(e), raw_output=text) from e

    try:
        validate_instance(data, SCHEMA_NAME)
    except jsonschema.ValidationError as e:
        raise ResultParseError(e.message, raw_output=text) from e

    return AnalysisResult.from_dict(data)
