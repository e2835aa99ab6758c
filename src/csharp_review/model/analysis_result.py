"""AnalysisResult — the full wire contract of one analysis run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from csharp_review.model.diagnostic import Diagnostic
from csharp_review.model.metrics import Metrics


@dataclass(slots=True)
class AnalysisResult:
    """Assembled result matching ``analysis_result.schema.json``.

    Built by ``engine.aggregate`` once metrics and detectors have run.
    Suggestions keep their insertion order (basic, security, performance,
    LINQ).
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)
    metrics: Metrics = field(default_factory=Metrics)
    suggestions: list[str] = field(default_factory=list)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "metrics": self.metrics.to_dict(),
            "suggestions": list(self.suggestions),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisResult":
        return cls(
            diagnostics=[Diagnostic.from_dict(d) for d in data["diagnostics"]],
            metrics=Metrics.from_dict(data["metrics"]),
            suggestions=list(data["suggestions"]),
        )
