"""Exporters for analysis results.

Supports:

*  **JSON** — the wire document, suitable for piping into other tools.
*  **Markdown** — human-readable, suitable for terminals and PR comments.

All exporters accept an :class:`AnalysisResult` and produce a string.
"""

from __future__ import annotations

from csharp_review.engine.aggregate import serialize
from csharp_review.model.analysis_result import AnalysisResult


# ════════════════════════════════════════════════════════════════════
# JSON exporter
# ════════════════════════════════════════════════════════════════════


def export_json(result: AnalysisResult) -> str:
    """Export an ``AnalysisResult`` in its canonical wire form."""
    return serialize(result)


# ════════════════════════════════════════════════════════════════════
# Markdown exporter
# ════════════════════════════════════════════════════════════════════


def export_markdown(result: AnalysisResult, *, title: str | None = "C# Code Analysis") -> str:
    """Export an ``AnalysisResult`` as Markdown.

    Metrics are always rendered; the diagnostics and suggestions sections
    only when non-empty.
    """
    lines: list[str] = []
    if title:
        lines.append(f"# {title}")
        lines.append("")

    m = result.metrics
    lines.append("## Code Metrics")
    lines.append("")
    lines.append(f"- Classes: {m.class_count}")
    lines.append(f"- Methods: {m.method_count}")
    lines.append(f"- Lines: {m.line_count}")
    lines.append(f"- Cyclomatic Complexity: {m.cyclomatic_complexity}")
    lines.append("")

    if result.diagnostics:
        lines.append("## Diagnostics")
        lines.append("")
        for d in result.diagnostics:
            loc = ""
            if d.location is not None:
                loc = f" (Line {d.location.line}, Col {d.location.column})"
            lines.append(f"**{d.severity.value}** [{d.id}]{loc}: {d.message}")
            lines.append("")

    if result.suggestions:
        lines.append("## Suggestions")
        lines.append("")
        for s in result.suggestions:
            lines.append(f"- {s}")
        lines.append("")

    return "\n".join(lines)
