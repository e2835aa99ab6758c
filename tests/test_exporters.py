"""Exporter tests: Markdown sections and JSON wire form."""

import json

from csharp_review.model import Severity
from csharp_review.model.analysis_result import AnalysisResult
from csharp_review.model.diagnostic import Diagnostic, Location
from csharp_review.model.metrics import Metrics
from csharp_review.reports.exporters import export_json, export_markdown


def _result(**overrides) -> AnalysisResult:
    params = dict(
        diagnostics=[
            Diagnostic(
                id="SYN_MISSING_001",
                severity=Severity.ERROR,
                message="';' expected",
                category="Syntax",
                location=Location(line=4, column=9, file="A.cs"),
            )
        ],
        metrics=Metrics(class_count=1, method_count=2, line_count=10, cyclomatic_complexity=4),
        suggestions=["LINQ: Use Any() instead of Count() > 0 for better performance."],
    )
    params.update(overrides)
    return AnalysisResult(**params)


class TestExportMarkdown:

    def test_all_sections(self):
        md = export_markdown(_result())

        assert md.startswith("# C# Code Analysis\n")
        assert "## Code Metrics" in md
        assert "- Classes: 1" in md
        assert "- Methods: 2" in md
        assert "- Lines: 10" in md
        assert "- Cyclomatic Complexity: 4" in md
        assert "**Error** [SYN_MISSING_001] (Line 4, Col 9): ';' expected" in md
        assert "- LINQ: Use Any() instead of Count() > 0 for better performance." in md

    def test_sections_in_order(self):
        md = export_markdown(_result())
        assert md.index("## Code Metrics") < md.index("## Diagnostics") < md.index("## Suggestions")

    def test_empty_sections_omitted(self):
        md = export_markdown(_result(diagnostics=[], suggestions=[]))

        assert "## Code Metrics" in md
        assert "## Diagnostics" not in md
        assert "## Suggestions" not in md

    def test_diagnostic_without_location(self):
        diag = Diagnostic(id="X1", severity=Severity.WARNING, message="careful", category="c")
        md = export_markdown(_result(diagnostics=[diag]))

        assert "**Warning** [X1]: careful" in md

    def test_untitled(self):
        md = export_markdown(_result(), title=None)
        assert md.startswith("## Code Metrics")


class TestExportJson:

    def test_matches_wire_contract(self):
        data = json.loads(export_json(_result()))

        assert data["metrics"]["complexity"] == 4
        assert data["diagnostics"][0]["id"] == "SYN_MISSING_001"
        assert data["suggestions"] == _result().suggestions
