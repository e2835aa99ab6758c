"""Result aggregator tests: ordering, Hidden filtering and the wire codec."""

import json

import pytest

from csharp_review.engine.aggregate import aggregate, parse, serialize
from csharp_review.exceptions import ResultParseError
from csharp_review.model import Category, Severity
from csharp_review.model.analysis_result import AnalysisResult
from csharp_review.model.diagnostic import Diagnostic, Location
from csharp_review.model.metrics import Metrics


@pytest.fixture
def sample_result() -> AnalysisResult:
    return AnalysisResult(
        diagnostics=[
            Diagnostic(
                id="CS1002",
                severity=Severity.ERROR,
                message="; expected",
                category="Compiler",
                location=Location(line=3, column=14, file="Program.cs"),
            ),
            Diagnostic(id="CS8019", severity=Severity.INFO, message="Unnecessary using", category="Style"),
        ],
        metrics=Metrics(class_count=2, method_count=5, line_count=40, cyclomatic_complexity=7),
        suggestions=["Public method 'Run' is missing XML documentation.", "LINQ: Use Any()"],
    )


class TestAggregate:

    def test_groups_concatenate_in_category_order(self):
        groups = {
            Category.LINQ: ["linq-1"],
            Category.BASIC: ["basic-1", "basic-2"],
            Category.PERFORMANCE: ["perf-1"],
            Category.SECURITY: ["sec-1"],
        }
        result = aggregate([], Metrics(), groups)

        assert result.suggestions == ["basic-1", "basic-2", "sec-1", "perf-1", "linq-1"]

    def test_no_deduplication_across_categories(self):
        groups = {Category.BASIC: ["same"], Category.LINQ: ["same"]}
        result = aggregate([], Metrics(), groups)

        assert result.suggestions == ["same", "same"]

    def test_missing_groups_are_empty(self):
        result = aggregate([], Metrics(), {Category.SECURITY: ["sec-1"]})
        assert result.suggestions == ["sec-1"]

    def test_hidden_diagnostics_dropped(self):
        hidden = Diagnostic(id="IDE0001", severity=Severity.HIDDEN, message="hidden", category="Style")
        warning = Diagnostic(id="CS0168", severity=Severity.WARNING, message="unused", category="Compiler")
        result = aggregate([hidden, warning], Metrics(), {})

        assert result.diagnostics == [warning]


class TestWireCodec:

    def test_round_trip(self, sample_result):
        assert parse(serialize(sample_result)) == sample_result

    def test_round_trip_from_bytes(self, sample_result):
        assert parse(serialize(sample_result).encode("utf-8")) == sample_result

    def test_wire_shape(self, sample_result):
        data = json.loads(serialize(sample_result))

        assert set(data) == {"diagnostics", "metrics", "suggestions"}
        assert data["metrics"] == {"classes": 2, "methods": 5, "lines": 40, "complexity": 7}
        assert data["diagnostics"][0]["location"] == {"line": 3, "column": 14, "file": "Program.cs"}
        assert "location" not in data["diagnostics"][1]
        assert data["diagnostics"][0]["severity"] == "Error"

    def test_serialize_ends_with_newline(self, sample_result):
        assert serialize(sample_result).endswith("\n")


class TestParseErrors:

    def test_not_json(self):
        with pytest.raises(ResultParseError) as exc_info:
            parse("Unhandled exception. System.IO.FileNotFoundException")

        assert exc_info.value.raw_output == "Unhandled exception. System.IO.FileNotFoundException"
        assert str(exc_info.value).startswith("Failed to parse analysis result:")

    def test_missing_metrics(self):
        raw = json.dumps({"diagnostics": [], "suggestions": []})
        with pytest.raises(ResultParseError) as exc_info:
            parse(raw)
        assert exc_info.value.raw_output == raw

    def test_unknown_severity(self):
        raw = json.dumps({
            "diagnostics": [{"id": "X", "severity": "Fatal", "message": "m", "category": "c"}],
            "metrics": {"classes": 0, "methods": 0, "lines": 0, "complexity": 1},
            "suggestions": [],
        })
        with pytest.raises(ResultParseError):
            parse(raw)

    def test_complexity_below_one(self):
        raw = json.dumps({
            "diagnostics": [],
            "metrics": {"classes": 0, "methods": 0, "lines": 0, "complexity": 0},
            "suggestions": [],
        })
        with pytest.raises(ResultParseError):
            parse(raw)
