"""End-to-end pipeline tests: parse → metrics → detectors → aggregate."""

import logging

from csharp_review.detectors import Detector, registered_detectors, run_detectors
from csharp_review.engine.aggregate import parse, serialize
from csharp_review.engine.pipeline import analyze_source
from csharp_review.model import Category
from csharp_review.rules import SEC_WEAK_RANDOM_001, STY_MISSING_DOC_001

MIXED_SOURCE = """
public class Service
{
    public void Run()
    {
        Random r = new Random();
        var active = users.Where(u => u.Active).Count() > 0;
    }
}
"""


class TestAnalyzeSource:

    def test_metrics_and_suggestions(self):
        result = analyze_source(MIXED_SOURCE, "Service.cs")

        assert result.metrics.class_count == 1
        assert result.metrics.method_count == 1
        assert result.diagnostics == []
        assert result.suggestions

    def test_suggestions_follow_category_order(self):
        result = analyze_source(MIXED_SOURCE)
        s = result.suggestions
        basic = s.index("Public method 'Run' is missing XML documentation.")
        security = next(i for i, m in enumerate(s) if m.startswith("SECURITY:"))
        linq = next(i for i, m in enumerate(s) if m.startswith("LINQ:"))

        assert basic < security < linq

    def test_broken_source_still_produces_result(self):
        result = analyze_source("public class A { public void M( { }", "Broken.cs")

        assert result.diagnostics
        assert all(d.location.file == "Broken.cs" for d in result.diagnostics)
        assert result.metrics.cyclomatic_complexity >= 1

    def test_result_satisfies_wire_contract(self):
        result = analyze_source(MIXED_SOURCE)
        assert parse(serialize(result)) == result

    def test_empty_source(self):
        result = analyze_source("")

        assert result.metrics.class_count == 0
        assert result.metrics.cyclomatic_complexity == 1
        assert result.suggestions == []


class TestRunDetectors:

    def test_failing_detector_is_skipped(self, parse, caplog):
        def boom(tree, diagnostics=()):
            raise RuntimeError("kaboom")

        def fine(tree, diagnostics=()):
            return ["still here"]

        detectors = [
            Detector(rule_id=STY_MISSING_DOC_001, category=Category.BASIC, detect=boom),
            Detector(rule_id=SEC_WEAK_RANDOM_001, category=Category.SECURITY, detect=fine),
        ]
        with caplog.at_level(logging.ERROR, logger="csharp_review.detectors.registry"):
            groups = run_detectors(parse("class A { }"), (), detectors)

        assert groups[Category.BASIC] == []
        assert groups[Category.SECURITY] == ["still here"]
        assert "STY_MISSING_DOC_001" in caplog.text

    def test_all_categories_present(self, parse):
        groups = run_detectors(parse("class A { }"))
        assert set(groups) == set(Category)

    def test_custom_detector_subset(self):
        only_security = registered_detectors(Category.SECURITY)
        result = analyze_source(MIXED_SOURCE, detectors=only_security)

        assert result.suggestions
        assert all(s.startswith("SECURITY:") for s in result.suggestions)
