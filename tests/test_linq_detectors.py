"""
LINQ (Query Optimization) Detector Tests
========================================

Each rule reports at most once per compilation unit.
"""

import pytest

from csharp_review.detectors.linq import (
    detect_complex_query,
    detect_count_compared_to_zero,
    detect_identity_select,
    detect_orderby_first,
    detect_tolist_then_where,
    detect_where_any,
    detect_where_count,
    detect_where_first,
)
from csharp_review.engine.pipeline import analyze_source

COUNT_ANY = "LINQ: Use Any() instead of Count() > 0 for better performance."
WHERE_COUNT = "LINQ: Use Count(predicate) instead of Where(predicate).Count() for better performance."


def in_method(body: str) -> str:
    return f"class A {{ void M() {{ {body} }} }}"


class TestCountComparedToZero:

    @pytest.mark.parametrize("expr", [
        "items.Count() > 0",
        "items.Count() != 0",
        "items.Count() == 0",
    ])
    def test_zero_comparisons(self, parse, expr):
        tree = parse(in_method(f"var b = {expr};"))
        assert detect_count_compared_to_zero(tree) == [COUNT_ANY]

    def test_other_comparison_is_fine(self, parse):
        tree = parse(in_method("var b = items.Count() > 5;"))
        assert detect_count_compared_to_zero(tree) == []

    def test_where_count_compared_reports_both_rules(self):
        result = analyze_source(
            in_method("var b = items.Where(x => x.Active).Count() > 0;")
        )
        linq = [s for s in result.suggestions if s.startswith("LINQ:")]

        assert COUNT_ANY in linq
        assert WHERE_COUNT in linq


class TestWherePatterns:

    def test_where_count(self, parse):
        tree = parse(in_method("var n = items.Where(x => x.Active).Count();"))
        assert detect_where_count(tree) == [WHERE_COUNT]

    def test_where_any(self, parse):
        tree = parse(in_method("var b = items.Where(x => x.Active).Any();"))
        assert detect_where_any(tree) == [
            "LINQ: Use Any(predicate) instead of Where(predicate).Any() for better performance."
        ]

    @pytest.mark.parametrize("terminal", ["First", "FirstOrDefault"])
    def test_where_first(self, parse, terminal):
        tree = parse(in_method(f"var u = items.Where(x => x.Active).{terminal}();"))
        assert detect_where_first(tree) == [
            "LINQ: Use First(predicate) instead of Where(predicate).First() for better performance."
        ]

    def test_predicate_overloads_are_fine(self, parse):
        tree = parse(in_method(
            "var n = items.Count(x => x.Active); var b = items.Any(x => x.Active); "
            "var u = items.First(x => x.Active);"
        ))
        assert detect_where_count(tree) == []
        assert detect_where_any(tree) == []
        assert detect_where_first(tree) == []

    def test_reported_once(self, parse):
        tree = parse(in_method(
            "var a = xs.Where(x => x.A).Count(); var b = ys.Where(y => y.B).Count();"
        ))
        assert detect_where_count(tree) == [WHERE_COUNT]


class TestIdentitySelect:

    @pytest.mark.parametrize("expr", [
        "items.Select(x => x).ToList()",
        "items.Select(item => item).ToList()",
        "items.Select( x=>x )",
    ])
    def test_identity(self, parse, expr):
        tree = parse(in_method(f"var r = {expr};"))
        assert detect_identity_select(tree) == [
            "LINQ: Redundant Select(x => x) detected. This is an identity operation and can be removed."
        ]

    def test_projection_is_fine(self, parse):
        tree = parse(in_method("var r = items.Select(x => x.Name);"))
        assert detect_identity_select(tree) == []


class TestOrderByFirst:

    def test_orderby_first(self, parse):
        tree = parse(in_method("var youngest = people.OrderBy(p => p.Age).First();"))
        assert detect_orderby_first(tree) == [
            "LINQ: Consider using MinBy/MaxBy instead of OrderBy().First() for better performance."
        ]

    def test_orderby_tolist_is_fine(self, parse):
        tree = parse(in_method("var sorted = people.OrderBy(p => p.Age).ToList();"))
        assert detect_orderby_first(tree) == []


class TestToListThenWhere:

    def test_tolist_where(self, parse):
        tree = parse(in_method("var r = items.ToList().Where(x => x.Active);"))
        assert detect_tolist_then_where(tree) == [
            "LINQ: Apply Where() filter before ToList() to avoid materializing unnecessary items."
        ]

    def test_where_tolist_is_fine(self, parse):
        tree = parse(in_method("var r = items.Where(x => x.Active).ToList();"))
        assert detect_tolist_then_where(tree) == []


class TestComplexQuery:

    MESSAGE = "LINQ: Complex query detected. If enumerated multiple times, consider materializing with ToList()."

    def test_long_query_bound_to_variable(self, parse):
        tree = parse(in_method(
            "var adults = from customer in customers "
            "where customer.Age >= 18 && customer.Country == \"NZ\" "
            "orderby customer.LastName, customer.FirstName "
            "select new { customer.FirstName, customer.LastName, customer.Email };"
        ))
        assert detect_complex_query(tree) == [self.MESSAGE]

    def test_short_query_is_fine(self, parse):
        tree = parse(in_method("var q = from c in cs select c.Name;"))
        assert detect_complex_query(tree) == []

    def test_unbound_query_is_fine(self, parse):
        tree = parse(in_method(
            "Print(from customer in customers "
            "where customer.Age >= 18 && customer.Country == \"NZ\" "
            "orderby customer.LastName, customer.FirstName "
            "select new { customer.FirstName, customer.LastName, customer.Email });"
        ))
        assert detect_complex_query(tree) == []
