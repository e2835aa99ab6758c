"""Query-optimization (LINQ) detectors.

Each rule inspects invocation text in pre-order and reports at most once.
"""

from __future__ import annotations

import re
from typing import Callable, Sequence

from csharp_review.detectors.registry import detector
from csharp_review.model import Category
from csharp_review.model.diagnostic import Diagnostic
from csharp_review.policy.thresholds import COMPLEX_QUERY_CHARS
from csharp_review.rules import (
    LINQ_COMPLEX_QUERY_001,
    LINQ_COUNT_ANY_001,
    LINQ_IDENTITY_SELECT_001,
    LINQ_ORDERBY_FIRST_001,
    LINQ_TOLIST_WHERE_001,
    LINQ_WHERE_ANY_001,
    LINQ_WHERE_COUNT_001,
    LINQ_WHERE_FIRST_001,
)
from csharp_review.syntax.node import NodeKind, SyntaxNode

_ZERO_COMPARISONS = ("> 0", "!= 0", "== 0")
_IDENTITY_SELECT = re.compile(r"\.Select\(\s*(\w+)\s*=>\s*\1\s*\)")


def _first_invocation(tree: SyntaxNode, predicate: Callable[[str], bool], message: str) -> list[str]:
    for invocation in tree.descendants(NodeKind.INVOCATION_EXPRESSION):
        if predicate(invocation.text):
            return [message]
    return []


@detector(LINQ_COUNT_ANY_001, Category.LINQ)
def detect_count_compared_to_zero(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``Count() > 0`` where ``Any()`` suffices."""
    for invocation in tree.descendants(NodeKind.INVOCATION_EXPRESSION):
        if ".Count()" not in invocation.text:
            continue
        parent = invocation.parent
        if parent is not None and parent.is_binary() and any(c in parent.text for c in _ZERO_COMPARISONS):
            return ["LINQ: Use Any() instead of Count() > 0 for better performance."]
    return []


@detector(LINQ_WHERE_COUNT_001, Category.LINQ)
def detect_where_count(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``Where(...).Count()`` instead of a predicate ``Count``."""
    return _first_invocation(
        tree,
        lambda t: ".Where(" in t and ".Count()" in t,
        "LINQ: Use Count(predicate) instead of Where(predicate).Count() for better performance.",
    )


@detector(LINQ_WHERE_ANY_001, Category.LINQ)
def detect_where_any(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``Where(...).Any()`` instead of a predicate ``Any``."""
    return _first_invocation(
        tree,
        lambda t: ".Where(" in t and ".Any()" in t,
        "LINQ: Use Any(predicate) instead of Where(predicate).Any() for better performance.",
    )


@detector(LINQ_WHERE_FIRST_001, Category.LINQ)
def detect_where_first(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``Where(...).First()`` instead of a predicate ``First``."""
    return _first_invocation(
        tree,
        lambda t: ".Where(" in t and (".First()" in t or ".FirstOrDefault()" in t),
        "LINQ: Use First(predicate) instead of Where(predicate).First() for better performance.",
    )


@detector(LINQ_IDENTITY_SELECT_001, Category.LINQ)
def detect_identity_select(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Redundant identity projection ``Select(x => x)``."""
    return _first_invocation(
        tree,
        lambda t: _IDENTITY_SELECT.search(t) is not None,
        "LINQ: Redundant Select(x => x) detected. This is an identity operation and can be removed.",
    )


@detector(LINQ_ORDERBY_FIRST_001, Category.LINQ)
def detect_orderby_first(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``OrderBy(...).First()`` where ``MinBy``/``MaxBy`` avoids the sort."""
    return _first_invocation(
        tree,
        lambda t: ".OrderBy(" in t and ".First" in t,
        "LINQ: Consider using MinBy/MaxBy instead of OrderBy().First() for better performance.",
    )


@detector(LINQ_TOLIST_WHERE_001, Category.LINQ)
def detect_tolist_then_where(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``ToList()`` before ``Where``; filter before materializing."""
    return _first_invocation(
        tree,
        lambda t: ".ToList().Where(" in t,
        "LINQ: Apply Where() filter before ToList() to avoid materializing unnecessary items.",
    )


@detector(LINQ_COMPLEX_QUERY_001, Category.LINQ)
def detect_complex_query(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Long query expressions bound to a variable may be enumerated repeatedly."""
    for query in tree.descendants(NodeKind.QUERY_EXPRESSION):
        parent = query.parent
        bound = parent is not None and parent.kind == NodeKind.VARIABLE_DECLARATOR and parent.field("value") is query
        if bound and len(query.text) > COMPLEX_QUERY_CHARS:
            return ["LINQ: Complex query detected. If enumerated multiple times, consider materializing with ToList()."]
    return []
