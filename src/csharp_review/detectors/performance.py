"""Performance detectors."""

from __future__ import annotations

import re
from typing import Sequence

from csharp_review.detectors.registry import detector
from csharp_review.model import Category
from csharp_review.model.diagnostic import Diagnostic
from csharp_review.policy.thresholds import LINQ_CHAIN_LIMIT, TOLIST_LOOKAHEAD
from csharp_review.rules import (
    PERF_CONFIGURE_AWAIT_001,
    PERF_DEFERRED_QUERY_001,
    PERF_LINQ_CHAIN_001,
    PERF_STRING_CONCAT_LOOP_001,
    PERF_STRING_FORMAT_001,
    PERF_TOLIST_COUNT_001,
)
from csharp_review.syntax.node import LOOP_KINDS, NodeKind, SyntaxNode

_DEFERRED_OPERATORS = (".Where(", ".Select(", ".OrderBy(")
_MATERIALIZERS = (".ToList()", ".ToArray()")
_FORMAT_HELPERS = ("string.Format", "String.Format", "string.Concat", "String.Concat")
_CHAINED_OPERATOR = re.compile(r"\.(?:Where|Select|OrderBy|GroupBy)\(")


def looks_like_string(concat: SyntaxNode) -> bool:
    """Either operand starts with a string literal quote or calls ``.ToString()``."""
    for side in ("left", "right"):
        operand = concat.field(side)
        if operand is None:
            continue
        if operand.text.startswith('"') or ".ToString()" in operand.text:
            return True
    return False


@detector(PERF_STRING_CONCAT_LOOP_001, Category.PERFORMANCE)
def detect_string_concat_in_loop(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """String ``+`` inside a loop; stops at the first loop that matches."""
    for loop in tree.walk():
        if loop.kind not in LOOP_KINDS:
            continue
        for concat in loop.descendants(NodeKind.BINARY_EXPRESSION):
            if concat.is_binary("+") and looks_like_string(concat):
                return [
                    "PERFORMANCE: String concatenation inside loop detected. "
                    "Use StringBuilder for better performance."
                ]
    return []


@detector(PERF_TOLIST_COUNT_001, Category.PERFORMANCE)
def detect_tolist_before_count(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``.ToList()`` followed within a few invocations by ``.Count``/``.Any()``."""
    invocations = [inv.text for inv in tree.descendants(NodeKind.INVOCATION_EXPRESSION)]
    for i, text in enumerate(invocations[:-1]):
        if ".ToList()" not in text:
            continue
        window = invocations[i + 1 : i + 1 + TOLIST_LOOKAHEAD]
        if any(".Count" in nxt or ".Any()" in nxt for nxt in window):
            return [
                "PERFORMANCE: Avoid calling ToList() before Count/Any. "
                "Use Count()/Any() directly on IEnumerable."
            ]
    return []


@detector(PERF_DEFERRED_QUERY_001, Category.PERFORMANCE)
def detect_deferred_query_variables(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Variables initialised with an unmaterialised query; one per variable."""
    out: list[str] = []
    for declarator in tree.descendants(NodeKind.VARIABLE_DECLARATOR):
        value = declarator.field("value")
        if value is None or value.kind != NodeKind.INVOCATION_EXPRESSION:
            continue
        text = value.text.rstrip()
        if any(op in text for op in _DEFERRED_OPERATORS) and not text.endswith(_MATERIALIZERS):
            out.append(
                f"PERFORMANCE: Variable '{declarator.identifier}' holds a deferred LINQ query. "
                "Consider materializing with ToList()/ToArray() if enumerated multiple times."
            )
    return out


@detector(PERF_STRING_FORMAT_001, Category.PERFORMANCE)
def detect_string_format(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``string.Format``/``string.Concat`` calls; reported at most once."""
    for invocation in tree.descendants(NodeKind.INVOCATION_EXPRESSION):
        callee = invocation.field("function")
        if callee is not None and any(helper in callee.text for helper in _FORMAT_HELPERS):
            return [
                "PERFORMANCE: Consider using string interpolation instead of string.Format "
                "for better readability and performance."
            ]
    return []


@detector(PERF_CONFIGURE_AWAIT_001, Category.PERFORMANCE)
def detect_missing_configure_await(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``await`` without ``ConfigureAwait(false)``."""
    for awaited in tree.descendants(NodeKind.AWAIT_EXPRESSION):
        if "ConfigureAwait" not in awaited.text:
            return [
                "PERFORMANCE: Consider using ConfigureAwait(false) in library code "
                "to avoid unnecessary context switches."
            ]
    return []


@detector(PERF_LINQ_CHAIN_001, Category.PERFORMANCE)
def detect_excessive_chaining(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Single invocations chaining more than three query operators."""
    for invocation in tree.descendants(NodeKind.INVOCATION_EXPRESSION):
        if len(_CHAINED_OPERATOR.findall(invocation.text)) > LINQ_CHAIN_LIMIT:
            return [
                "PERFORMANCE: Excessive LINQ method chaining detected. "
                "Consider combining operations or using query syntax."
            ]
    return []
