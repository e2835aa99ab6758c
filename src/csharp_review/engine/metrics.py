"""Metrics calculator — structural counts and cyclomatic complexity."""

from __future__ import annotations

from csharp_review.model.metrics import Metrics
from csharp_review.syntax.node import NodeKind, SyntaxNode

_DECISION_KINDS = frozenset(
    {
        NodeKind.IF_STATEMENT,
        NodeKind.WHILE_STATEMENT,
        NodeKind.FOR_STATEMENT,
        NodeKind.FOREACH_STATEMENT,
        NodeKind.CASE_LABEL,
        NodeKind.CATCH_CLAUSE,
        NodeKind.CONDITIONAL_EXPRESSION,
    }
)

_SHORT_CIRCUIT_OPERATORS = ("&&", "||")


def cyclomatic_complexity(node: SyntaxNode) -> int:
    """Count decision points below *node*.

    CC = 1 + if/while/for/foreach/case/catch/?: + each ``&&``/``||``.
    """
    cc = 1
    for child in node.walk():
        if child.kind in _DECISION_KINDS:
            cc += 1
        elif child.is_binary(*_SHORT_CIRCUIT_OPERATORS):
            cc += 1
    return cc


def count_lines(text: str) -> int:
    """Number of lines that are not blank or whitespace-only."""
    return sum(1 for line in text.split("\n") if line.strip())


def compute_metrics(tree: SyntaxNode) -> Metrics:
    """Compute unit-level metrics. Never fails; an empty unit gives zeros and CC 1."""
    classes = 0
    methods = 0
    for node in tree.walk():
        if node.kind == NodeKind.CLASS_DECLARATION:
            classes += 1
        elif node.kind == NodeKind.METHOD_DECLARATION:
            methods += 1

    return Metrics(
        class_count=classes,
        method_count=methods,
        line_count=count_lines(tree.text),
        cyclomatic_complexity=cyclomatic_complexity(tree),
    )
