"""Basic / style detectors — per-declaration size, naming and documentation checks."""

from __future__ import annotations

from typing import Iterator, Sequence

from csharp_review.detectors.registry import detector
from csharp_review.engine.metrics import cyclomatic_complexity
from csharp_review.model import Category
from csharp_review.model.diagnostic import Diagnostic
from csharp_review.policy.thresholds import HIGH_COMPLEXITY, LARGE_CLASS_MEMBERS, LONG_METHOD_LINES
from csharp_review.rules import (
    STY_ASYNC_SUFFIX_001,
    STY_COMPLEXITY_001,
    STY_LARGE_CLASS_001,
    STY_LONG_METHOD_001,
    STY_MISSING_DOC_001,
)
from csharp_review.syntax.node import NodeKind, SyntaxNode

_DOC_COMMENT_PREFIXES = ("///", "/**")
_NON_MEMBER_PREFIXES = ("comment", "preproc")


def _methods(tree: SyntaxNode) -> Iterator[SyntaxNode]:
    return tree.descendants(NodeKind.METHOD_DECLARATION)


def has_doc_comment(node: SyntaxNode) -> bool:
    """True if a ``///`` or ``/** */`` comment sits directly above *node*."""
    for sibling in node.previous_siblings():
        if sibling.kind != NodeKind.COMMENT:
            return False
        if sibling.text.startswith(_DOC_COMMENT_PREFIXES):
            return True
    return False


def member_count(cls: SyntaxNode) -> int:
    body = cls.field("body")
    if body is None:
        return 0
    return sum(1 for m in body.children if not m.kind_name.startswith(_NON_MEMBER_PREFIXES))


@detector(STY_LONG_METHOD_001, Category.BASIC)
def detect_long_methods(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Methods whose body runs past the line threshold."""
    out: list[str] = []
    for method in _methods(tree):
        lines = method.line_count
        if lines > LONG_METHOD_LINES:
            out.append(
                f"Method '{method.identifier}' is {lines} lines long. "
                "Consider breaking it into smaller methods."
            )
    return out


@detector(STY_MISSING_DOC_001, Category.BASIC)
def detect_missing_docs(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Public methods without a leading XML doc comment."""
    return [
        f"Public method '{method.identifier}' is missing XML documentation."
        for method in _methods(tree)
        if "public" in method.modifiers and not has_doc_comment(method)
    ]


@detector(STY_ASYNC_SUFFIX_001, Category.BASIC)
def detect_async_suffix(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Async methods whose name lacks the ``Async`` suffix."""
    return [
        f"Async method '{method.identifier}' should have 'Async' suffix."
        for method in _methods(tree)
        if "async" in method.modifiers and not method.identifier.endswith("Async")
    ]


@detector(STY_LARGE_CLASS_001, Category.BASIC)
def detect_large_classes(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Classes with more members than the class-size threshold."""
    out: list[str] = []
    for cls in tree.descendants(NodeKind.CLASS_DECLARATION):
        members = member_count(cls)
        if members > LARGE_CLASS_MEMBERS:
            out.append(
                f"Class '{cls.identifier}' has {members} members. "
                "Consider splitting into smaller classes."
            )
    return out


@detector(STY_COMPLEXITY_001, Category.BASIC)
def detect_complex_methods(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Methods whose cyclomatic complexity exceeds the threshold."""
    out: list[str] = []
    for method in _methods(tree):
        cc = cyclomatic_complexity(method)
        if cc > HIGH_COMPLEXITY:
            out.append(
                f"Method '{method.identifier}' has high cyclomatic complexity ({cc}). "
                "Consider refactoring."
            )
    return out
