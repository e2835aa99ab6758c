"""Security detectors — textual heuristics over subtree source text.

v1 scope: cheap, single-unit checks with no symbol resolution. Matches are
case-insensitive where the rule says so and may report false positives
(e.g. a literal that merely contains the word "select").
"""

from __future__ import annotations

import re
from typing import Sequence

from csharp_review.detectors.registry import detector
from csharp_review.model import Category
from csharp_review.model.diagnostic import Diagnostic
from csharp_review.rules import (
    SEC_HARDCODED_SECRET_001,
    SEC_SQL_INJECTION_001,
    SEC_SWALLOWED_EXCEPTION_001,
    SEC_UNSAFE_FILE_OP_001,
    SEC_WEAK_RANDOM_001,
)
from csharp_review.syntax.node import NodeKind, SyntaxNode

# ── patterns ────────────────────────────────────────────────────────

_SQL_KEYWORDS = ("select", "insert", "update", "delete")

# Secret-looking names on the left of an assignment
_SECRET_ASSIGNMENT_TARGET = re.compile(r"password|secret|apikey|connectionstring", re.IGNORECASE)

# Secret-looking variable or field names
_SECRET_DECLARATOR_NAME = re.compile(r"password|secret|apikey", re.IGNORECASE)

_UNSAFE_FILE_CALLS = ("File.Delete", "File.Move", "Directory.Delete", "File.WriteAllText")

_GENERAL_EXCEPTION_TYPE = "Exception"
_WEAK_RANDOM_TYPE = "Random"


# ── detectors ───────────────────────────────────────────────────────


@detector(SEC_SQL_INJECTION_001, Category.SECURITY)
def detect_sql_injection(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """String concatenation that mentions a SQL verb; reported once per unit."""
    for concat in tree.descendants(NodeKind.BINARY_EXPRESSION):
        if not concat.is_binary("+"):
            continue
        text = concat.text.lower()
        if any(keyword in text for keyword in _SQL_KEYWORDS):
            return [
                "SECURITY: Potential SQL injection risk detected. "
                "Use parameterized queries instead of string concatenation."
            ]
    return []


@detector(SEC_HARDCODED_SECRET_001, Category.SECURITY)
def detect_hardcoded_secrets(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """String literals assigned to secret-looking targets.

    An assignment match ends the scan; declarator matches are reported
    per declarator.
    """
    out: list[str] = []
    for literal in tree.descendants(NodeKind.STRING_LITERAL):
        parent = literal.parent
        if parent is None:
            continue
        if parent.kind == NodeKind.ASSIGNMENT_EXPRESSION and parent.field("right") is literal:
            left = parent.field("left")
            if left is not None and _SECRET_ASSIGNMENT_TARGET.search(left.text):
                out.append("SECURITY: Hardcoded sensitive data detected. Use secure configuration instead.")
                break
        elif parent.kind == NodeKind.VARIABLE_DECLARATOR and parent.field("value") is literal:
            name = parent.identifier
            if _SECRET_DECLARATOR_NAME.search(name):
                out.append(
                    f"SECURITY: Hardcoded sensitive data in variable '{name}'. Use secure configuration."
                )
    return out


def _catch_type(clause: SyntaxNode) -> str:
    for child in clause.children:
        if child.kind == NodeKind.CATCH_DECLARATION:
            declared = child.field("type")
            return declared.text if declared is not None else ""
    return ""


@detector(SEC_SWALLOWED_EXCEPTION_001, Category.SECURITY)
def detect_swallowed_exceptions(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """``catch (Exception ...)`` blocks that neither rethrow nor log."""
    out: list[str] = []
    for clause in tree.descendants(NodeKind.CATCH_CLAUSE):
        if _catch_type(clause) != _GENERAL_EXCEPTION_TYPE:
            continue
        body = clause.field("body")
        if body is None:
            continue
        rethrows = any(True for _ in body.descendants(NodeKind.THROW_STATEMENT))
        logs = "log" in body.text.lower()
        if not rethrows and not logs:
            out.append(
                "SECURITY: Catching general Exception without logging or rethrowing "
                "can hide security issues."
            )
    return out


@detector(SEC_UNSAFE_FILE_OP_001, Category.SECURITY)
def detect_unsafe_file_operations(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Destructive file-system calls; the first one found is reported."""
    for invocation in tree.descendants(NodeKind.INVOCATION_EXPRESSION):
        callee = invocation.field("function")
        name = callee.text if callee is not None else ""
        if any(call in name for call in _UNSAFE_FILE_CALLS):
            return [
                f"SECURITY: File system operation '{name}' detected. Ensure proper path "
                "validation to prevent directory traversal attacks."
            ]
    return []


@detector(SEC_WEAK_RANDOM_001, Category.SECURITY)
def detect_weak_random(tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
    """Every ``new Random(...)`` is reported."""
    out: list[str] = []
    for creation in tree.descendants(NodeKind.OBJECT_CREATION_EXPRESSION):
        created = creation.field("type")
        if created is not None and created.text == _WEAK_RANDOM_TYPE:
            out.append(
                "SECURITY: System.Random is not cryptographically secure. "
                "Use RandomNumberGenerator for security-sensitive operations."
            )
    return out
