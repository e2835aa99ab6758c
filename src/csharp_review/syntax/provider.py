"""Tree providers — parse C# source into ``SyntaxNode`` trees plus diagnostics.

The engine only depends on the ``TreeProvider`` protocol. The default
implementation uses tree-sitter with the C# grammar and reports syntax
errors (``ERROR`` and missing nodes) as compiler diagnostics; a broken
input still yields a best-effort tree.
"""

from __future__ import annotations

import functools
import logging
from typing import Optional, Protocol

import tree_sitter
import tree_sitter_c_sharp

from csharp_review.model import Severity
from csharp_review.model.diagnostic import Diagnostic, Location
from csharp_review.rules import SYN_MISSING_001, SYN_UNEXPECTED_001
from csharp_review.syntax.node import NodeKind, Span, SyntaxNode

_logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_NAME = "snippet.cs"
DIAGNOSTIC_CATEGORY = "Syntax"

# Grammar-version spellings folded onto canonical kinds.
_KIND_ALIASES: dict[str, NodeKind] = {
    "for_each_statement": NodeKind.FOREACH_STATEMENT,
    "case_pattern_switch_label": NodeKind.CASE_LABEL,
    "verbatim_string_literal": NodeKind.STRING_LITERAL,
    "raw_string_literal": NodeKind.STRING_LITERAL,
}

# Wrapper nodes whose children are hoisted into the parent.
_TRANSPARENT = frozenset({"equals_value_clause"})

_FIELD_NAMES = (
    "name",
    "body",
    "type",
    "left",
    "right",
    "function",
    "expression",
    "arguments",
    "condition",
    "value",
    "returns",
)

_OPERATOR_KINDS = frozenset({"binary_expression", "assignment_expression"})


class TreeProvider(Protocol):
    """Anything that can turn source text into a tree and diagnostics."""

    def parse(self, text: str, display_name: str = DEFAULT_DISPLAY_NAME) -> tuple[SyntaxNode, list[Diagnostic]]:
        ...


@functools.lru_cache(maxsize=1)
def _language() -> tree_sitter.Language:
    return tree_sitter.Language(tree_sitter_c_sharp.language())


class TreeSitterProvider:
    """``TreeProvider`` backed by tree-sitter's C# grammar."""

    def __init__(self) -> None:
        self._parser = tree_sitter.Parser(_language())

    def parse(self, text: str, display_name: str = DEFAULT_DISPLAY_NAME) -> tuple[SyntaxNode, list[Diagnostic]]:
        source = text.encode("utf-8")
        ts_tree = self._parser.parse(source)
        root = _convert(ts_tree.root_node, source)
        # The unit's text is the whole input, leading trivia included.
        root.text = text
        diagnostics = _collect_diagnostics(ts_tree.root_node, source, display_name)
        _logger.debug(
            "parsed %s: %d bytes, %d syntax diagnostic(s)",
            display_name,
            len(source),
            len(diagnostics),
        )
        return root, diagnostics


# ── conversion ──────────────────────────────────────────────────────


def _slice(source: bytes, start: int, end: int) -> str:
    return source[start:end].decode("utf-8", errors="replace")


def _char_column(source: bytes, byte_offset: int, byte_column: int) -> int:
    """Translate a byte column into a 1-based character column."""
    line_start = byte_offset - byte_column
    return len(_slice(source, line_start, byte_offset)) + 1


def _span(ts_node: tree_sitter.Node, source: bytes) -> Span:
    start_row, start_col = ts_node.start_point
    end_row, end_col = ts_node.end_point
    return Span(
        start_line=start_row + 1,
        start_column=_char_column(source, ts_node.start_byte, start_col),
        end_line=end_row + 1,
        end_column=_char_column(source, ts_node.end_byte, end_col),
        start_byte=ts_node.start_byte,
        end_byte=ts_node.end_byte,
    )


def _make_node(ts_node: tree_sitter.Node, source: bytes, kind: Optional[str] = None) -> SyntaxNode:
    return SyntaxNode(
        kind=kind or _KIND_ALIASES.get(ts_node.type, ts_node.type),
        text=_slice(source, ts_node.start_byte, ts_node.end_byte),
        span=_span(ts_node, source),
    )


def _operator_token(ts_node: tree_sitter.Node, source: bytes) -> str:
    op = ts_node.child_by_field_name("operator")
    if op is not None:
        return _slice(source, op.start_byte, op.end_byte)
    for child in ts_node.children:
        if not child.is_named:
            return child.type
    return ""


def _significant_children(ts_node: tree_sitter.Node) -> list[tuple[tree_sitter.Node, Optional[str]]]:
    """Children to keep, paired with a forced kind (or ``None``).

    Named nodes are kept; transparent wrappers are flattened; anonymous
    ``case`` tokens of a switch section become case-label nodes.
    """
    out: list[tuple[tree_sitter.Node, Optional[str]]] = []
    for child in ts_node.children:
        if child.type in _TRANSPARENT:
            out.extend((c, None) for c in child.named_children)
        elif child.is_named:
            out.append((child, None))
        elif child.type == "case" and ts_node.type == "switch_section":
            out.append((child, NodeKind.CASE_LABEL))
    return out


def _declarator_value(ts_node: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    """Initializer expression of a variable declarator, if any."""
    seen_equals = False
    for child in ts_node.children:
        if child.type in _TRANSPARENT:
            named = child.named_children
            return named[0] if named else None
        if child.type == "=":
            seen_equals = True
        elif seen_equals and child.is_named and child.type != "comment":
            return child
    return None


def _convert(ts_root: tree_sitter.Node, source: bytes) -> SyntaxNode:
    """Convert a tree-sitter tree into ``SyntaxNode``s without recursion."""
    root = _make_node(ts_root, source)
    stack: list[tuple[tree_sitter.Node, SyntaxNode]] = [(ts_root, root)]
    while stack:
        ts_node, node = stack.pop()

        named_fields: dict[int, str] = {}
        for name in _FIELD_NAMES:
            target = ts_node.child_by_field_name(name)
            if target is not None:
                named_fields.setdefault(target.id, name)
        if ts_node.type == "variable_declarator":
            value = _declarator_value(ts_node)
            if value is not None:
                named_fields[value.id] = "value"
        if ts_node.type in _OPERATOR_KINDS:
            node.token = _operator_token(ts_node, source)

        for ts_child, forced_kind in _significant_children(ts_node):
            child = _make_node(ts_child, source, forced_kind)
            child.parent = node
            node.children.append(child)
            field_name = named_fields.get(ts_child.id)
            if field_name is not None:
                node.fields[field_name] = child
            if forced_kind is None:
                stack.append((ts_child, child))

        # Older grammars name the invocation target ``expression``.
        if node.kind == NodeKind.INVOCATION_EXPRESSION and "function" not in node.fields:
            callee = node.fields.get("expression") or (node.children[0] if node.children else None)
            if callee is not None:
                node.fields["function"] = callee
    return root


# ── diagnostics ─────────────────────────────────────────────────────


def _snippet(text: str, limit: int = 40) -> str:
    first = text.strip().split("\n", 1)[0]
    return first if len(first) <= limit else first[: limit - 3] + "..."


def _collect_diagnostics(ts_root: tree_sitter.Node, source: bytes, display_name: str) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    if not ts_root.has_error:
        return diagnostics

    stack = [ts_root]
    while stack:
        ts_node = stack.pop()
        if ts_node.is_missing:
            diagnostics.append(_diagnostic(ts_node, source, display_name, SYN_MISSING_001, f"'{ts_node.type}' expected"))
        elif ts_node.is_error:
            text = _slice(source, ts_node.start_byte, ts_node.end_byte)
            diagnostics.append(
                _diagnostic(ts_node, source, display_name, SYN_UNEXPECTED_001, f"Unexpected syntax '{_snippet(text)}'")
            )
        if ts_node.has_error and not ts_node.is_error:
            stack.extend(reversed(ts_node.children))

    diagnostics.sort(key=lambda d: (d.location.line, d.location.column) if d.location else (0, 0))
    return diagnostics


def _diagnostic(ts_node: tree_sitter.Node, source: bytes, display_name: str, rule_id: str, message: str) -> Diagnostic:
    row, col = ts_node.start_point
    return Diagnostic(
        id=rule_id,
        severity=Severity.ERROR,
        message=message,
        category=DIAGNOSTIC_CATEGORY,
        location=Location(
            line=row + 1,
            column=_char_column(source, ts_node.start_byte, col),
            file=display_name,
        ),
    )


@functools.lru_cache(maxsize=1)
def default_provider() -> TreeSitterProvider:
    """Process-wide lazily created tree-sitter provider."""
    return TreeSitterProvider()
