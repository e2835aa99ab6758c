"""Generic, read-only syntax tree consumed by metrics and detectors.

The tree provider converts its parser's native nodes into ``SyntaxNode``
instances tagged with a canonical ``NodeKind``. Kinds the engine does not
care about keep the parser's own type string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class NodeKind(str, Enum):
    """Canonical node kinds the engine reasons about."""

    COMPILATION_UNIT = "compilation_unit"
    CLASS_DECLARATION = "class_declaration"
    METHOD_DECLARATION = "method_declaration"
    DECLARATION_LIST = "declaration_list"
    MODIFIER = "modifier"
    IDENTIFIER = "identifier"
    COMMENT = "comment"
    BLOCK = "block"

    # statements
    IF_STATEMENT = "if_statement"
    WHILE_STATEMENT = "while_statement"
    FOR_STATEMENT = "for_statement"
    FOREACH_STATEMENT = "foreach_statement"
    SWITCH_SECTION = "switch_section"
    CASE_LABEL = "case_switch_label"
    CATCH_CLAUSE = "catch_clause"
    CATCH_DECLARATION = "catch_declaration"
    THROW_STATEMENT = "throw_statement"

    # expressions
    CONDITIONAL_EXPRESSION = "conditional_expression"
    BINARY_EXPRESSION = "binary_expression"
    ASSIGNMENT_EXPRESSION = "assignment_expression"
    INVOCATION_EXPRESSION = "invocation_expression"
    OBJECT_CREATION_EXPRESSION = "object_creation_expression"
    AWAIT_EXPRESSION = "await_expression"
    QUERY_EXPRESSION = "query_expression"
    STRING_LITERAL = "string_literal"

    # declarations
    VARIABLE_DECLARATOR = "variable_declarator"

    # provider diagnostics
    ERROR = "ERROR"


LOOP_KINDS = frozenset(
    {NodeKind.FOR_STATEMENT, NodeKind.FOREACH_STATEMENT, NodeKind.WHILE_STATEMENT}
)


@dataclass(frozen=True, slots=True)
class Span:
    """Source range; lines and columns are 1-based, bytes 0-based."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int
    start_byte: int = 0
    end_byte: int = 0


@dataclass(eq=False)
class SyntaxNode:
    """A tagged node: ``kind`` discriminator, verbatim ``text``, ``span``,
    ordered ``children`` and named ``fields``.

    ``token`` holds the operator or keyword for tagged variants
    (``"&&"`` for a logical-and binary expression, ``"="`` for a simple
    assignment). Nodes are never mutated once the provider returns the tree.
    """

    kind: str
    text: str
    span: Span
    children: list["SyntaxNode"] = field(default_factory=list)
    fields: dict[str, "SyntaxNode"] = field(default_factory=dict)
    token: str = ""
    parent: Optional["SyntaxNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        # Canonical kinds are stored as enum members so set lookups hash alike.
        try:
            self.kind = NodeKind(self.kind)
        except ValueError:
            pass

    # ── traversal ───────────────────────────────────────────────────

    def walk(self) -> Iterator["SyntaxNode"]:
        """Yield every descendant in pre-order (the node itself excluded)."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def descendants(self, *kinds: str) -> Iterator["SyntaxNode"]:
        """Yield pre-order descendants whose kind is one of *kinds*."""
        for node in self.walk():
            if any(node.kind == kind for kind in kinds):
                yield node

    def field(self, name: str) -> Optional["SyntaxNode"]:
        return self.fields.get(name)

    def previous_siblings(self) -> Iterator["SyntaxNode"]:
        """Yield siblings before this node, nearest first."""
        if self.parent is None:
            return
        siblings = self.parent.children
        for idx, sib in enumerate(siblings):
            if sib is self:
                yield from reversed(siblings[:idx])
                return

    # ── declaration helpers ─────────────────────────────────────────

    @property
    def identifier(self) -> str:
        """Declared name (class, method, declarator), or ``""``."""
        name = self.fields.get("name")
        if name is not None:
            return name.text
        for child in self.children:
            if child.kind == NodeKind.IDENTIFIER:
                return child.text
        return ""

    @property
    def modifiers(self) -> list[str]:
        return [c.text for c in self.children if c.kind == NodeKind.MODIFIER]

    @property
    def kind_name(self) -> str:
        """The kind as a plain string, canonical or provider-specific."""
        return self.kind.value if isinstance(self.kind, NodeKind) else self.kind

    @property
    def line_count(self) -> int:
        return len(self.text.split("\n"))

    def is_binary(self, *operators: str) -> bool:
        """True for a binary expression, optionally restricted to *operators*."""
        if self.kind != NodeKind.BINARY_EXPRESSION:
            return False
        return not operators or self.token in operators

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        snippet = self.text if len(self.text) <= 40 else self.text[:37] + "..."
        return f"SyntaxNode({self.kind!s}, {snippet!r})"
