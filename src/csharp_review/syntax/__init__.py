"""Syntax trees and the providers that build them."""

from csharp_review.syntax.node import LOOP_KINDS, NodeKind, Span, SyntaxNode

__all__ = ["LOOP_KINDS", "NodeKind", "Span", "SyntaxNode"]
