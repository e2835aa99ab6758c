"""Detector registry — ordered, category-tagged heuristic rules.

A detector is a plain function ``(tree, diagnostics) -> list[str]``
registered with :func:`detector`. Detectors never depend on each other;
the aggregator fixes the order between categories, registration order
fixes it within a category.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from csharp_review.model import CATEGORY_ORDER, Category
from csharp_review.model.diagnostic import Diagnostic
from csharp_review.rules import ALL_RULE_IDS
from csharp_review.syntax.node import SyntaxNode

_logger = logging.getLogger(__name__)

DetectFn = Callable[[SyntaxNode, Sequence[Diagnostic]], list[str]]


@dataclass(frozen=True, slots=True)
class Detector:
    """A registered rule: stable ID, category and detection function."""

    rule_id: str
    category: Category
    detect: DetectFn

    def run(self, tree: SyntaxNode, diagnostics: Sequence[Diagnostic] = ()) -> list[str]:
        return list(self.detect(tree, diagnostics))


_REGISTRY: list[Detector] = []


def detector(rule_id: str, category: Category) -> Callable[[DetectFn], DetectFn]:
    """Register the decorated function under *rule_id*."""
    if rule_id not in ALL_RULE_IDS:
        raise ValueError(f"unknown rule ID {rule_id!r}; add it to csharp_review.rules")

    def _register(fn: DetectFn) -> DetectFn:
        if any(d.rule_id == rule_id for d in _REGISTRY):
            raise ValueError(f"rule ID {rule_id!r} registered twice")
        _REGISTRY.append(Detector(rule_id=rule_id, category=category, detect=fn))
        return fn

    return _register


def registered_detectors(category: Optional[Category] = None) -> list[Detector]:
    """Registered detectors, optionally restricted to one *category*."""
    if category is None:
        return list(_REGISTRY)
    return [d for d in _REGISTRY if d.category == category]


def run_detectors(
    tree: SyntaxNode,
    diagnostics: Sequence[Diagnostic] = (),
    detectors: Optional[Sequence[Detector]] = None,
) -> dict[Category, list[str]]:
    """Run every detector and group suggestions by category.

    A detector that raises is logged and skipped; the others still run.
    """
    groups: dict[Category, list[str]] = {category: [] for category in CATEGORY_ORDER}
    for det in registered_detectors() if detectors is None else detectors:
        try:
            groups[det.category].extend(det.run(tree, diagnostics))
        except Exception:
            _logger.exception("Detector '%s' raised an exception — skipped", det.rule_id)
    return groups
