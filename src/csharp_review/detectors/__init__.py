"""Detectors produce suggestion strings from a parsed compilation unit.

Every detector is a plain function registered by category:

    - style: long methods, missing docs, async naming, large classes, complexity
    - security: SQL concatenation, secrets, swallowed exceptions, file ops, weak RNG
    - performance: loops, materialization, deferred queries, formatting, awaits
    - linq: query-operator rewrites

Importing this package registers all of them in that order.
"""

from __future__ import annotations

from csharp_review.detectors.registry import (
    Detector,
    detector,
    registered_detectors,
    run_detectors,
)

# Registration order is significant within a category.
from csharp_review.detectors import style, security, performance, linq  # noqa: E402, F401

__all__ = ["Detector", "detector", "registered_detectors", "run_detectors"]
