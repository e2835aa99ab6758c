"""Enums shared across the engine, orchestrator and front-end layers."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Compiler diagnostic severity, spelled the way the wire contract does."""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"
    HIDDEN = "Hidden"


class Category(str, Enum):
    """Suggestion categories, declared in aggregation order."""

    BASIC = "basic"
    SECURITY = "security"
    PERFORMANCE = "performance"
    LINQ = "linq"


# Fixed concatenation order used by the aggregator.
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.BASIC,
    Category.SECURITY,
    Category.PERFORMANCE,
    Category.LINQ,
)


class Availability(str, Enum):
    """Whether the analyzer artifact has been built."""

    NOT_BUILT = "NotBuilt"
    BUILT = "Built"
