"""Metrics — structural counts for one compilation unit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Metrics:
    class_count: int = 0
    method_count: int = 0
    line_count: int = 0
    cyclomatic_complexity: int = 1

    def to_dict(self) -> dict[str, int]:
        return {
            "classes": self.class_count,
            "methods": self.method_count,
            "lines": self.line_count,
            "complexity": self.cyclomatic_complexity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Metrics":
        return cls(
            class_count=data["classes"],
            method_count=data["methods"],
            line_count=data["lines"],
            cyclomatic_complexity=data["complexity"],
        )
