"""Diagnostic — a compiler-level finding with an optional source location."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from . import Severity


@dataclass(frozen=True, slots=True)
class Location:
    """1-based source position of a diagnostic."""

    line: int
    column: int
    file: str

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "column": self.column, "file": self.file}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Location":
        return cls(line=data["line"], column=data["column"], file=data["file"])


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Immutable diagnostic as produced by the tree provider.

    Corresponds to ``diagnostics[]`` in ``analysis_result.schema.json``.
    """

    id: str
    severity: Severity
    message: str
    category: str
    location: Optional[Location] = None

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "severity": self.severity.value,
            "message": self.message,
            "category": self.category,
        }
        if self.location is not None:
            d["location"] = self.location.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Diagnostic":
        loc = data.get("location")
        return cls(
            id=data["id"],
            severity=Severity(data["severity"]),
            message=data["message"],
            category=data["category"],
            location=Location.from_dict(loc) if loc is not None else None,
        )
