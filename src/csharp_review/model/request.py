"""AnalysisRequest — what the orchestrator is asked to analyze."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from csharp_review.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class AnalysisRequest:
    """Either inline ``source_text`` (staged to an ephemeral file) or an
    existing ``file_path`` (used as-is), never both.

    ``display_name`` only affects the file name reported in diagnostic
    locations.
    """

    source_text: Optional[str] = None
    file_path: Optional[Path] = None
    display_name: Optional[str] = None

    def __post_init__(self) -> None:
        has_text = self.source_text is not None
        has_path = self.file_path is not None
        if has_text == has_path:
            raise ValidationError(
                "AnalysisRequest requires exactly one of source_text or file_path"
            )
        if has_path and not isinstance(self.file_path, Path):
            object.__setattr__(self, "file_path", Path(self.file_path))

    @classmethod
    def from_text(cls, text: str, display_name: Optional[str] = None) -> "AnalysisRequest":
        return cls(source_text=text, display_name=display_name)

    @classmethod
    def from_path(cls, path: str | Path, display_name: Optional[str] = None) -> "AnalysisRequest":
        return cls(file_path=Path(path), display_name=display_name)

    @property
    def is_ephemeral(self) -> bool:
        return self.source_text is not None
