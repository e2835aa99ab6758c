"""
Analysis Schemas
================
Request and response models for the analyzer endpoints.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from csharp_review.model.analysis_result import AnalysisResult


class AnalyzeRequest(BaseModel):
    """Request to analyze inline C# code or an existing file (exactly one)."""

    code: Optional[str] = Field(default=None, description="C# source text to analyze")
    file_path: Optional[str] = Field(default=None, description="Path to an existing .cs file")
    display_name: Optional[str] = Field(
        default=None, description="File name reported in diagnostic locations"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "code": "public class Greeter { public void Hello() { } }",
                "display_name": "Greeter.cs",
            }
        }


class LocationModel(BaseModel):
    line: int
    column: int
    file: str


class DiagnosticModel(BaseModel):
    id: str
    severity: str
    message: str
    location: Optional[LocationModel] = None
    category: str


class MetricsModel(BaseModel):
    classes: int = Field(default=0)
    methods: int = Field(default=0)
    lines: int = Field(default=0)
    complexity: int = Field(default=1)


class AnalyzeResponse(BaseModel):
    """Response from an analysis: the analyzer wire contract."""

    diagnostics: List[DiagnosticModel] = Field(default_factory=list)
    metrics: MetricsModel
    suggestions: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalyzeResponse":
        return cls.model_validate(result.to_dict())

    class Config:
        json_schema_extra = {
            "example": {
                "diagnostics": [],
                "metrics": {"classes": 1, "methods": 1, "lines": 1, "complexity": 1},
                "suggestions": [
                    "Public method 'Hello' is missing XML documentation."
                ],
            }
        }


class StatusResponse(BaseModel):
    """Analyzer availability"""

    status: str = Field(..., description="Built or NotBuilt")
    built: bool
    artifact: str


class BuildResponse(BaseModel):
    """Outcome of an analyzer build"""

    success: bool
    output: str = Field(default="")
