"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    BuildResponse,
    DiagnosticModel,
    LocationModel,
    MetricsModel,
    StatusResponse,
)

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "BuildResponse",
    "DiagnosticModel",
    "LocationModel",
    "MetricsModel",
    "StatusResponse",
]
