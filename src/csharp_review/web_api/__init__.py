"""
C# Review Web API
=================
FastAPI-based REST API over the analyzer orchestrator.

Quick Start:
    uvicorn csharp_review.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
