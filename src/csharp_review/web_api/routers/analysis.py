"""
Analysis Router
===============
Endpoints for analyzer availability, builds and analysis runs.
"""
from fastapi import APIRouter, Depends, HTTPException

from csharp_review.core.orchestrator import AnalyzerOrchestrator
from csharp_review.exceptions import (
    CSharpReviewError,
    NotBuiltError,
    ProcessExitError,
    ResultParseError,
    SpawnError,
    ValidationError,
    remediation_hint,
)
from csharp_review.model import Availability
from csharp_review.model.request import AnalysisRequest
from csharp_review.web_api.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    BuildResponse,
    StatusResponse,
)

router = APIRouter()

_STATUS_CODES = {
    ValidationError: 422,
    NotBuiltError: 409,
    SpawnError: 503,
    ProcessExitError: 502,
    ResultParseError: 502,
}


def get_orchestrator() -> AnalyzerOrchestrator:
    """Orchestrator configured from the environment (overridable in tests)."""
    return AnalyzerOrchestrator()


def _http_error(exc: CSharpReviewError) -> HTTPException:
    status = next(
        (code for cls, code in _STATUS_CODES.items() if isinstance(exc, cls)),
        500,
    )
    return HTTPException(
        status_code=status,
        detail={
            "error": type(exc).__name__,
            "message": str(exc),
            "hint": remediation_hint(exc),
        },
    )


@router.get("/analyzer/status", response_model=StatusResponse)
def analyzer_status(orchestrator: AnalyzerOrchestrator = Depends(get_orchestrator)):
    """
    Report whether the analyzer artifact is built.
    Re-checked on every request.
    """
    availability = orchestrator.availability()
    return StatusResponse(
        status=availability.value,
        built=availability is Availability.BUILT,
        artifact=str(orchestrator.settings.artifact_path),
    )


@router.post("/analyzer/build", response_model=BuildResponse)
def build_analyzer(orchestrator: AnalyzerOrchestrator = Depends(get_orchestrator)):
    """
    Build the analyzer artifact.
    A failed build is reported with success=false, not as an HTTP error.
    """
    outcome = orchestrator.build()
    return BuildResponse(success=outcome.success, output=outcome.output)


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(
    request: AnalyzeRequest,
    orchestrator: AnalyzerOrchestrator = Depends(get_orchestrator),
):
    """
    Analyze C# code in a fresh analyzer process.

    - **code**: inline C# source text
    - **file_path**: path to an existing .cs file
    - **display_name**: file name used in diagnostic locations
    """
    try:
        analysis_request = AnalysisRequest(
            source_text=request.code,
            file_path=request.file_path,
            display_name=request.display_name,
        )
        result = orchestrator.analyze(analysis_request)
    except CSharpReviewError as e:
        raise _http_error(e)

    return AnalyzeResponse.from_result(result)
