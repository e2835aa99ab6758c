"""Orchestrator — availability, build, and one analyzer process per request."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from csharp_review.core.config import AnalyzerSettings
from csharp_review.core.staging import staged_input
from csharp_review.engine.aggregate import parse
from csharp_review.exceptions import NotBuiltError, ProcessExitError, SpawnError, ValidationError
from csharp_review.model import Availability
from csharp_review.model.analysis_result import AnalysisResult
from csharp_review.model.request import AnalysisRequest

_logger = logging.getLogger(__name__)


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


@dataclass(frozen=True, slots=True)
class BuildResult:
    success: bool
    output: str

    def to_dict(self) -> dict:
        return {"success": self.success, "output": self.output}


class AnalyzerOrchestrator:
    """Drives the external analyzer artifact.

    Holds no mutable state: availability is re-derived from the filesystem
    on every query, and each ``analyze()`` call owns its own child process
    and staging file.
    """

    def __init__(self, settings: Optional[AnalyzerSettings] = None) -> None:
        self.settings = settings if settings is not None else AnalyzerSettings.from_env()

    # ── availability ────────────────────────────────────────────────

    def availability(self) -> Availability:
        if self.settings.artifact_path.is_file():
            return Availability.BUILT
        return Availability.NOT_BUILT

    # ── build ───────────────────────────────────────────────────────

    def build(self) -> BuildResult:
        """Run the build command in the analyzer project directory.

        Never raises for a failed or unstartable build; the outcome is in
        the returned ``BuildResult``.
        """
        project_dir = Path(self.settings.project_dir)
        argv = self.settings.build_argv()
        _logger.debug("building analyzer: %s (cwd=%s)", argv, project_dir)
        try:
            project_dir.mkdir(parents=True, exist_ok=True)
            proc = subprocess.run(
                argv,
                cwd=project_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except OSError as e:
            _logger.warning("analyzer build could not start: %s", e)
            return BuildResult(success=False, output=f"Failed to start build: {e}")

        output = _decode(proc.stdout)
        if proc.returncode != 0:
            _logger.warning("analyzer build failed with exit code %d", proc.returncode)
            return BuildResult(success=False, output=f"Build failed:\n{output}")
        return BuildResult(success=True, output=output)

    # ── analyze ─────────────────────────────────────────────────────

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Analyze *request* in a fresh analyzer process.

        Raises ``NotBuiltError`` before anything is spawned or staged,
        ``ValidationError`` when a file request names no existing file,
        ``SpawnError`` when the process cannot start, ``ProcessExitError``
        on a non-zero exit and ``ResultParseError`` when stdout violates
        the result contract. Staged input is removed on every path.
        """
        if self.availability() is not Availability.BUILT:
            raise NotBuiltError()
        if not request.is_ephemeral and not request.file_path.is_file():
            raise ValidationError(f"No such file: {request.file_path}")

        with staged_input(request, self.settings.staging_directory) as input_path:
            argv = self.settings.run_argv(input_path, request.display_name)
            _logger.debug("spawning analyzer: %s", argv)
            try:
                proc = subprocess.run(argv, capture_output=True, check=False)
            except OSError as e:
                raise SpawnError(f"Failed to start analyzer: {e}") from e

        if proc.returncode != 0:
            raise ProcessExitError(proc.returncode, _decode(proc.stderr))
        return parse(proc.stdout)
