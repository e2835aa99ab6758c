"""Analyzer settings — where the artifact lives and how to build and run it."""

from __future__ import annotations

import os
import shlex
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_ARTIFACT = "csharp-review-engine.pyz"
DEFAULT_BUILD_COMMAND = "{python} -m csharp_review.engine.bundle --output {artifact}"
DEFAULT_RUN_COMMAND = "{python} {artifact}"


def _default_project_dir() -> Path:
    return Path.home() / ".cache" / "csharp_review" / "analyzer"


@dataclass(frozen=True)
class AnalyzerSettings:
    """Immutable orchestrator configuration.

    ``build_command`` and ``run_command`` are shell-style templates; the
    ``{python}`` and ``{artifact}`` placeholders are substituted after
    splitting, so paths with spaces survive. The run command gets the
    input path appended as its last argument, preceded by
    ``--display-name NAME`` when the request names one.
    """

    project_dir: Path = _default_project_dir()
    artifact: str = DEFAULT_ARTIFACT
    build_command: str = DEFAULT_BUILD_COMMAND
    run_command: str = DEFAULT_RUN_COMMAND
    staging_dir: Optional[Path] = None   # None = project_dir

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AnalyzerSettings":
        """Build settings from ``CSHARP_REVIEW_*`` environment variables."""
        env = os.environ if environ is None else environ
        kwargs: dict = {}
        if env.get("CSHARP_REVIEW_HOME"):
            kwargs["project_dir"] = Path(env["CSHARP_REVIEW_HOME"]).expanduser()
        if env.get("CSHARP_REVIEW_ARTIFACT"):
            kwargs["artifact"] = env["CSHARP_REVIEW_ARTIFACT"]
        if env.get("CSHARP_REVIEW_BUILD_COMMAND"):
            kwargs["build_command"] = env["CSHARP_REVIEW_BUILD_COMMAND"]
        if env.get("CSHARP_REVIEW_RUN_COMMAND"):
            kwargs["run_command"] = env["CSHARP_REVIEW_RUN_COMMAND"]
        if env.get("CSHARP_REVIEW_STAGING_DIR"):
            kwargs["staging_dir"] = Path(env["CSHARP_REVIEW_STAGING_DIR"]).expanduser()
        return cls(**kwargs)

    @property
    def artifact_path(self) -> Path:
        path = Path(self.artifact)
        return path if path.is_absolute() else Path(self.project_dir) / path

    @property
    def staging_directory(self) -> Path:
        return Path(self.staging_dir) if self.staging_dir is not None else Path(self.project_dir)

    def _expand(self, template: str) -> list[str]:
        subs = {"python": sys.executable, "artifact": str(self.artifact_path)}
        return [part.format(**subs) for part in shlex.split(template)]

    def build_argv(self) -> list[str]:
        return self._expand(self.build_command)

    def run_argv(self, input_path: Path | str, display_name: Optional[str] = None) -> list[str]:
        argv = self._expand(self.run_command)
        if display_name:
            argv += ["--display-name", display_name]
        return argv + [str(input_path)]
