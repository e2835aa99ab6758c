"""Exception taxonomy for the analyzer orchestrator.

Every error is recoverable at the call boundary: front ends catch
``CSharpReviewError`` and render ``remediation_hint()`` next to the message.
"""

from __future__ import annotations


class CSharpReviewError(Exception):
    """Base exception for all csharp-review errors."""


class ValidationError(CSharpReviewError):
    """Raised when a request carries neither or both of source text and file path,
    or names a file that does not exist.
    """


class NotBuiltError(CSharpReviewError):
    """Raised when analysis is requested before the analyzer artifact exists."""

    def __init__(self, message: str = "Analyzer not built. Run the build step first.") -> None:
        super().__init__(message)


class SpawnError(CSharpReviewError):
    """Raised when the analyzer process could not be started at all."""


class ProcessExitError(CSharpReviewError):
    """Raised when the analyzer process ran and exited non-zero."""

    def __init__(self, code: int, stderr: str = "") -> None:
        super().__init__(f"Analysis failed (exit code {code}):\n{stderr}".rstrip())
        self.code = code
        self.stderr = stderr


class ResultParseError(CSharpReviewError):
    """Raised when analyzer output does not satisfy the result contract."""

    def __init__(self, message: str, raw_output: str = "") -> None:
        super().__init__(f"Failed to parse analysis result: {message}")
        self.raw_output = raw_output


_HINTS: dict[type, str] = {
    ValidationError: "Provide exactly one of source text or the path of an existing file.",
    NotBuiltError: "Run the build step (`csharp-review build`) and retry.",
    SpawnError: "Check that the configured interpreter or analyzer binary exists and is executable.",
    ProcessExitError: "Inspect the analyzer's standard error output above.",
    ResultParseError: "The analyzer artifact may be stale; rebuild it and retry.",
}


def remediation_hint(exc: BaseException) -> str:
    """Return a one-line remediation hint for *exc* (empty when unknown)."""
    for cls in type(exc).__mro__:
        if cls in _HINTS:
            return _HINTS[cls]
    return ""
