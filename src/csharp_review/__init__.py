"""csharp_review — heuristic static analysis for C# source code."""

__all__ = [
    "__version__",
    "analyze_code",
    "analyze_file",
    "build_analyzer",
    "check_availability",
]
__version__ = "0.1.0"

# Programmatic entrypoints (backend use).
from csharp_review.api import (  # noqa: E402, F401
    analyze_code,
    analyze_file,
    build_analyzer,
    check_availability,
)
