"""Detector policy constants — single source of truth.

Every detector derives its numeric cut-offs from this module instead of
hard-coding thresholds locally. The values are fixed policy; there is no
configuration surface for them.
"""

from __future__ import annotations

# Basic / style
LONG_METHOD_LINES = 50        # method text longer than this many lines
LARGE_CLASS_MEMBERS = 20      # class with more members than this
HIGH_COMPLEXITY = 10          # per-method cyclomatic complexity above this

# Performance
TOLIST_LOOKAHEAD = 3          # invocations inspected after a .ToList()
LINQ_CHAIN_LIMIT = 3          # chained query operators tolerated per invocation

# Query optimization
COMPLEX_QUERY_CHARS = 100     # query expression text length considered complex
