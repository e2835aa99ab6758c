"""Centralized exit-code contract for the CLI and the engine process.

Code  Meaning
----  -------
  0   Success
  1   Not ready: the analyzer artifact is not built (``status``)
  2   Error: usage error, missing file, analysis or build failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    NOT_READY = 1
    ERROR = 2
