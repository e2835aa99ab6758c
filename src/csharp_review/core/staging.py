"""Ephemeral staging of inline source text for the analyzer process."""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from csharp_review.model.request import AnalysisRequest

_logger = logging.getLogger(__name__)


@contextmanager
def staged_input(request: AnalysisRequest, staging_dir: Path) -> Iterator[Path]:
    """Yield the path the analyzer should read for *request*.

    A file-path request yields that path untouched. Inline text is written
    to a uniquely named ``temp_*.cs`` file which is removed on exit, whether
    the body returns or raises.
    """
    if not request.is_ephemeral:
        yield Path(request.file_path)
        return

    staging_dir = Path(staging_dir)
    staging_dir.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(prefix="temp_", suffix=".cs", dir=staging_dir)
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(request.source_text)
        _logger.debug("staged %d chars at %s", len(request.source_text), path)
        yield path
    finally:
        path.unlink(missing_ok=True)
