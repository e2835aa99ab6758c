"""Shared fixtures: C# parsing helpers and fake analyzer artifacts."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from csharp_review.core.config import AnalyzerSettings
from csharp_review.syntax.node import SyntaxNode
from csharp_review.syntax.provider import default_provider


def dedent_cs(source: str) -> str:
    return textwrap.dedent(source).strip("\n") + "\n"


@pytest.fixture
def parse():
    """Parse dedented C# source and return the tree."""

    def _parse(source: str) -> SyntaxNode:
        tree, _ = default_provider().parse(dedent_cs(source))
        return tree

    return _parse


# ── fake analyzer artifacts ─────────────────────────────────────────

# Echoes the argv it was given back as suggestions.
ECHO_ANALYZER = """
import json, sys
path = sys.argv[-1]
with open(path, encoding="utf-8") as fh:
    text = fh.read()
print(json.dumps({
    "diagnostics": [],
    "metrics": {"classes": text.count("class "), "methods": 0, "lines": 1, "complexity": 1},
    "suggestions": sys.argv[1:],
}))
"""

FAILING_ANALYZER = """
import sys
sys.stderr.write("analyzer exploded")
sys.exit(3)
"""

GARBAGE_ANALYZER = """
print("this is not json")
"""

SCHEMA_VIOLATING_ANALYZER = """
import json
print(json.dumps({"diagnostics": [], "suggestions": []}))
"""


@pytest.fixture
def make_analyzer(tmp_path: Path):
    """Write a fake analyzer script and return settings that run it."""

    def _make(script: str, **overrides) -> AnalyzerSettings:
        artifact = tmp_path / "fake_analyzer.py"
        artifact.write_text(textwrap.dedent(script), encoding="utf-8")
        staging = tmp_path / "staging"
        staging.mkdir(exist_ok=True)
        params = dict(
            project_dir=tmp_path,
            artifact=artifact.name,
            staging_dir=staging,
        )
        params.update(overrides)
        return AnalyzerSettings(**params)

    return _make


@pytest.fixture
def unbuilt_settings(tmp_path: Path) -> AnalyzerSettings:
    return AnalyzerSettings(project_dir=tmp_path / "analyzer", staging_dir=tmp_path / "staging")
