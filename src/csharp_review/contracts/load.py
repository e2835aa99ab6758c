"""Load and validate JSON instances against the bundled schemas.

Usage::

    from csharp_review.contracts.load import validate_instance

    validate_instance(my_dict, "analysis_result.schema.json")
"""

from __future__ import annotations

import functools
import json
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"


def _schema_text(name: str) -> str:
    """Read a bundled schema.

    Priority:
    1. ``data/schemas/`` next to the package sources
    2. package data via importlib.resources (wheel / zipapp installs)
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical.read_text(encoding="utf-8")
    return (resources.files("csharp_review") / SCHEMA_DIR / name).read_text(encoding="utf-8")


@functools.lru_cache(maxsize=None)
def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    return json.loads(_schema_text(name))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    jsonschema.validate(instance=instance, schema=load_schema(schema_name))

