"""Canonical JSON rendering of parsed templates and check reports.

Used by the CLI so the same template always renders to the same bytes:
sorted keys, compact separators, UTF-8 (no ASCII escaping).
"""

import json
from typing import Any

from pydantic import BaseModel


def canonical_dumps(obj: Any) -> str:
    """Serialize obj (a pydantic model or JSON-ready data) canonically."""
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(mode="json")
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
