from __future__ import annotations

import json
import re
from typing import Any

_LEADING_FENCE = re.compile(r"^\s*```(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```\s*$")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ``` / ```json block marker and trim whitespace."""
    text = (text or "").strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_json_response(text: str) -> Any:
    """
    Parse model output as JSON after removing code fences.
    Malformed JSON raises ValueError; nothing is repaired.
    """
    return json.loads(strip_code_fences(text))
