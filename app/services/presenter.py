"""Result presentation helpers.

The pretty-printed JSON is what the user copies out of the tool, so the
layout is kept stable: four-space indent, keys in insertion order (base
currency first, then requested currencies as typed). Whole-number prices are
written without a trailing ``.0`` (``99`` rather than ``99.0``).
"""

from __future__ import annotations

import json
from typing import Any, Mapping

COPY_CONFIRMATION = "Copied to clipboard!"


def _compact_number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {key: _compact_number(item) for key, item in value.items()}
    return value


def render_result(result: Mapping[str, Any], indent: int = 4) -> str:
    return json.dumps(_compact_number(result), indent=indent, ensure_ascii=False)


def clipboard_payload(result: Mapping[str, Any]) -> dict:
    return {"text": render_result(result), "message": COPY_CONFIRMATION}
