"""Parsing of JSON payloads received from the compositor."""

from __future__ import annotations

import json
from typing import Any


def parse_json(data: str | bytes) -> Any:
    """Parse a JSON document; an empty document yields an empty object.

    Raises ValueError when the document is not valid JSON.
    """
    if not data:
        return {}
    return json.loads(data)