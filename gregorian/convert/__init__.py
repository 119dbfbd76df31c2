"""Conversion utilities for Dates.

Functions:
    serialize_text: Date -> ISO 8601 bytes.
    deserialize_text: ISO 8601 bytes or str -> Date.
    to_json: Date -> tagged JSON dict.
    from_json: Tagged JSON dict -> Date.

Both read paths accept ISO 8601 only.
"""

from __future__ import annotations

from gregorian.convert.json import from_json, to_json
from gregorian.convert.text import deserialize_text, serialize_text

__all__: list[str] = [
    "serialize_text",
    "deserialize_text",
    "to_json",
    "from_json",
]
