"""Structural copying and opportunistic value typing for item data.

JSON values form a closed set of kinds (object, array, string, number,
boolean, null), so copying is spelled out per kind instead of relying on
a generic fallback.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Final

from dateutil import parser as dt_parser

TIMESTAMP_SUFFIX: Final[str] = "_at"

ISO_8601_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})$"
)


def deep_copy(value: Any) -> Any:
    """Return a structural copy of a JSON-like *value*.

    Mapping keys are normalized to ``str`` at every depth; tuples become
    lists.  Scalars are immutable and returned as is.
    """
    if isinstance(value, dict):
        return {str(key): deep_copy(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [deep_copy(item) for item in value]
    return value


def looks_like_timestamp(name: str, value: str) -> bool:
    """Whether *value* under accessor *name* should be read as a timestamp."""
    return name.endswith(TIMESTAMP_SUFFIX) or ISO_8601_PATTERN.match(value) is not None


def cast_value(name: str, value: Any) -> Any:
    """Cast *value* to :class:`datetime` when it looks like a timestamp.

    Never raises: strings that fail to parse are returned unchanged, and
    non-string values are never touched.
    """
    if not isinstance(value, str) or not looks_like_timestamp(name, value):
        return value
    return parse_timestamp(value)


def parse_timestamp(value: str) -> datetime | str:
    """Parse an ISO-8601 string, falling back to *value* on failure."""
    try:
        return dt_parser.isoparse(value)
    except (ValueError, OverflowError):
        return value
