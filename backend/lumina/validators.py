"""Lenient sanitizers for catalog records coming from the API client.

Catalog rows are enriched by offline batch jobs and arrive with uneven shapes.
Every helper here maps a bad value to ``None`` instead of raising, so a single
malformed row never breaks a search.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

TRUE_STRINGS = {"true", "1", "yes", "y", "on"}
FALSE_STRINGS = {"false", "0", "no", "n", "off", ""}


def coerce_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def coerce_text_list(values: Iterable[Any]) -> list[str]:
    # None entries stay as "" so the tag count is unchanged
    return [coerce_text(item) or "" for item in values]


def coerce_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def coerce_bool(value: Any) -> bool | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    return None
