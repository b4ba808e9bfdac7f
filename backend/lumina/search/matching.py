from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..contracts import CatalogRecord
from .keywords import SEARCH_DICTIONARY, KeywordRule, lookup_rule


def contains_text(value: Any, needle: str) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return needle.lower() in value.lower()


def any_contains(values: Iterable[Any], needle: str) -> bool:
    lowered = needle.lower()
    for item in values:
        text = item if isinstance(item, str) else ""
        if lowered in text.lower():
            return True
    return False


def field_matches(value: Any, needle: str) -> bool:
    if isinstance(value, (list, tuple)):
        return any_contains(value, needle)
    return contains_text(value, needle)


def read_field(record: CatalogRecord | Mapping[str, Any], name: str) -> Any:
    if isinstance(record, CatalogRecord):
        return record.value_of(name)
    if isinstance(record, Mapping):
        return record.get(name)
    return None


def matches(
    record: CatalogRecord | Mapping[str, Any],
    keyword: str,
    dictionary: Mapping[str, KeywordRule] = SEARCH_DICTIONARY,
) -> bool:
    """True when the record's field for ``keyword`` contains the rule's value."""
    rule = lookup_rule(keyword, dictionary)
    if rule is None:
        return False
    return field_matches(read_field(record, rule.field), rule.value)


def satisfied_keywords(
    record: CatalogRecord | Mapping[str, Any],
    keywords: Iterable[str],
    dictionary: Mapping[str, KeywordRule] = SEARCH_DICTIONARY,
) -> list[str]:
    return [keyword for keyword in keywords if matches(record, keyword, dictionary)]
