from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class KeywordCategory(str, Enum):
    VIBE = "vibe"
    MUSIC = "music"
    CUISINE = "cuisine"
    EVENT = "event"
    CATEGORY = "category"


@dataclass(frozen=True, slots=True)
class KeywordRule:
    field: str
    value: str
    category: KeywordCategory
    weight: int


def _vibe(value: str, weight: int) -> KeywordRule:
    return KeywordRule("vibe_tags", value, KeywordCategory.VIBE, weight)


def _music(value: str) -> KeywordRule:
    return KeywordRule("music_genres", value, KeywordCategory.MUSIC, 10)


def _cuisine(field: str, value: str, weight: int = 10) -> KeywordRule:
    return KeywordRule(field, value, KeywordCategory.CUISINE, weight)


def _event(value: str) -> KeywordRule:
    return KeywordRule("genre", value, KeywordCategory.EVENT, 10)


def _category(value: str) -> KeywordRule:
    return KeywordRule("category", value, KeywordCategory.CATEGORY, 8)


# Insertion order is significant: keyword extraction and autocomplete both
# walk the table in this order.
_RULES: dict[str, KeywordRule] = {
    # Vibe tags
    "hookah": _vibe("hookah", 10),
    "rooftop": _vibe("rooftop", 10),
    "brunch": _vibe("brunch", 10),
    "upscale": _vibe("upscale", 8),
    "casual": _vibe("casual", 6),
    "romantic": _vibe("romantic", 9),
    "trendy": _vibe("trendy", 7),
    "speakeasy": _vibe("speakeasy", 10),
    "chill": _vibe("chill", 6),
    "cozy": _vibe("cozy", 7),
    "aesthetic": _vibe("aesthetic", 8),
    "late night": _vibe("late-night", 8),
    "happy hour": _vibe("happy-hour", 8),
    "bottle service": _vibe("bottle-service", 9),
    "quiet": _vibe("quiet", 7),
    "live music": _vibe("live-music", 9),
    "private room": _vibe("private-room", 9),
    "open late": _vibe("late-night", 7),
    "vip": _vibe("vip", 9),
    "birthday": _vibe("celebratory", 8),
    "anniversary": _vibe("romantic", 9),
    "cheap": _vibe("affordable", 6),
    "affordable": _vibe("affordable", 6),
    "fast service": _vibe("fast-casual", 6),
    "waterfront": _vibe("waterfront", 8),
    "outdoor": _vibe("outdoor", 7),
    "family style": _vibe("family-style", 7),
    "date night": _vibe("romantic", 9),
    "authentic": _vibe("authentic", 7),
    # Music genres
    "afrobeats": _music("Afrobeats"),
    "afrobeat": _music("Afrobeats"),
    "hip hop": _music("Hip-Hop"),
    "hip-hop": _music("Hip-Hop"),
    "reggaeton": _music("Reggaeton"),
    "r&b": _music("R&B"),
    "rnb": _music("R&B"),
    "edm": _music("EDM"),
    "house": _music("House"),
    "jazz": _music("Jazz"),
    "reggae": _music("Reggae"),
    "dancehall": _music("Dancehall"),
    "amapiano": _music("Amapiano"),
    "soul": _music("Soul"),
    "funk": _music("Funk"),
    # Cuisines; the catalog stores some under cuisine_primary and others under cuisine
    "italian": _cuisine("cuisine_primary", "italian"),
    "soul food": _cuisine("cuisine", "soul food"),
    "japanese": _cuisine("cuisine_primary", "japanese"),
    "sushi": _cuisine("cuisine", "sushi"),
    "caribbean": _cuisine("cuisine", "caribbean"),
    "mediterranean": _cuisine("cuisine_primary", "mediterranean"),
    "mexican": _cuisine("cuisine", "mexican"),
    "latin": _cuisine("cuisine", "latin"),
    "steakhouse": _cuisine("cuisine", "steakhouse"),
    "seafood": _cuisine("cuisine", "seafood"),
    "american": _cuisine("cuisine_primary", "american", weight=8),
    "chinese": _cuisine("cuisine", "chinese"),
    "thai": _cuisine("cuisine", "thai"),
    "indian": _cuisine("cuisine", "indian"),
    "greek": _cuisine("cuisine", "greek"),
    "french": _cuisine("cuisine", "french"),
    # Event types
    "day party": _event("day-party"),
    "brunch party": _event("brunch"),
    "rooftop party": _event("rooftop"),
    # Categories
    "dining": _category("dining"),
    "nightlife": _category("nightlife"),
    "restaurant": _category("dining"),
    "club": _category("nightlife"),
    "lounge": _category("nightlife"),
}

SEARCH_DICTIONARY: Mapping[str, KeywordRule] = MappingProxyType(_RULES)


def lookup_rule(
    keyword: str, dictionary: Mapping[str, KeywordRule] = SEARCH_DICTIONARY
) -> KeywordRule | None:
    if not isinstance(keyword, str):
        return None
    return dictionary.get(keyword)


def keywords_by_category(
    category: KeywordCategory | str, dictionary: Mapping[str, KeywordRule] = SEARCH_DICTIONARY
) -> list[str]:
    wanted = KeywordCategory(category)
    return [keyword for keyword, rule in dictionary.items() if rule.category is wanted]
