"""Location and intent hints pulled out of a raw search box query."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Literal

from .contracts import Event, SearchResult, Venue
from .search.engine import smart_search

QueryTab = Literal["events", "dining", "nightlife"]

# Only cities the catalog covers; order decides which city wins on overlap.
CITY_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    (
        "Manhattan",
        re.compile(r"\b(manhattan|midtown|downtown|uptown|east village|west village|soho|tribeca)\b"),
    ),
    (
        "Brooklyn",
        re.compile(r"\b(brooklyn|williamsburg|bushwick|park slope|dumbo|bed-stuy)\b"),
    ),
    ("Queens", re.compile(r"\b(queens|astoria|long island city|lic|flushing)\b")),
    ("Philadelphia", re.compile(r"\b(philly|philadelphia)\b")),
    ("Washington DC", re.compile(r"\b(dc|washington)\b")),
    ("Newark", re.compile(r"\b(newark|jersey city|hoboken)\b")),
]

CITY_STRIP_PATTERNS = [
    re.compile(r"\b(in |at )?manhattan\b", re.IGNORECASE),
    re.compile(r"\b(in |at )?brooklyn\b", re.IGNORECASE),
    re.compile(r"\b(in |at )?queens\b", re.IGNORECASE),
    re.compile(r"\b(in |at )?philly\b", re.IGNORECASE),
    re.compile(r"\b(in |at )?philadelphia\b", re.IGNORECASE),
    re.compile(r"\b(in |at )?(dc|washington)\b", re.IGNORECASE),
    re.compile(r"\b(in |at )?(newark|jersey city|hoboken)\b", re.IGNORECASE),
]

EVENT_TERMS = re.compile(r"(concert|festival|tour|show|performance)")
DINING_TERMS = re.compile(
    r"(sushi|dinner|lunch|restaurant|food|cuisine|brunch|late.?night.?eats|diner)"
)
NIGHTLIFE_TERMS = re.compile(
    r"(afrobeat|hip-hop|dj|club|party|lounge|rooftop|bar|nightlife|dance)"
)


def extract_city_from_query(query: str) -> str | None:
    lowered = (query or "").lower()
    for city, pattern in CITY_PATTERNS:
        if pattern.search(lowered):
            return city
    return None


def strip_city_from_query(query: str) -> str:
    cleaned = query or ""
    for pattern in CITY_STRIP_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return re.sub(r"\s+", " ", cleaned.strip())


def classify_query(query: str) -> QueryTab | None:
    """Pick the explore tab a query most likely belongs to."""
    lowered = (query or "").lower()
    if EVENT_TERMS.search(lowered):
        return "events"
    if DINING_TERMS.search(lowered):
        return "dining"
    if NIGHTLIFE_TERMS.search(lowered):
        return "nightlife"
    return None


def search_with_location(
    query: str,
    venues: Sequence[Venue | Mapping[str, Any]] | None,
    events: Sequence[Event | Mapping[str, Any]] | None,
    selected_city: str | None = None,
) -> SearchResult:
    """Run smart search, letting a city named in the query override the selection."""
    detected = extract_city_from_query(query)
    cleaned = strip_city_from_query(query)
    return smart_search(cleaned, venues, events, detected or selected_city)
