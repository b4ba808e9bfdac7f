"""Smart search: keyword AND matching with relevance ranking and a fuzzy fallback."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..contracts import Event, SearchResult, Venue, load_events, load_venues
from ..logging_config import get_logger
from ..settings import RelevanceWeights, settings
from .keywords import SEARCH_DICTIONARY, KeywordCategory, KeywordRule
from .matching import contains_text, satisfied_keywords
from .scoring import ScoredVenue, score_venue

logger = get_logger(__name__)

FUZZY_VENUE_FIELDS = ("name", "cuisine", "cuisine_primary", "bio", "neighborhood")
FUZZY_EVENT_FIELDS = ("name", "venue_name")


def normalize_query(query: Any) -> str:
    if not isinstance(query, str):
        return ""
    return query.strip().lower()


def filter_by_city(venues: Iterable[Venue], city: str | None) -> list[Venue]:
    needle = (city or "").lower()
    return [
        venue
        for venue in venues
        if needle in (venue.city or "").lower() or needle in (venue.neighborhood or "").lower()
    ]


class SmartSearchEngine:
    """Stateless search over already-fetched venues and events.

    The keyword table and weights are held by reference and never written, so one
    engine can serve concurrent callers.
    """

    def __init__(
        self,
        dictionary: Mapping[str, KeywordRule] = SEARCH_DICTIONARY,
        weights: RelevanceWeights | None = None,
        default_city: str | None = None,
        suggestion_limit: int | None = None,
    ) -> None:
        self.dictionary = dictionary
        self.weights = weights or settings.parsed_relevance_weights
        self.default_city = default_city or settings.DEFAULT_CITY
        self.suggestion_limit = (
            settings.SUGGESTION_LIMIT if suggestion_limit is None else suggestion_limit
        )

    @classmethod
    def default(cls) -> SmartSearchEngine:
        return cls()

    def extract_keywords(self, query: str) -> list[str]:
        normalized = normalize_query(query)
        if not normalized:
            return []
        return [keyword for keyword in self.dictionary if keyword in normalized]

    def search(
        self,
        query: str,
        venues: Sequence[Venue | Mapping[str, Any]] | None,
        events: Sequence[Event | Mapping[str, Any]] | None,
        selected_city: str | None = None,
    ) -> SearchResult:
        normalized = normalize_query(query)
        if not normalized:
            return SearchResult()

        city = selected_city if selected_city is not None else self.default_city
        local_venues = filter_by_city(load_venues(venues), city)
        all_events = load_events(events)

        matched = self.extract_keywords(normalized)
        if matched:
            result = self._keyword_search(matched, local_venues, all_events)
        else:
            result = self._fuzzy_search(normalized, local_venues, all_events)

        logger.debug(
            "smart_search",
            query=normalized,
            city=city,
            branch="fuzzy" if result.is_fuzzy else "keywords",
            matched_keywords=result.matched_keywords,
            venues=len(result.venues),
            events=len(result.events),
        )
        return result

    def _keyword_search(
        self, matched: list[str], venues: list[Venue], events: list[Event]
    ) -> SearchResult:
        scored: list[ScoredVenue] = []
        for venue in venues:
            venue_keywords = satisfied_keywords(venue, matched, self.dictionary)
            if len(venue_keywords) != len(matched):
                continue
            scored.append(
                ScoredVenue(
                    venue=venue,
                    score=score_venue(venue, venue_keywords, self.weights, self.dictionary),
                    matched_keywords=venue_keywords,
                )
            )
        # list.sort is stable, ties keep catalog order
        scored.sort(key=lambda item: item.score, reverse=True)

        event_rules = [
            self.dictionary[keyword]
            for keyword in matched
            if self.dictionary[keyword].category is KeywordCategory.EVENT
        ]
        kept_events = [
            event
            for event in events
            if all(rule.value.lower() in event.genre_text for rule in event_rules)
        ]
        return SearchResult(
            venues=[item.venue for item in scored],
            events=kept_events,
            matched_keywords=matched,
        )

    def _fuzzy_search(self, query: str, venues: list[Venue], events: list[Event]) -> SearchResult:
        kept_venues = [
            venue
            for venue in venues
            if any(_fuzzy_hit(venue.value_of(name), query) for name in FUZZY_VENUE_FIELDS)
        ]
        kept_venues.sort(key=lambda venue: venue.rating or 0.0, reverse=True)
        kept_events = [
            event
            for event in events
            if any(contains_text(event.value_of(name), query) for name in FUZZY_EVENT_FIELDS)
        ]
        return SearchResult(venues=kept_venues, events=kept_events, is_fuzzy=True)

    def suggest(self, partial: str, limit: int | None = None) -> list[str]:
        normalized = normalize_query(partial)
        cap = self.suggestion_limit if limit is None else limit
        suggestions: list[str] = []
        for keyword in self.dictionary:
            if len(suggestions) >= cap:
                break
            if keyword.startswith(normalized):
                suggestions.append(keyword)
        return suggestions


def _fuzzy_hit(value: Any, query: str) -> bool:
    # cuisine can arrive as a list from older catalog rows
    if isinstance(value, list):
        return any(contains_text(item, query) for item in value)
    return contains_text(value, query)


_DEFAULT_ENGINE: SmartSearchEngine | None = None


def get_engine() -> SmartSearchEngine:
    global _DEFAULT_ENGINE
    if _DEFAULT_ENGINE is None:
        _DEFAULT_ENGINE = SmartSearchEngine.default()
    return _DEFAULT_ENGINE


def smart_search(
    query: str,
    venues: Sequence[Venue | Mapping[str, Any]] | None,
    events: Sequence[Event | Mapping[str, Any]] | None,
    selected_city: str | None = None,
) -> SearchResult:
    return get_engine().search(query, venues, events, selected_city)


def get_suggested_keywords(query: str, limit: int | None = None) -> list[str]:
    return get_engine().suggest(query, limit)
