"""Keyword search and ranking over venue and event catalogs."""

from .engine import SmartSearchEngine, get_suggested_keywords, smart_search
from .keywords import SEARCH_DICTIONARY, KeywordCategory, KeywordRule
from .matching import matches
from .scoring import ScoredVenue, score_venue

__all__ = [
    "SEARCH_DICTIONARY",
    "KeywordCategory",
    "KeywordRule",
    "ScoredVenue",
    "SmartSearchEngine",
    "get_suggested_keywords",
    "matches",
    "score_venue",
    "smart_search",
]
