from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..contracts import Venue
from ..settings import RelevanceWeights
from ..validators import coerce_bool, coerce_float
from .keywords import SEARCH_DICTIONARY, KeywordRule, lookup_rule
from .matching import read_field


@dataclass(slots=True)
class ScoredVenue:
    venue: Venue
    score: float
    matched_keywords: list[str] = field(default_factory=list)


def score_keywords(
    matched_keywords: Iterable[str], dictionary: Mapping[str, KeywordRule] = SEARCH_DICTIONARY
) -> float:
    total = 0.0
    for keyword in matched_keywords:
        rule = lookup_rule(keyword, dictionary)
        if rule is not None:
            total += rule.weight
    return total


def score_rating(venue: Venue | Mapping[str, Any], weights: RelevanceWeights) -> float:
    rating = coerce_float(read_field(venue, "rating")) or 0.0
    return max(0.0, rating) * weights.rating


def score_quality(venue: Venue | Mapping[str, Any], weights: RelevanceWeights) -> float:
    trending = coerce_bool(read_field(venue, "trending"))
    quality = coerce_float(read_field(venue, "viberyte_score"))
    if trending or (quality is not None and quality >= weights.quality_threshold):
        return weights.quality_bonus
    return 0.0


def score_tag_richness(venue: Venue | Mapping[str, Any], weights: RelevanceWeights) -> float:
    tags = read_field(venue, "vibe_tags")
    if not isinstance(tags, (list, tuple)):
        return 0.0
    return len(tags) * weights.tag


def score_venue(
    venue: Venue | Mapping[str, Any],
    matched_keywords: Iterable[str],
    weights: RelevanceWeights | None = None,
    dictionary: Mapping[str, KeywordRule] = SEARCH_DICTIONARY,
) -> float:
    weights = weights or RelevanceWeights()
    total = score_keywords(matched_keywords, dictionary)
    total += score_rating(venue, weights)
    total += score_quality(venue, weights)
    total += score_tag_richness(venue, weights)
    return total
