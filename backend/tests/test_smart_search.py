from backend.lumina.contracts import Event, SearchResult, Venue
from backend.lumina.query_parser import search_with_location
from backend.lumina.search import SmartSearchEngine, smart_search
from backend.lumina.search import engine as engine_module
from backend.lumina.search.keywords import KeywordCategory, KeywordRule
from backend.lumina.settings import RelevanceWeights


def _names(items):
    return [item.name for item in items]


def test_empty_query_returns_empty_result(catalog):
    venues, events = catalog
    for query in ("", "   ", None):
        result = smart_search(query, venues, events, "Manhattan")  # type: ignore[arg-type]
        assert result == SearchResult()
        assert result.is_empty


def test_rooftop_romantic_requires_both_keywords(catalog):
    venues, events = catalog
    result = smart_search("rooftop romantic", venues, events, "Manhattan")
    assert _names(result.venues) == ["Skyline"]
    assert set(result.matched_keywords) == {"rooftop", "romantic"}
    assert not result.is_fuzzy


def test_venue_missing_one_keyword_is_excluded(make_venue):
    venue = make_venue(name="Half", vibe_tags=["rooftop", "upscale"])
    result = smart_search("rooftop romantic", [venue], [], "Manhattan")
    assert result.venues == []
    assert result.matched_keywords == ["rooftop", "romantic"]


def test_city_filter_runs_before_matching(catalog):
    venues, events = catalog
    manhattan = smart_search("rooftop romantic", venues, events, "Manhattan")
    brooklyn = smart_search("rooftop romantic", venues, events, "brooklyn")
    assert "Brooklyn Roof" not in _names(manhattan.venues)
    assert _names(brooklyn.venues) == ["Brooklyn Roof"]


def test_city_filter_accepts_neighborhood(make_venue):
    venue = make_venue(city="New York", neighborhood="Williamsburg")
    result = smart_search("rooftop", [venue], [], "williamsburg")
    assert len(result.venues) == 1


def test_keyword_results_are_sorted_by_score(catalog):
    venues, events = catalog
    result = smart_search("rooftop", venues, events, "Manhattan")
    # Skyline: 10 + 9 + 5 + 1.5; Terrace Club: 10 + 9.6 + 1.0
    assert _names(result.venues) == ["Skyline", "Terrace Club"]


def test_ties_keep_catalog_order(make_venue):
    first = make_venue(id="a", name="A")
    second = make_venue(id="b", name="B")
    result = smart_search("rooftop", [first, second], [], "Manhattan")
    assert _names(result.venues) == ["A", "B"]


def test_events_only_filtered_by_event_keywords(catalog):
    venues, events = catalog
    vibe_only = smart_search("rooftop", venues, events, "Manhattan")
    assert len(vibe_only.events) == len(events)

    day_party = smart_search("day party", venues, events, "Manhattan")
    assert _names(day_party.events) == ["Sunday Day Party"]
    assert day_party.venues == []


def test_event_genre_falls_back_to_music_genre(catalog):
    venues, events = catalog
    result = smart_search("brunch party", venues, events, "Manhattan")
    assert "Jazz Brunch" in _names(result.events)


def test_events_are_not_city_filtered(catalog):
    venues, events = catalog
    result = smart_search("day party", venues, events, "Philadelphia")
    assert _names(result.events) == ["Sunday Day Party"]


def test_overlapping_keys_all_match(catalog):
    venues, events = catalog
    result = smart_search("afrobeats night", venues, events, "Manhattan")
    assert result.matched_keywords == ["afrobeats", "afrobeat"]
    assert _names(result.venues) == ["Terrace Club"]


def test_fuzzy_fallback_searches_text_fields(catalog):
    venues, events = catalog
    result = smart_search("pasta", venues, events, "Manhattan")
    assert result.is_fuzzy
    assert result.matched_keywords == []
    assert _names(result.venues) == ["Nonna's Table"]


def test_fuzzy_fallback_orders_by_rating_and_matches_events(catalog):
    venues, events = catalog
    result = smart_search("lower east", venues, events, "Manhattan")
    assert _names(result.venues) == ["Terrace Club", "Skyline", "Nonna's Table"]
    assert result.events == []

    by_venue = smart_search("  TERRACE  ", venues, events, "Manhattan")
    assert _names(by_venue.events) == ["Sunday Day Party"]


def test_fuzzy_fallback_respects_city_filter(catalog):
    venues, events = catalog
    result = smart_search("brooklyn roof", venues, events, "Manhattan")
    assert result.venues == []


def test_malformed_records_do_not_raise():
    venues = [
        {"name": "No City"},
        {"name": "Odd", "city": "Manhattan", "vibe_tags": "rooftop", "rating": "n/a"},
        {"name": "Broken", "city": "Manhattan", "vibe_tags": [None, 5], "trending": {}},
        "not-a-record",
    ]
    events = [{"name": None}, 42]
    result = smart_search("rooftop", venues, events, "Manhattan")
    assert _names(result.venues) == ["Odd"]
    assert len(result.events) == 1


def test_results_are_schema_objects(catalog):
    venues, events = catalog
    result = smart_search("rooftop", venues, events, "Manhattan")
    assert all(isinstance(venue, Venue) for venue in result.venues)
    assert all(isinstance(event, Event) for event in result.events)
    assert result.venues[0].id == "skyline"


def test_engine_uses_injected_dictionary_and_weights(make_venue):
    table = {
        "tiki": KeywordRule("vibe_tags", "tiki", KeywordCategory.VIBE, 7),
        "pool": KeywordRule("vibe_tags", "pool", KeywordCategory.VIBE, 6),
    }
    engine = SmartSearchEngine(table, weights=RelevanceWeights(rating=0, tag=0, quality_bonus=0))
    low = make_venue(name="Low", vibe_tags=["tiki"], rating=5)
    high = make_venue(name="High", vibe_tags=["tiki", "pool"], rating=1)
    result = engine.search("tiki pool rooftop", [low, high], [], "Manhattan")
    assert result.matched_keywords == ["tiki", "pool"]
    assert _names(result.venues) == ["High"]


def test_engine_default_city_applies_when_none_given(make_venue):
    engine = SmartSearchEngine(default_city="Queens")
    queens = make_venue(name="Astoria Roof", city="Queens")
    manhattan = make_venue(name="Midtown Roof")
    result = engine.search("rooftop", [queens, manhattan], [])
    assert _names(result.venues) == ["Astoria Roof"]


def test_extract_keywords_walks_dictionary_order():
    engine = SmartSearchEngine()
    assert engine.extract_keywords("Romantic ROOFTOP") == ["rooftop", "romantic"]
    assert engine.extract_keywords("   ") == []


def test_fuzzy_fallback_matches_primary_cuisine_alone(make_venue):
    venue = make_venue(
        name="Casa Blu",
        neighborhood="Nolita",
        cuisine_primary="Peruvian",
        cuisine=None,
        bio=None,
        vibe_tags=[],
    )
    other = make_venue(name="Other", neighborhood="Nolita")
    result = smart_search("peruvian", [venue, other], [], "Manhattan")
    assert result.is_fuzzy
    assert _names(result.venues) == ["Casa Blu"]


def test_rejected_records_are_skipped(make_venue):
    bad_key = {"city": "Manhattan", "vibe_tags": ["rooftop"], 1: "x"}
    good = make_venue(name="Good")
    result = smart_search("rooftop", [bad_key, good], [{2: "y"}], "Manhattan")
    assert _names(result.venues) == ["Good"]
    assert result.events == []


def test_city_defaults_to_configured_city(monkeypatch, make_venue):
    monkeypatch.setattr(engine_module.settings, "DEFAULT_CITY", "Brooklyn")
    monkeypatch.setattr(engine_module, "_DEFAULT_ENGINE", None)
    venues = [
        make_venue(name="Manhattan Roof"),
        make_venue(name="Brooklyn Roof", city="Brooklyn", neighborhood="Dumbo"),
    ]
    assert _names(smart_search("rooftop", venues, []).venues) == ["Brooklyn Roof"]
    assert _names(search_with_location("rooftop", venues, []).venues) == ["Brooklyn Roof"]
