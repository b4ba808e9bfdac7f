import logging
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.pop("RELEVANCE_WEIGHTS", None)
os.environ.pop("DEFAULT_CITY", None)
os.environ.pop("SUGGESTION_LIMIT", None)

from backend.lumina.logging_config import configure_structlog  # noqa: E402

configure_structlog(level=logging.WARNING)


def _venue(**overrides):
    base = {
        "id": "v1",
        "name": "Demo",
        "city": "Manhattan",
        "neighborhood": "Lower East Side",
        "category": "nightlife",
        "rating": 4.0,
        "vibe_tags": ["rooftop"],
    }
    base.update(overrides)
    return base


@pytest.fixture
def make_venue():
    return _venue


@pytest.fixture
def catalog():
    venues = [
        _venue(
            id="skyline",
            name="Skyline",
            vibe_tags=["rooftop", "romantic", "upscale"],
            rating=4.5,
            trending=True,
        ),
        _venue(
            id="terrace",
            name="Terrace Club",
            vibe_tags=["rooftop", "late-night-bar"],
            music_genres=["Afrobeats", "Hip-Hop"],
            rating=4.8,
        ),
        _venue(
            id="nonna",
            name="Nonna's Table",
            category="dining",
            cuisine_primary="Italian",
            cuisine="Pasta",
            bio="Hand-rolled pasta and a cozy back room.",
            vibe_tags=["cozy", "romantic"],
            rating=4.2,
        ),
        _venue(
            id="bk-roof",
            name="Brooklyn Roof",
            city="Brooklyn",
            neighborhood="Williamsburg",
            vibe_tags=["rooftop", "romantic"],
            rating=5.0,
            trending=True,
        ),
    ]
    events = [
        {"id": "e1", "name": "Sunday Day Party", "venue_name": "Terrace Club", "genre": "Day-Party"},
        {"id": "e2", "name": "Jazz Brunch", "venue_name": "Nonna's Table", "music_genre": "brunch"},
        {"id": "e3", "name": "Afro Nights", "venue_name": "Skyline", "genre": "afrobeats"},
    ]
    return venues, events
