from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .logging_config import get_logger
from .validators import coerce_bool, coerce_float, coerce_text, coerce_text_list

logger = get_logger(__name__)


class CatalogRecord(BaseModel):
    """Base for catalog rows; unknown keys are kept as extras."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value):  # type: ignore[override]
        if isinstance(value, (dict, list, tuple)):
            return None
        return coerce_text(value)

    def value_of(self, name: str) -> Any:
        """Read a declared or extra field; unknown names read as ``None``."""
        if name in type(self).model_fields:
            return getattr(self, name)
        return (self.model_extra or {}).get(name)


# --- Venues & events (fetched by the API client, consumed read-only here) ---
class Venue(CatalogRecord):
    city: str | None = None
    neighborhood: str | None = None
    category: str | None = None
    cuisine: str | list[str] | None = None
    cuisine_primary: str | None = None
    bio: str | None = None
    rating: float | None = None
    trending: bool | None = None
    viberyte_score: float | None = None
    vibe_tags: list[str] | str | None = None
    music_genres: list[str] | str | None = None

    @field_validator(
        "name", "city", "neighborhood", "category", "cuisine_primary", "bio", mode="before"
    )
    @classmethod
    def _text(cls, value):  # type: ignore[override]
        return coerce_text(value)

    @field_validator("cuisine", "vibe_tags", "music_genres", mode="before")
    @classmethod
    def _text_or_list(cls, value):  # type: ignore[override]
        if isinstance(value, (list, tuple)):
            return coerce_text_list(value)
        return coerce_text(value)

    @field_validator("rating", "viberyte_score", mode="before")
    @classmethod
    def _number(cls, value):  # type: ignore[override]
        return coerce_float(value)

    @field_validator("trending", mode="before")
    @classmethod
    def _flag(cls, value):  # type: ignore[override]
        return coerce_bool(value)


class Event(CatalogRecord):
    venue_name: str | None = None
    genre: str | None = None
    music_genre: str | None = None

    @field_validator("name", "venue_name", "genre", "music_genre", mode="before")
    @classmethod
    def _text(cls, value):  # type: ignore[override]
        return coerce_text(value)

    @property
    def genre_text(self) -> str:
        return (self.genre or self.music_genre or "").lower()


# --- Search output ---
class SearchResult(BaseModel):
    venues: list[Venue] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)
    matched_keywords: list[str] = Field(default_factory=list)
    is_fuzzy: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.venues and not self.events


def load_venues(records: Iterable[Venue | Mapping[str, Any]] | None) -> list[Venue]:
    return _load(records, Venue)


def load_events(records: Iterable[Event | Mapping[str, Any]] | None) -> list[Event]:
    return _load(records, Event)


def _load(records, model):
    loaded = []
    for index, record in enumerate(records or []):
        if isinstance(record, model):
            loaded.append(record)
            continue
        if isinstance(record, Mapping):
            try:
                loaded.append(model.model_validate(dict(record)))
                continue
            except ValidationError as exc:
                reason = exc.errors()[0]["type"] if exc.errors() else "invalid"
        else:
            reason = "not_a_mapping"
        logger.warning(
            "catalog_record_skipped",
            kind=model.__name__.lower(),
            index=index,
            type=type(record).__name__,
            reason=reason,
        )
    return loaded
