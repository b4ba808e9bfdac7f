from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

REPO_ROOT = Path(__file__).resolve().parents[2]
ENV_FILE = REPO_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE), env_file_encoding="utf-8", extra="ignore"
    )

    # human-readable console logs instead of JSON
    DEBUG: bool = False
    LOG_JSON: bool = False
    ENVIRONMENT: str = "development"

    # Search defaults
    DEFAULT_CITY: str = "Manhattan"
    SUGGESTION_LIMIT: int = 5
    RELEVANCE_WEIGHTS: str = "rating=2.0,quality_bonus=5.0,tag=0.5,quality_threshold=8.0"

    @property
    def parsed_relevance_weights(self) -> RelevanceWeights:
        return RelevanceWeights.from_string(self.RELEVANCE_WEIGHTS)


@dataclass(slots=True, frozen=True)
class RelevanceWeights:
    rating: float = 2.0
    quality_bonus: float = 5.0
    tag: float = 0.5
    quality_threshold: float = 8.0

    @classmethod
    def from_string(cls, payload: str | None) -> RelevanceWeights:
        base = cls()
        if not payload:
            return base
        mapping: dict[str, float] = {}
        for part in payload.split(","):
            if "=" not in part:
                continue
            key, value = part.split("=", 1)
            key = key.strip().lower()
            try:
                mapping[key] = float(value.strip())
            except ValueError:
                continue
        return cls(
            rating=mapping.get("rating", base.rating),
            quality_bonus=mapping.get("quality_bonus", base.quality_bonus),
            tag=mapping.get("tag", base.tag),
            quality_threshold=mapping.get("quality_threshold", base.quality_threshold),
        )


settings = Settings()
