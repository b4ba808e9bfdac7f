#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.lumina.logging_config import configure_structlog, get_logger  # noqa: E402
from backend.lumina.query_parser import (  # noqa: E402
    extract_city_from_query,
    strip_city_from_query,
)
from backend.lumina.search import SmartSearchEngine  # noqa: E402
from backend.lumina.settings import settings  # noqa: E402

logger = get_logger(__name__)


class SearchInputError(ValueError):
    """Raised when a catalog file cannot be read as a JSON array."""


def load_catalog(path: Path | None) -> list[Any]:
    if path is None:
        return []
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SearchInputError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise SearchInputError(f"{path} is not valid JSON: {exc.msg}") from exc
    if isinstance(payload, dict):
        # API responses wrap the list, e.g. {"venues": [...]}
        for key in ("venues", "events", "results", "data"):
            if isinstance(payload.get(key), list):
                return payload[key]
    if not isinstance(payload, list):
        raise SearchInputError(f"{path} must contain a JSON array")
    return payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search a venue/event catalog by keyword.")
    parser.add_argument("query", help="Free-text search query")
    parser.add_argument("--venues", type=Path, help="JSON file with venue records")
    parser.add_argument("--events", type=Path, help="JSON file with event records")
    parser.add_argument(
        "--city", default=settings.DEFAULT_CITY, help="Selected city (default: %(default)s)"
    )
    parser.add_argument(
        "--detect-city",
        action="store_true",
        help="Use a city named in the query instead of --city",
    )
    parser.add_argument("--suggest", action="store_true", help="Print autocomplete keywords only")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search details")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_structlog(level=logging.DEBUG if args.verbose else logging.WARNING)

    engine = SmartSearchEngine.default()

    if args.suggest:
        suggestions = engine.suggest(args.query)
        if args.json:
            print(json.dumps({"suggestions": suggestions}, ensure_ascii=False, indent=2))
        else:
            for keyword in suggestions:
                print(keyword)
        return 0

    try:
        venues = load_catalog(args.venues)
        events = load_catalog(args.events)
    except SearchInputError as exc:
        parser.error(str(exc))

    query = args.query
    city = args.city
    if args.detect_city:
        city = extract_city_from_query(query) or city
        query = strip_city_from_query(query)

    result = engine.search(query, venues, events, city)
    logger.info(
        "search_cli_result",
        city=city,
        venues=len(result.venues),
        events=len(result.events),
    )

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0

    if result.is_empty:
        print(f'No results for "{args.query}"')
        return 0
    if result.matched_keywords:
        print("Matched: " + ", ".join(result.matched_keywords))
    for venue in result.venues:
        rating = f" ({venue.rating:.1f})" if venue.rating is not None else ""
        print(f"venue  {venue.name or '?'}{rating}")
    for event in result.events:
        where = f" @ {event.venue_name}" if event.venue_name else ""
        print(f"event  {event.name or '?'}{where}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
