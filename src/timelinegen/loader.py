"""Loading decks from JSON or TOML files."""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from timelinegen.models import Category, Deck, EventRecord
from timelinegen.config import Config

logger = logging.getLogger(__name__)

REQUIRED_EVENT_FIELDS = ("event", "description", "attribution", "year")


def _read_document(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    if suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    raise ValueError(f"Unsupported deck format '{path.suffix}' for {path}. Use .json or .toml")


def _build_category(key: str, value: dict[str, Any]) -> Category:
    try:
        return Category(name=str(value["name"]), color=str(value["color"]))
    except KeyError as e:
        raise ValueError(f"Category '{key}' is missing field {e}") from None


def _build_event(index: int, record: dict[str, Any]) -> EventRecord:
    missing = [name for name in REQUIRED_EVENT_FIELDS if name not in record]
    if missing:
        raise ValueError(f"Event {index} is missing field(s): {', '.join(missing)}")

    return EventRecord(
        event=str(record["event"]),
        description=str(record["description"]),
        attribution=str(record["attribution"]),
        year=str(record["year"]),
        category=record.get("category") or None,
        image=record.get("image") or None,
    )


def parse_deck(document: dict[str, Any], base_dir: Path | None = None) -> Deck:
    """
    Build a Deck from an already parsed document.

    Expected shape::

        {
            "config": {"layout": {...}, "theme": {...}},
            "categories": {"science": {"name": "Science", "color": "#1E88E5"}},
            "data": [{"event": ..., "description": ..., ...}]
        }

    Args:
        document: Parsed JSON/TOML content.
        base_dir: Directory relative image paths are resolved against.

    Returns:
        Deck.

    Raises:
        ValueError: If the configuration is invalid or an event is missing fields.
    """
    config = Config(**document.get("config", {}))
    if base_dir is not None and not config.images_dir.is_absolute():
        config = config.model_copy(update={"images_dir": base_dir / config.images_dir})

    categories = {
        key: _build_category(key, value)
        for key, value in document.get("categories", {}).items()
    }
    events = [_build_event(i, record) for i, record in enumerate(document.get("data", []))]

    return Deck(config=config, categories=categories, events=events)


def load_deck(path: Path) -> Deck:
    """
    Load a deck file.

    Args:
        path: Path to a .json or .toml deck.

    Returns:
        Deck with images_dir resolved relative to the deck file.

    Raises:
        FileNotFoundError: If the deck file doesn't exist.
        ValueError: If the deck is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Deck file not found: {path}")

    deck = parse_deck(_read_document(path), base_dir=path.parent)
    logger.info(f"Loaded {len(deck.events)} event(s) and {len(deck.categories)} category(ies) from {path}")
    return deck
