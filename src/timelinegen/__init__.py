"""Printable event cards for timeline games."""

__version__ = "0.1.0"

# High-level Python API
from timelinegen.api import create_card, create_cards, render_deck_to_pdf
from timelinegen.config import Config, Layout, Theme
from timelinegen.design.cards import EventCard
from timelinegen.errors import (
    InsufficientHorizontalSpaceError,
    InsufficientSpaceError,
    InsufficientVerticalSpaceError,
    TimelineError,
    WordTooLongError,
    ZeroCapacityGridError,
)
from timelinegen.loader import load_deck, parse_deck
from timelinegen.models import Category, Deck, EventRecord
from timelinegen.utils.grid import PageGeometry, cell_for, plan_grid
from timelinegen.utils.text import segment_lines, wrap_bottom_up, wrap_text, wrap_words

__all__ = [
    "Category",
    "Config",
    "Deck",
    "EventCard",
    "EventRecord",
    "InsufficientHorizontalSpaceError",
    "InsufficientSpaceError",
    "InsufficientVerticalSpaceError",
    "Layout",
    "PageGeometry",
    "Theme",
    "TimelineError",
    "WordTooLongError",
    "ZeroCapacityGridError",
    "cell_for",
    "create_card",
    "create_cards",
    "load_deck",
    "parse_deck",
    "plan_grid",
    "render_deck_to_pdf",
    "segment_lines",
    "wrap_bottom_up",
    "wrap_text",
    "wrap_words",
]
