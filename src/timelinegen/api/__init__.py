"""High-level API for building and rendering decks."""

from timelinegen.api.builder import (
    create_card,
    create_cards,
    render_deck_to_pdf,
    validate_fonts,
)

__all__ = [
    "create_card",
    "create_cards",
    "render_deck_to_pdf",
    "validate_fonts",
]
