#!/usr/bin/env python3
"""
Simple Example: Render a Deck Programmatically

Loads the sample deck next to this file, overrides a few theme settings
and writes the PDF.
"""

from pathlib import Path

from timelinegen import load_deck, render_deck_to_pdf

deck = load_deck(Path(__file__).parent / "data.json")

# Tweak the theme without touching the deck file
deck.config = deck.config.model_copy(
    update={"theme": deck.config.theme.model_copy(update={"year_size": 32, "debug": True})}
)

plan = render_deck_to_pdf(deck, "example_timeline.pdf")

print(f"✓ {plan.card_count} cards on {plan.total_pages} page(s) saved to: example_timeline.pdf")
