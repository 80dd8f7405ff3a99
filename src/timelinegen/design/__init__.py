"""Design system for card layouts."""

from timelinegen.design.base import Card, CardSection, RendererContext
from timelinegen.design.cards import EventCard

__all__ = [
    "Card",
    "CardSection",
    "EventCard",
    "RendererContext",
]
