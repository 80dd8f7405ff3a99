"""Card layouts."""

from timelinegen.design.cards.event_card import EventCard

__all__ = ["EventCard"]
