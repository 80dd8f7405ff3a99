"""Data models for timeline events and categories."""

from dataclasses import dataclass, field

from timelinegen.config import Config


@dataclass
class Category:
    """A category shown in the colored band on the back of a card."""

    name: str
    color: str  # "#RRGGBB"


@dataclass
class EventRecord:
    """One historical event, printed as one card."""

    event: str
    description: str
    attribution: str
    year: str
    category: str | None = None  # key into the deck's category table
    image: str | None = None  # filename inside the images directory

    @property
    def label(self) -> str:
        """Short text identifying the card in messages."""
        return self.event


@dataclass
class Deck:
    """A loaded deck: configuration, category table and events."""

    config: Config
    categories: dict[str, Category] = field(default_factory=dict)
    events: list[EventRecord] = field(default_factory=list)

    def category_for(self, event: EventRecord) -> Category | None:
        """
        Look up an event's category.

        Args:
            event: Event record.

        Returns:
            Category, or None if the event has none.

        Raises:
            ValueError: If the event names a category missing from the table.
        """
        if not event.category:
            return None
        try:
            return self.categories[event.category]
        except KeyError:
            raise ValueError(
                f"Unknown category '{event.category}' for event '{event.event}'. "
                f"Known categories: {', '.join(self.categories) or 'none'}"
            ) from None
