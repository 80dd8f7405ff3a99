"""Exceptions raised while laying out a timeline deck.

All of them derive from ``ValueError`` as well as ``TimelineError`` so callers
that only know about ``ValueError`` (the CLI, scripts) still catch them.
"""


class TimelineError(Exception):
    """Base class for layout failures."""


class WordTooLongError(TimelineError, ValueError):
    """A single word does not fit on an empty line."""

    def __init__(self, word: str, origin: str) -> None:
        self.word = word
        self.origin = origin
        super().__init__(
            f"The word '{word}' in {origin} doesn't fit into a single line.\n"
            "Consider lowering the font size for this field. "
            "You may also separate the word with a space to force a line wrap."
        )


class ZeroCapacityGridError(TimelineError, ValueError):
    """Margins, gaps and card size leave no room for a single card."""

    def __init__(self, cards_per_row: int, cards_per_column: int) -> None:
        self.cards_per_row = cards_per_row
        self.cards_per_column = cards_per_column
        super().__init__(
            f"No card fits on the page ({cards_per_row} per row, {cards_per_column} per column). "
            "Consider reducing margin_mm, gap_mm or the card size, or choosing a larger page size."
        )


class InsufficientSpaceError(TimelineError, ValueError):
    """A card's content box came out empty or too small for its text."""

    axis = "space"

    def __init__(self, card_index: int, label: str, area: str, hint: str) -> None:
        self.card_index = card_index
        self.label = label
        self.area = area
        super().__init__(
            f"Not enough {self.axis} for {area} on card {card_index} ({label}). {hint}"
        )


class InsufficientVerticalSpaceError(InsufficientSpaceError):
    axis = "vertical space"


class InsufficientHorizontalSpaceError(InsufficientSpaceError):
    axis = "horizontal space"
