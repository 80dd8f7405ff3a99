"""High-level API for programmatic deck rendering."""

import logging
from pathlib import Path

from timelinegen.config import Theme
from timelinegen.design.cards import EventCard
from timelinegen.fonts import font_family, require_font
from timelinegen.models import Deck, EventRecord
from timelinegen.render import PDFRenderer
from timelinegen.utils.grid import GridPlan
from timelinegen.utils.image import WHITE_BACKGROUND, average_color, load_card_image

logger = logging.getLogger(__name__)


def validate_fonts(theme: Theme) -> None:
    """
    Check that every font named in the theme can be used.

    Args:
        theme: Theme to check.

    Raises:
        ValueError: Naming the first unavailable font and listing the available ones.
    """
    for font_name in (theme.event_font, theme.attribution_font, theme.year_font, theme.category_font):
        require_font(font_name)
    font_family(theme.description_font)


def create_card(deck: Deck, index: int, event: EventRecord | None = None) -> EventCard:
    """
    Create the card for one event of a deck.

    The event's image is decoded and its average color becomes the front
    face background. Events without an image get a white background.

    Args:
        deck: Loaded deck.
        index: Position of the event in the deck.
        event: Event to use instead of ``deck.events[index]``.

    Returns:
        EventCard ready to be rendered.

    Raises:
        FileNotFoundError: If the event's image file doesn't exist.
        ValueError: If the image format is unsupported or the category is unknown.
    """
    event = event if event is not None else deck.events[index]
    category = deck.category_for(event)

    if event.image:
        image = load_card_image(deck.config.images_dir / event.image)
        background = average_color(image)
    else:
        logger.warning(
            f"No image specified for card index {index} ({event.event}). Using default white background color."
        )
        image = None
        background = WHITE_BACKGROUND

    return EventCard(
        event,
        index,
        deck.config.layout,
        background=background,
        image=image,
        category=category,
    )


def create_cards(deck: Deck) -> list[EventCard]:
    """
    Create cards for every event of a deck, in deck order.

    Args:
        deck: Loaded deck.

    Returns:
        List of EventCard objects.
    """
    return [create_card(deck, index, event) for index, event in enumerate(deck.events)]


def render_deck_to_pdf(deck: Deck, output_path: Path | str | None = None) -> GridPlan:
    """
    Render a whole deck to PDF.

    The page grid is planned and the fonts are validated before any card is
    built, so configuration errors surface before images are decoded.

    Args:
        deck: Loaded deck.
        output_path: Output PDF path (default: the deck's configured output_file).

    Returns:
        GridPlan used for the document.

    Raises:
        ZeroCapacityGridError: If no card fits on a page.
        WordTooLongError: If a word can't fit on a line of its field.
        InsufficientSpaceError: If a card's content box is too small.

    Example:
        ```python
        from pathlib import Path
        from timelinegen import load_deck, render_deck_to_pdf

        deck = load_deck(Path("data.json"))
        plan = render_deck_to_pdf(deck, "timeline.pdf")
        print(plan.total_pages)
        ```
    """
    output = Path(output_path) if output_path is not None else deck.config.output_file
    renderer = PDFRenderer(deck.config)

    plan = renderer.plan(len(deck.events))
    validate_fonts(deck.config.theme)

    cards = create_cards(deck)
    renderer.render_cards(cards, output)

    logger.info(f"PDF saved to: {output}")
    return plan
