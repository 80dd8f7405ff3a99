"""Two-faced event card: front and back side by side."""

from PIL import Image

from timelinegen.models import Category, EventRecord
from timelinegen.config import Layout
from timelinegen.design.base import Card, CardSection
from timelinegen.design.sections.back import BackSection
from timelinegen.design.sections.front import FrontSection
from timelinegen.utils.image import WHITE_BACKGROUND, AverageColor
from timelinegen.utils.dimensions import Dimensions


class EventCard(Card):
    """
    Event card laid out as Front | Back.

    The two faces are printed next to each other and folded along the
    line between them, so the card is twice as wide as one face.
    """

    def __init__(
        self,
        event: EventRecord,
        index: int,
        layout: Layout,
        background: AverageColor = WHITE_BACKGROUND,
        image: Image.Image | None = None,
        category: Category | None = None,
    ) -> None:
        """
        Initialize event card.

        Args:
            event: Event to print.
            index: Position of the card in the deck.
            layout: Physical layout (face size).
            background: Front face fill color.
            image: Decoded card image, if any.
            category: Category for the back face band.
        """
        super().__init__(event, index)
        self.layout = layout
        self.background = background
        self.image = image
        self.category = category

    def get_dimensions(self) -> Dimensions:
        return Dimensions(
            width=self.layout.card_width_mm * 2,
            height=self.layout.card_height_mm,
        )

    def get_sections(self) -> list[CardSection]:
        face_width = self.layout.card_width_mm
        face_height = self.layout.card_height_mm
        return [
            FrontSection(
                "front",
                Dimensions(width=face_width, height=face_height, x=0.0, y=0.0),
                self.event,
                background=self.background,
                image=self.image,
            ),
            BackSection(
                "back",
                Dimensions(width=face_width, height=face_height, x=face_width, y=0.0),
                self.event,
                category=self.category,
            ),
        ]

    def get_fold_lines(self) -> list[float]:
        return [self.layout.card_width_mm]
