"""Base abstractions for card layouts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from reportlab.pdfgen import canvas

from timelinegen.models import EventRecord
from timelinegen.types import RGBColor
from timelinegen.utils.dimensions import Dimensions

if TYPE_CHECKING:
    from timelinegen.config import Layout, Theme


@dataclass
class RendererContext:
    """Context passed to section renderers."""

    canvas: canvas.Canvas  # type: ignore
    x: float  # X position in points (left edge)
    y: float  # Y position in points (bottom edge)
    width: float  # Width in points
    height: float  # Height in points
    theme: "Theme"
    layout: "Layout"
    padding: float  # Side padding in points
    padding_top: float  # Top padding in points
    padding_bottom: float  # Bottom padding in points
    card_index: int  # Position of the card in the deck, for error messages

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def content_width(self) -> float:
        """Width left for text and images between the side paddings."""
        return self.width - 2 * self.padding


class CardSection(ABC):
    """Base class for card sections (faces)."""

    def __init__(self, name: str, dimensions: Dimensions, event: EventRecord) -> None:
        """
        Initialize card section.

        Args:
            name: Section name (e.g., "front", "back").
            dimensions: Section dimensions relative to the card, in mm.
            event: Event printed on the card.
        """
        self.name = name
        self.dimensions = dimensions
        self.event = event

    @abstractmethod
    def render(self, context: RendererContext) -> None:
        """
        Render this section to PDF canvas.

        Args:
            context: Rendering context with canvas, bounds, theme, etc.
        """
        pass

    @staticmethod
    def draw_debug_box(
        context: RendererContext, x: float, y: float, width: float, height: float, color: RGBColor
    ) -> None:
        """Outline a computed layout box when the theme's debug flag is set."""
        if not context.theme.debug:
            return
        c = context.canvas
        c.saveState()
        c.setStrokeColorRGB(*color)
        c.setLineWidth(0.5)
        c.rect(x, y, width, height, stroke=1, fill=0)
        c.restoreState()


class Card(ABC):
    """Abstract base class for card layouts."""

    def __init__(self, event: EventRecord, index: int) -> None:
        """
        Initialize card with event data.

        Args:
            event: Event to print.
            index: Position of the card in the deck.
        """
        self.event = event
        self.index = index

    @abstractmethod
    def get_dimensions(self) -> Dimensions:
        """
        Get overall card dimensions.

        Returns:
            Dimensions object for entire card (mm).
        """
        pass

    @abstractmethod
    def get_sections(self) -> list[CardSection]:
        """
        Get all sections that make up this card.

        Returns:
            List of CardSection objects.
        """
        pass

    @abstractmethod
    def get_fold_lines(self) -> list[float]:
        """
        Get x-coordinates of fold lines (in mm from left edge).

        Returns:
            List of x-coordinates for fold lines.
        """
        pass
