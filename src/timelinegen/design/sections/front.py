"""Front face: event title, image and attribution."""

from PIL import Image

from timelinegen.models import EventRecord
from timelinegen.design.base import CardSection, RendererContext
from timelinegen.errors import InsufficientHorizontalSpaceError, InsufficientVerticalSpaceError
from timelinegen.fonts import ReportLabFontMetrics
from timelinegen.types import RGBColor
from timelinegen.utils.color import BLACK, WHITE
from timelinegen.utils.dimensions import Dimensions
from timelinegen.utils.image import AverageColor, pil_to_image_reader, scale_to_fit
from timelinegen.utils.text import make_fit_predicate, strip_markers, wrap_bottom_up, wrap_text

DEBUG_IMAGE_BOX = (1.0, 0.0, 0.0)
ATTRIBUTION_BASELINE_OFFSET = 2.0  # points above the image box bottom


class FrontSection(CardSection):
    """Front face with the event title on top and the image below it."""

    def __init__(
        self,
        name: str,
        dimensions: Dimensions,
        event: EventRecord,
        background: AverageColor,
        image: Image.Image | None = None,
    ) -> None:
        """
        Initialize front section.

        Args:
            name: Section name.
            dimensions: Section dimensions.
            event: Event printed on the card.
            background: Fill color (the image's average color, or white).
            image: Decoded card image, if the event has one.
        """
        super().__init__(name, dimensions, event)
        self.background = background
        self.image = image

    @property
    def text_color(self) -> RGBColor:
        return WHITE if self.background.is_dark else BLACK

    def render(self, context: RendererContext) -> None:
        """Render background, title and, if present, the image with its attribution."""
        c = context.canvas
        theme = context.theme

        c.setStrokeColorRGB(*BLACK)
        c.setLineWidth(1)
        c.setFillColorRGB(*self.background.rgb)
        c.rect(context.x, context.y, context.width, context.height, stroke=1, fill=1)

        if context.content_width <= 0:
            raise InsufficientHorizontalSpaceError(
                context.card_index,
                self.event.label,
                "the event text",
                "Consider increasing layout.card_width_mm or reducing layout.padding_mm.",
            )

        metrics = ReportLabFontMetrics(theme.event_font)
        fits = make_fit_predicate(metrics, theme.event_size, context.content_width)
        lines = wrap_text(self.event.event, fits, origin=f"event text '{self.event.event}'")
        advance = metrics.height_at_size(theme.event_size) + theme.event_line_gap

        c.setFillColorRGB(*self.text_color)
        c.setFont(metrics.font_name, theme.event_size)
        baseline_top = context.top - context.padding_top
        for k, line in enumerate(lines):
            text = strip_markers(line)
            text_width = metrics.width_of_text_at_size(text, theme.event_size)
            c.drawString(
                context.x + (context.width - text_width) / 2,
                baseline_top - (k + 1) * advance,
                text,
            )

        if self.image is not None:
            self._render_image(context, reserved_height=(len(lines) + 1) * advance)

    def _render_image(self, context: RendererContext, reserved_height: float) -> None:
        """
        Draw the image centered in the space under the title.

        Args:
            context: Rendering context.
            reserved_height: Height taken by the title lines plus one spare line.
        """
        c = context.canvas
        max_height = context.height - context.padding_top - context.padding_bottom - reserved_height
        max_width = context.content_width

        if max_height <= 0:
            raise InsufficientVerticalSpaceError(
                context.card_index,
                self.event.label,
                "the image",
                "Consider lowering theme.event_size or increasing layout.card_height_mm.",
            )

        box_x = context.x + context.padding
        box_y = context.y + context.padding_bottom
        self.draw_debug_box(context, box_x, box_y, max_width, max_height, DEBUG_IMAGE_BOX)

        draw_width, draw_height = scale_to_fit(self.image.width, self.image.height, max_width, max_height)
        c.drawImage(
            pil_to_image_reader(self.image),
            box_x + (max_width - draw_width) / 2,
            box_y + (max_height - draw_height) / 2,
            width=draw_width,
            height=draw_height,
        )

        self._render_attribution(context, box_x, box_y, max_width, max_height)

    def _render_attribution(
        self, context: RendererContext, box_x: float, box_y: float, max_width: float, max_height: float
    ) -> None:
        """Draw the attribution anchored to the bottom of the image box, filled bottom-up."""
        if not self.event.attribution.strip():
            return

        c = context.canvas
        theme = context.theme
        metrics = ReportLabFontMetrics(theme.attribution_font)
        fits = make_fit_predicate(metrics, theme.attribution_size, max_width)
        lines = wrap_bottom_up(
            self.event.attribution, fits, origin=f"attribution text '{self.event.attribution}'"
        )

        line_height = metrics.height_at_size(theme.attribution_size)
        if line_height * len(lines) > max_height:
            raise InsufficientVerticalSpaceError(
                context.card_index,
                self.event.label,
                "the attribution text",
                "Consider lowering theme.attribution_size or increasing layout.card_height_mm.",
            )

        c.setFillColorRGB(*self.text_color)
        c.setFont(metrics.font_name, theme.attribution_size)
        for k, line in enumerate(lines):
            c.drawString(
                box_x,
                box_y + (len(lines) - k - 1) * (line_height + theme.attribution_line_gap)
                + ATTRIBUTION_BASELINE_OFFSET,
                strip_markers(line),
            )
