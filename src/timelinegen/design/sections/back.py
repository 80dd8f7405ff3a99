"""Back face: year, styled description and category band."""

from reportlab.pdfgen import canvas

from timelinegen.models import Category, EventRecord
from timelinegen.design.base import CardSection, RendererContext
from timelinegen.errors import InsufficientHorizontalSpaceError, InsufficientVerticalSpaceError
from timelinegen.fonts import FontFamily, ReportLabFontMetrics, font_family
from timelinegen.utils.color import BLACK, hex_to_rgb, text_color_for
from timelinegen.utils.dimensions import Dimensions, mm_to_points
from timelinegen.utils.text import StyledRun, make_fit_predicate, segment_lines, strip_markers, wrap_text

DEBUG_YEAR_BOX = (0.0, 1.0, 0.0)
DEBUG_DESCRIPTION_BOX = (1.0, 0.0, 0.0)
STRIKE_POSITION = 0.3  # strike line height as a fraction of the font size


class BackSection(CardSection):
    """Back face with the year on top, the description below and a category band at the bottom."""

    def __init__(
        self,
        name: str,
        dimensions: Dimensions,
        event: EventRecord,
        category: Category | None = None,
    ) -> None:
        """
        Initialize back section.

        Args:
            name: Section name.
            dimensions: Section dimensions.
            event: Event printed on the card.
            category: Category for the colored band, if any.
        """
        super().__init__(name, dimensions, event)
        self.category = category

    def render(self, context: RendererContext) -> None:
        """Render year, description and category band."""
        c = context.canvas
        theme = context.theme

        if context.content_width <= 0:
            raise InsufficientHorizontalSpaceError(
                context.card_index,
                self.event.label,
                "the description",
                "Consider increasing layout.card_width_mm or reducing layout.padding_mm.",
            )

        band_height = self._render_category_band(context)

        # Border goes on top of the band
        c.setStrokeColorRGB(*BLACK)
        c.setLineWidth(1)
        c.rect(context.x, context.y, context.width, context.height, stroke=1, fill=0)

        year_metrics = ReportLabFontMetrics(theme.year_font)
        year_height = year_metrics.height_at_size(theme.year_size)
        year_text = strip_markers(self.event.year)
        year_baseline = context.top - context.padding_top - year_height
        year_width = year_metrics.width_of_text_at_size(year_text, theme.year_size)

        c.setFillColorRGB(*BLACK)
        c.setFont(year_metrics.font_name, theme.year_size)
        c.drawString(context.x + (context.width - year_width) / 2, year_baseline, year_text)
        self.draw_debug_box(
            context, context.x + context.padding, year_baseline, context.content_width, year_height, DEBUG_YEAR_BOX
        )

        self._render_description(context, year_height, band_height)

    def _render_category_band(self, context: RendererContext) -> float:
        """
        Fill the bottom band with the category color and print its name.

        Returns:
            Band height in points (0 without a category).
        """
        if self.category is None or context.layout.category_band_mm <= 0:
            return 0.0

        c = context.canvas
        theme = context.theme
        band_height = mm_to_points(context.layout.category_band_mm)

        c.setFillColorRGB(*hex_to_rgb(self.category.color))
        c.rect(context.x, context.y, context.width, band_height, stroke=0, fill=1)

        metrics = ReportLabFontMetrics(theme.category_font)
        name_width = metrics.width_of_text_at_size(self.category.name, theme.category_size)
        cap_height = metrics.height_at_size(theme.category_size) * 0.7
        c.setFillColorRGB(*text_color_for(self.category.color))
        c.setFont(metrics.font_name, theme.category_size)
        c.drawString(
            context.x + (context.width - name_width) / 2,
            context.y + (band_height - cap_height) / 2,
            self.category.name,
        )
        return band_height

    def _render_description(self, context: RendererContext, year_height: float, band_height: float) -> None:
        """Wrap, segment and draw the description between the year and the band."""
        theme = context.theme
        family = font_family(theme.description_font)
        metrics = ReportLabFontMetrics(family.regular)
        line_height = metrics.height_at_size(theme.description_size)

        max_height = (
            context.height
            - context.padding_top
            - context.padding_bottom
            - year_height
            - 2 * line_height
            - band_height
        )
        if max_height <= 0:
            raise InsufficientVerticalSpaceError(
                context.card_index,
                self.event.label,
                "the description",
                "Consider lowering theme.year_size or increasing layout.card_height_mm.",
            )

        box_x = context.x + context.padding
        box_y = context.y + context.padding_bottom + band_height
        self.draw_debug_box(context, box_x, box_y, context.content_width, max_height, DEBUG_DESCRIPTION_BOX)

        fits = make_fit_predicate(metrics, theme.description_size, context.content_width)
        lines = wrap_text(self.event.description, fits, origin=f"description of '{self.event.event}'")

        advance = line_height + theme.description_line_gap
        if lines and len(lines) * advance - theme.description_line_gap > max_height:
            raise InsufficientVerticalSpaceError(
                context.card_index,
                self.event.label,
                "the description",
                "Consider shortening the description, lowering theme.description_size "
                "or increasing layout.card_height_mm.",
            )

        c = context.canvas
        c.setFillColorRGB(*BLACK)
        c.setStrokeColorRGB(*BLACK)
        first_baseline = box_y + max_height - line_height
        for k, runs in enumerate(segment_lines(lines)):
            draw_runs(c, runs, box_x, first_baseline - k * advance, family, theme.description_size)


def draw_runs(
    c: canvas.Canvas, runs: list[StyledRun], x: float, y: float, family: FontFamily, size: float
) -> float:
    """
    Draw one line of styled runs left to right.

    Runs are separated by a single space measured in the face of the run
    before it. Strikethrough runs get a line through them.

    Args:
        c: ReportLab canvas.
        runs: Runs of one line.
        x: Left edge.
        y: Baseline.
        family: Font family to pick faces from.
        size: Font size in points.

    Returns:
        X position after the last run.
    """
    cursor = x
    for i, run in enumerate(runs):
        font_name = family.select(run)
        c.setFont(font_name, size)
        c.drawString(cursor, y, run.text)
        run_width = c.stringWidth(run.text, font_name, size)

        if run.strikethrough:
            c.setLineWidth(max(size / 18, 0.3))
            c.line(cursor, y + size * STRIKE_POSITION, cursor + run_width, y + size * STRIKE_POSITION)

        cursor += run_width
        if i < len(runs) - 1:
            cursor += c.stringWidth(" ", font_name, size)
    return cursor
