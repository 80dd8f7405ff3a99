"""PDF generation using ReportLab."""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from reportlab.lib.colors import gray
from reportlab.pdfgen import canvas

from timelinegen.config import Config
from timelinegen.design.base import Card, CardSection, RendererContext
from timelinegen.utils.dimensions import mm_to_points
from timelinegen.utils.grid import CardCell, GridPlan, PageGeometry, cell_for, plan_grid

logger = logging.getLogger(__name__)

SUMMARY_HEADING = "Timeline Generator"
SUMMARY_HEADING_SIZE = 20
SUMMARY_SUBHEADING = "printable event cards for timeline games"
SUMMARY_SUBHEADING_SIZE = 10
SUMMARY_INFO_SIZE = 15
SUMMARY_FONT = "Courier"


class PDFRenderer:
    """Renders event cards onto grid-planned PDF pages using ReportLab."""

    def __init__(self, config: Config) -> None:
        """
        Initialize PDF renderer.

        Args:
            config: Deck configuration (layout and theme).
        """
        self.config = config
        self.geometry = PageGeometry.from_layout(config.layout)

    def plan(self, card_count: int) -> GridPlan:
        """
        Plan the page grid for a number of cards.

        Raises:
            ZeroCapacityGridError: If no card fits on a page.
        """
        return plan_grid(self.geometry, card_count)

    def render_cards(self, cards: Sequence[Card], output_path: Path) -> GridPlan:
        """
        Render cards to a PDF file.

        The grid is planned before the file is created, so a layout that
        fits no card never leaves a partial PDF behind.

        Args:
            cards: Cards in deck order.
            output_path: Path to output PDF file.

        Returns:
            The GridPlan used.
        """
        plan = self.plan(len(cards))
        logger.info(
            f"Grid: {plan.cards_per_row} per row, {plan.cards_per_column} per column, "
            f"{plan.total_pages} page(s) for {plan.card_count} card(s)"
        )

        c = canvas.Canvas(str(output_path), pagesize=(self.geometry.page_width, self.geometry.page_height))
        c.setTitle(SUMMARY_HEADING)

        if self.config.theme.summary_page:
            self._draw_summary(c, plan, output_path)
            c.showPage()

        current_page = 0
        for index, card in enumerate(cards):
            cell = cell_for(index, plan)
            if cell.page_index != current_page:
                c.showPage()
                current_page = cell.page_index
            self.render_card(c, card, cell)

        c.save()
        logger.info(f"Wrote {output_path}")
        return plan

    def render_card(self, c: canvas.Canvas, card: Card, cell: CardCell) -> None:
        """
        Draw one card at its grid cell.

        Args:
            c: ReportLab canvas.
            card: Card to draw.
            cell: Cell from cell_for().
        """
        card_dims = card.get_dimensions().to_points()
        offset_x = cell.origin_x
        offset_y = cell.origin_y - card_dims.height

        for section in card.get_sections():
            self._render_section(c, section, offset_x, offset_y, card.index)

        if self.config.theme.crop_marks:
            self._draw_guides(c, card_dims.width, card_dims.height, offset_x, offset_y, card.get_fold_lines())

    def _render_section(
        self,
        c: canvas.Canvas,
        section: CardSection,
        offset_x: float,
        offset_y: float,
        card_index: int,
    ) -> None:
        """
        Render a single card section using polymorphism.

        Args:
            c: ReportLab canvas.
            section: CardSection subclass to render.
            offset_x: X of the card's bottom-left corner (points).
            offset_y: Y of the card's bottom-left corner (points).
            card_index: Position of the card in the deck.
        """
        point_dims = section.dimensions.to_points()
        layout = self.config.layout

        context = RendererContext(
            canvas=c,
            x=offset_x + point_dims.x,
            y=offset_y + point_dims.y,
            width=point_dims.width,
            height=point_dims.height,
            theme=self.config.theme,
            layout=layout,
            padding=mm_to_points(layout.padding_mm),
            padding_top=mm_to_points(layout.padding_top_mm),
            padding_bottom=mm_to_points(layout.padding_bottom_mm),
            card_index=card_index,
        )

        c.saveState()
        section.render(context)
        c.restoreState()

    def _draw_summary(self, c: canvas.Canvas, plan: GridPlan, output_path: Path) -> None:
        """Draw the first page: heading and grid summary."""
        width = self.geometry.page_width
        height = self.geometry.page_height
        margin = self.geometry.margin

        c.setFillColorRGB(0, 0, 0)
        c.setFont(SUMMARY_FONT, SUMMARY_HEADING_SIZE)
        heading_width = c.stringWidth(SUMMARY_HEADING, SUMMARY_FONT, SUMMARY_HEADING_SIZE)
        y = height - margin - SUMMARY_HEADING_SIZE
        c.drawString((width - heading_width) / 2, y, SUMMARY_HEADING)

        c.setFillColorRGB(0, 0, 0.933)
        c.setFont(SUMMARY_FONT, SUMMARY_SUBHEADING_SIZE)
        sub_width = c.stringWidth(SUMMARY_SUBHEADING, SUMMARY_FONT, SUMMARY_SUBHEADING_SIZE)
        y -= SUMMARY_HEADING_SIZE
        c.drawString((width - sub_width) / 2, y, SUMMARY_SUBHEADING)

        info_lines = [
            f"* generated {output_path.name}",
            f"* start time: {datetime.now():%Y-%m-%d %H:%M:%S}",
            f"* #cards per row: {plan.cards_per_row}",
            f"* #cards per column: {plan.cards_per_column}",
            f"* #total pages: {plan.total_pages}",
            f"* #total cards: {plan.card_count}",
        ]
        text = c.beginText(margin, y - SUMMARY_INFO_SIZE * 3)
        text.setFont(SUMMARY_FONT, SUMMARY_INFO_SIZE)
        text.setFillColorRGB(0, 0, 0)
        for line in info_lines:
            text.textLine(line)
        c.drawText(text)

    def _draw_guides(
        self,
        c: canvas.Canvas,
        card_width: float,
        card_height: float,
        offset_x: float,
        offset_y: float,
        fold_lines: list[float],
    ) -> None:
        """Draw crop marks and fold guides (all in points except fold_lines, in mm)."""
        c.saveState()

        # Fold lines (gray, sparsely dotted)
        c.setStrokeColor(gray)
        c.setLineWidth(0.25)
        c.setDash(1, 2)
        for fold_x in fold_lines:
            fold_x_pts = mm_to_points(fold_x) + offset_x
            c.line(fold_x_pts, offset_y, fold_x_pts, offset_y + card_height)

        # Corner crop marks (gray, solid), pointing away from the card
        c.setDash()
        mark_length = min(9, self.geometry.gap / 2) if self.geometry.gap > 0 else 0
        if mark_length > 0:
            corners = [
                (offset_x, offset_y, -1, -1),
                (offset_x + card_width, offset_y, 1, -1),
                (offset_x, offset_y + card_height, -1, 1),
                (offset_x + card_width, offset_y + card_height, 1, 1),
            ]
            for cx, cy, dx, dy in corners:
                c.line(cx, cy, cx + dx * mark_length, cy)
                c.line(cx, cy, cx, cy + dy * mark_length)

        c.restoreState()
