"""Page grid planning for two-faced cards."""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from timelinegen.errors import ZeroCapacityGridError
from timelinegen.utils.dimensions import get_page_size, mm_to_points


@dataclass(frozen=True)
class PageGeometry:
    """Page and card measurements in points."""

    page_width: float
    page_height: float
    margin: float
    gap: float
    card_width: float  # one face
    card_height: float

    @classmethod
    def from_mm(
        cls,
        page_width_mm: float,
        page_height_mm: float,
        margin_mm: float,
        gap_mm: float,
        card_width_mm: float,
        card_height_mm: float,
    ) -> "PageGeometry":
        """
        Build geometry from millimeter measurements.

        Args:
            page_width_mm: Page width.
            page_height_mm: Page height.
            margin_mm: Margin on every page edge.
            gap_mm: Gap between neighbouring cards.
            card_width_mm: Width of one card face.
            card_height_mm: Card height.

        Returns:
            PageGeometry in points.
        """
        return cls(
            page_width=mm_to_points(page_width_mm),
            page_height=mm_to_points(page_height_mm),
            margin=mm_to_points(margin_mm),
            gap=mm_to_points(gap_mm),
            card_width=mm_to_points(card_width_mm),
            card_height=mm_to_points(card_height_mm),
        )

    @classmethod
    def from_layout(cls, layout) -> "PageGeometry":
        """
        Build geometry from a ``Layout`` configuration.

        Args:
            layout: timelinegen.config.Layout instance.

        Returns:
            PageGeometry in points.
        """
        page = get_page_size(layout.page_size)
        return cls.from_mm(
            page.width,
            page.height,
            layout.margin_mm,
            layout.gap_mm,
            layout.card_width_mm,
            layout.card_height_mm,
        )


@dataclass(frozen=True)
class GridPlan:
    """How many cards go on a page and how many pages the deck needs."""

    cards_per_row: int
    cards_per_column: int
    page_capacity: int
    total_pages: int
    card_count: int
    geometry: PageGeometry


@dataclass(frozen=True)
class CardCell:
    """
    Placement of one card.

    ``origin_x``/``origin_y`` is the top-left corner of the front face in PDF
    space (y grows upward from the bottom of the page).
    """

    page_index: int
    row: int
    column: int
    origin_x: float
    origin_y: float


def _fit_count(available: float, item: float, gap: float) -> int:
    """Largest n with n items and n-1 gaps inside ``available``."""
    if item <= 0 or gap < 0:
        raise ValueError(f"Card size must be positive and gap non-negative (got {item}pt, gap {gap}pt)")
    count = 0
    while (count + 1) * item + count * gap <= available:
        count += 1
    return count


def plan_grid(geometry: PageGeometry, card_count: int) -> GridPlan:
    """
    Compute the page grid for a deck.

    Each card takes two card widths horizontally (front and back side by
    side) and one card height vertically.

    Args:
        geometry: Page geometry in points.
        card_count: Number of cards in the deck.

    Returns:
        GridPlan.

    Raises:
        ZeroCapacityGridError: If not even one card fits on the page.
    """
    cards_per_row = _fit_count(
        geometry.page_width - 2 * geometry.margin,
        geometry.card_width * 2,
        geometry.gap,
    )
    cards_per_column = _fit_count(
        geometry.page_height - 2 * geometry.margin,
        geometry.card_height,
        geometry.gap,
    )

    page_capacity = cards_per_row * cards_per_column
    if page_capacity == 0:
        raise ZeroCapacityGridError(cards_per_row, cards_per_column)

    return GridPlan(
        cards_per_row=cards_per_row,
        cards_per_column=cards_per_column,
        page_capacity=page_capacity,
        total_pages=math.ceil(card_count / page_capacity),
        card_count=card_count,
        geometry=geometry,
    )


def cell_for(card_index: int, plan: GridPlan) -> CardCell:
    """
    Locate a card on its page.

    Cards fill a page row by row, left to right, starting at the top.

    Args:
        card_index: 0-based card index.
        plan: Grid plan from plan_grid().

    Returns:
        CardCell for the card.

    Raises:
        IndexError: If card_index is outside the deck.
    """
    if not 0 <= card_index < plan.card_count:
        raise IndexError(f"Card index {card_index} out of range for {plan.card_count} cards")

    geometry = plan.geometry
    slot = card_index % plan.page_capacity
    row = slot // plan.cards_per_row
    column = slot % plan.cards_per_row

    return CardCell(
        page_index=card_index // plan.page_capacity,
        row=row,
        column=column,
        origin_x=geometry.margin + column * (geometry.card_width * 2 + geometry.gap),
        origin_y=geometry.page_height - geometry.margin - row * (geometry.card_height + geometry.gap),
    )


def iter_cells(plan: GridPlan) -> Iterator[CardCell]:
    """Yield the cell of every card in deck order."""
    for index in range(plan.card_count):
        yield cell_for(index, plan)
