"""Tests for page grid planning."""

import pytest

from timelinegen.config import Layout
from timelinegen.errors import ZeroCapacityGridError
from timelinegen.utils.dimensions import MM_TO_POINTS, mm_to_points, points_to_mm
from timelinegen.utils.grid import PageGeometry, cell_for, iter_cells, plan_grid


def make_geometry(page_width=360.0, page_height=500.0, margin=20.0, gap=10.0, card_width=50.0, card_height=100.0):
    return PageGeometry(
        page_width=page_width,
        page_height=page_height,
        margin=margin,
        gap=gap,
        card_width=card_width,
        card_height=card_height,
    )


def test_exact_fit_gives_three_per_row():
    # 3 * (2 * 50) + 2 * 10 + 2 * 20 == 360
    plan = plan_grid(make_geometry(page_width=360.0), card_count=10)
    assert plan.cards_per_row == 3


def test_one_point_less_gives_two_per_row():
    plan = plan_grid(make_geometry(page_width=359.0), card_count=10)
    assert plan.cards_per_row == 2


def test_column_count_uses_single_card_height():
    # 4 * 100 + 3 * 10 = 430 <= 460 < 5 * 100 + 4 * 10
    plan = plan_grid(make_geometry(), card_count=1)
    assert plan.cards_per_column == 4
    assert plan.page_capacity == 12


def test_total_pages_rounds_up():
    geometry = make_geometry()
    assert plan_grid(geometry, card_count=12).total_pages == 1
    assert plan_grid(geometry, card_count=13).total_pages == 2
    assert plan_grid(geometry, card_count=0).total_pages == 0


def test_zero_capacity_raises():
    with pytest.raises(ZeroCapacityGridError) as exc_info:
        plan_grid(make_geometry(card_width=200.0), card_count=3)
    assert exc_info.value.cards_per_row == 0
    assert exc_info.value.cards_per_column == 4


def test_zero_capacity_is_a_value_error():
    with pytest.raises(ValueError):
        plan_grid(make_geometry(card_height=1000.0), card_count=3)


def test_cells_are_row_major():
    plan = plan_grid(make_geometry(), card_count=5)
    cells = [cell_for(i, plan) for i in range(5)]
    assert [(c.row, c.column) for c in cells] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1)]


def test_cell_origin():
    plan = plan_grid(make_geometry(), card_count=5)
    cell = cell_for(4, plan)
    assert cell.page_index == 0
    assert cell.origin_x == pytest.approx(20 + 1 * (2 * 50 + 10))
    assert cell.origin_y == pytest.approx(500 - 20 - 1 * (100 + 10))


def test_cells_wrap_to_next_page():
    plan = plan_grid(make_geometry(), card_count=13)
    cell = cell_for(12, plan)
    assert (cell.page_index, cell.row, cell.column) == (1, 0, 0)


def test_every_card_gets_a_distinct_cell():
    plan = plan_grid(make_geometry(), card_count=30)
    slots = {(c.page_index, c.row, c.column) for c in iter_cells(plan)}
    assert len(slots) == 30
    assert max(page for page, _, _ in slots) == plan.total_pages - 1


def test_cell_inside_margins():
    geometry = make_geometry()
    plan = plan_grid(geometry, card_count=12)
    for cell in iter_cells(plan):
        assert cell.origin_x + 2 * geometry.card_width <= geometry.page_width - geometry.margin
        assert cell.origin_y - geometry.card_height >= geometry.margin


@pytest.mark.parametrize("index", [-1, 5])
def test_cell_for_out_of_range(index):
    plan = plan_grid(make_geometry(), card_count=5)
    with pytest.raises(IndexError):
        cell_for(index, plan)


def test_geometry_from_layout_converts_millimeters():
    geometry = PageGeometry.from_layout(Layout(page_size="a4", margin_mm=10, gap_mm=0))
    assert geometry.page_width == pytest.approx(210 * MM_TO_POINTS)
    assert geometry.page_height == pytest.approx(297 * MM_TO_POINTS)
    assert geometry.margin == pytest.approx(10 * MM_TO_POINTS)
    assert geometry.gap == 0


def test_default_layout_plan():
    # 120mm per card across 190mm; 3 * 90 + 2 * 2 = 274mm down 277mm
    plan = plan_grid(PageGeometry.from_layout(Layout()), card_count=4)
    assert (plan.cards_per_row, plan.cards_per_column) == (1, 3)
    assert plan.total_pages == 2


def test_mm_points_round_trip():
    assert mm_to_points(1) == MM_TO_POINTS
    assert points_to_mm(mm_to_points(12.5)) == pytest.approx(12.5)
