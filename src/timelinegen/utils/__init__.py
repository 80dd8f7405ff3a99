"""Utility modules."""

from timelinegen.utils.dimensions import (
    MM_TO_POINTS,
    PAGE_SIZES,
    Dimensions,
    get_page_size,
    mm_to_points,
    points_to_mm,
)

__all__ = [
    "MM_TO_POINTS",
    "PAGE_SIZES",
    "Dimensions",
    "get_page_size",
    "mm_to_points",
    "points_to_mm",
]
