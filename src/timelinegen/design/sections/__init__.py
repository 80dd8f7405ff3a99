"""Card sections (faces)."""

from timelinegen.design.sections.back import BackSection, draw_runs
from timelinegen.design.sections.front import FrontSection

__all__ = [
    "BackSection",
    "FrontSection",
    "draw_runs",
]
