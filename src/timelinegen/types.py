"""Type aliases used across the timelinegen package."""

from typing import Callable, Tuple

# Color types
RGBColor = Tuple[float, float, float]  # RGB color in 0-1 range

# Text
FitPredicate = Callable[[str], bool]  # True if a candidate line fits its box
