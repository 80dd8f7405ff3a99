"""Color parsing and light/dark classification."""

import re
from typing import NamedTuple

from timelinegen.types import RGBColor

WHITE: RGBColor = (1.0, 1.0, 1.0)
BLACK: RGBColor = (0.0, 0.0, 0.0)

# int(..., 16) alone would also take signs, "0x" and underscores
_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{6}")


class NormalizedRGB(NamedTuple):
    """RGB color with each channel in 0-1 range."""

    r: float
    g: float
    b: float


def hex_to_rgb(hex_color: str) -> NormalizedRGB:
    """
    Convert a ``#RRGGBB`` color to normalized RGB.

    Args:
        hex_color: Hex color, leading ``#`` optional.

    Returns:
        NormalizedRGB with channels in 0-1 range.

    Raises:
        ValueError: If the string is not a six digit hex color.
    """
    digits = hex_color.strip().lstrip("#")
    if not _HEX_DIGITS.fullmatch(digits):
        raise ValueError(f"Invalid hex color '{hex_color}', expected #RRGGBB")
    value = int(digits, 16)

    r = ((value >> 16) & 255) / 255
    g = ((value >> 8) & 255) / 255
    b = (value & 255) / 255
    return NormalizedRGB(r, g, b)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Format 0-255 channels as ``#RRGGBB``.

    Args:
        r, g, b: Channel values in 0-255 range.

    Returns:
        Uppercase hex color string.
    """
    return f"#{r:02X}{g:02X}{b:02X}"


def _linearize(channel: int) -> float:
    """sRGB transfer function for one 0-255 channel."""
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """
    WCAG relative luminance of a 0-255 RGB color.

    Args:
        r, g, b: Channel values in 0-255 range.

    Returns:
        Luminance in 0-1 range.
    """
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def is_dark(r: int, g: int, b: int) -> bool:
    """
    Classify a color as dark (luminance below 0.5).

    Args:
        r, g, b: Channel values in 0-255 range.

    Returns:
        True if white text reads better than black text on this color.
    """
    return relative_luminance(r, g, b) < 0.5


def text_color_for(hex_color: str) -> RGBColor:
    """
    Pick white or black text for a background color.

    Args:
        hex_color: Background color as ``#RRGGBB``.

    Returns:
        WHITE on dark backgrounds, BLACK otherwise.
    """
    rgb = hex_to_rgb(hex_color)
    channels = (round(rgb.r * 255), round(rgb.g * 255), round(rgb.b * 255))
    return WHITE if is_dark(*channels) else BLACK
