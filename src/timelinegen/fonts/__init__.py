"""Font registration, metrics and variant lookup."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from timelinegen.utils.text import StyledRun

logger = logging.getLogger(__name__)

FONTS_DIR = Path(__file__).parent

# The four faces of each built-in PDF family: regular, bold, italic, bold-italic
STANDARD_FAMILIES: dict[str, tuple[str, str, str, str]] = {
    "Helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "Courier": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
    "Times-Roman": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
}

# Filename suffixes tried when looking for variants of a registered TTF family
_TTF_VARIANT_SUFFIXES = {
    "bold": ("-Bold",),
    "italic": ("-Italic", "-Oblique"),
    "bold_italic": ("-Bolditalic", "-Boldoblique", "-Bold-Italic"),
}


class FontMetrics(Protocol):
    """Measures text for one font."""

    def width_of_text_at_size(self, text: str, size: float) -> float: ...

    def height_at_size(self, size: float) -> float: ...


class ReportLabFontMetrics:
    """FontMetrics backed by ReportLab's font registry."""

    def __init__(self, font_name: str) -> None:
        self.font_name = require_font(font_name)

    def width_of_text_at_size(self, text: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, self.font_name, size)

    def height_at_size(self, size: float) -> float:
        ascent, descent = pdfmetrics.getAscentDescent(self.font_name, size)
        return ascent - descent

    def __repr__(self) -> str:
        return f"ReportLabFontMetrics({self.font_name!r})"


def _normalize_font_name(name: str) -> str:
    """
    Normalize a font name to TitleCase convention.

    Examples:
        "iosevka-regular" → "Iosevka-Regular"
        "stop" → "Stop"

    Args:
        name: Font name to normalize (can be any case)

    Returns:
        TitleCase font name
    """
    parts = name.split('-')
    return '-'.join(part.title() for part in parts)


def register_fonts(fonts_dir: Path = FONTS_DIR) -> int:
    """
    Register custom fonts with ReportLab.

    Auto-discovers TTF files in the fonts directory. Each font is registered
    with a TitleCase name based on its filename (without extension), so
    ``merriweather-bold.ttf`` becomes ``Merriweather-Bold``.

    Args:
        fonts_dir: Directory to scan (default: the package fonts directory).

    Returns:
        Number of fonts registered.
    """
    ttf_files = sorted(fonts_dir.glob("*.ttf"))

    if not ttf_files:
        logger.info(f"No TTF font files found in {fonts_dir}. Using built-in PDF fonts.")
        return 0

    registered_count = 0
    for font_path in ttf_files:
        font_name = _normalize_font_name(font_path.stem)

        try:
            pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
        except Exception as e:
            logger.warning(
                f"Failed to register font {font_name} from {font_path.name}: {e}. "
                "Skipping this font."
            )
            continue

        logger.info(f"Registered font: {font_name} from {font_path.name}")
        registered_count += 1

    if registered_count > 0:
        logger.info(f"Successfully registered {registered_count} custom font(s).")
    return registered_count


def available_fonts() -> list[str]:
    """Names of all fonts usable right now (built-in and registered)."""
    return sorted(set(pdfmetrics.standardFonts) | set(pdfmetrics.getRegisteredFontNames()))


def is_font_available(font_name: str) -> bool:
    """Check whether a font name can be used for drawing."""
    return font_name in pdfmetrics.standardFonts or font_name in pdfmetrics.getRegisteredFontNames()


def require_font(font_name: str) -> str:
    """
    Validate a configured font name.

    Args:
        font_name: Font name from the configuration.

    Returns:
        The same font name.

    Raises:
        ValueError: If the font is neither built in nor registered.
    """
    if not is_font_available(font_name):
        raise ValueError(
            f"The font '{font_name}' is not available.\n"
            f"Available fonts: {', '.join(available_fonts())}"
        )
    return font_name


@dataclass(frozen=True)
class FontFamily:
    """Regular, bold, italic and bold-italic faces of one family."""

    regular: str
    bold: str
    italic: str
    bold_italic: str

    def select(self, run: StyledRun) -> str:
        """
        Pick the face for a styled run.

        Strikethrough does not change the face.

        Args:
            run: Styled run to draw.

        Returns:
            Font name.
        """
        if run.bold and run.italic:
            return self.bold_italic
        if run.bold:
            return self.bold
        if run.italic:
            return self.italic
        return self.regular


def _find_variant(base: str, variant: str) -> str:
    for suffix in _TTF_VARIANT_SUFFIXES[variant]:
        candidate = f"{base}{suffix}"
        if is_font_available(candidate):
            return candidate
    logger.warning(f"No {variant.replace('_', '-')} variant registered for '{base}', using regular face")
    return base


def font_family(font_name: str) -> FontFamily:
    """
    Resolve the family a font belongs to.

    The configured font is always the face used for unstyled text. Built-in
    families (Helvetica, Courier, Times) are matched from any of their faces,
    and styles are added on top of the configured one: with
    ``Helvetica-Bold``, italic runs use ``Helvetica-BoldOblique``. For
    registered TTF fonts, ``<name>-Bold``, ``<name>-Italic`` and
    ``<name>-Bolditalic`` are looked up; a missing variant falls back to the
    configured face.

    Args:
        font_name: Configured font name.

    Returns:
        FontFamily.

    Raises:
        ValueError: If the font is not available.
    """
    require_font(font_name)

    for faces in STANDARD_FAMILIES.values():
        if font_name in faces:
            # Face order is regular, bold, italic, bold-italic: bit 0 is bold, bit 1 italic
            base = faces.index(font_name)
            return FontFamily(
                regular=font_name,
                bold=faces[base | 1],
                italic=faces[base | 2],
                bold_italic=faces[3],
            )

    return FontFamily(
        regular=font_name,
        bold=_find_variant(font_name, "bold"),
        italic=_find_variant(font_name, "italic"),
        bold_italic=_find_variant(font_name, "bold_italic"),
    )
