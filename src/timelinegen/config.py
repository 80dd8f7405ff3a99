"""Configuration models and validation."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from timelinegen.utils.dimensions import PAGE_SIZES


class Layout(BaseModel):
    """
    Physical page and card layout, all lengths in millimeters.

    A printed card is two faces wide (front with the image, back with the
    year and description), so a row needs ``2 * card_width_mm`` per card.
    """

    page_size: str = "a4"
    """Page size name: a3, a4, a5, letter or legal."""

    margin_mm: float = Field(default=10.0, ge=0)
    """Margin on every page edge."""

    gap_mm: float = Field(default=2.0, ge=0)
    """Gap between neighbouring cards, both directions."""

    card_width_mm: float = Field(default=60.0, gt=0)
    """Width of a single card face."""

    card_height_mm: float = Field(default=90.0, gt=0)
    """Card height."""

    padding_mm: float = Field(default=3.0, ge=0)
    """Side padding inside each face."""

    padding_top_mm: float = Field(default=5.0, ge=0)
    """Padding between the top edge and the first line of text."""

    padding_bottom_mm: float = Field(default=3.0, ge=0)
    """Padding above the bottom edge."""

    category_band_mm: float = Field(default=6.0, ge=0)
    """Height of the colored category band at the bottom of the back face. 0 disables it."""

    @field_validator("page_size")
    @classmethod
    def _known_page_size(cls, value: str) -> str:
        if value.lower() not in PAGE_SIZES:
            raise ValueError(f"unknown page size '{value}', expected one of: {', '.join(PAGE_SIZES)}")
        return value.lower()


class Theme(BaseModel):
    """
    Fonts, sizes and drawing options.

    Font names are ReportLab names: the built-in PDF fonts (Helvetica,
    Times-Roman, Courier and their bold/italic faces) or TTF fonts
    registered from the fonts directory.
    """

    # ========================================================================
    # Fonts
    # ========================================================================
    event_font: str = "Helvetica-Bold"
    """Font for the event title on the front face."""

    attribution_font: str = "Helvetica"
    """Font for the image attribution on the front face."""

    year_font: str = "Helvetica-Bold"
    """Font for the year on the back face."""

    description_font: str = "Helvetica"
    """Base font for the description; bold/italic faces are picked from its family."""

    category_font: str = "Helvetica-Bold"
    """Font for the category name in the category band."""

    # ========================================================================
    # Sizes (points)
    # ========================================================================
    event_size: float = Field(default=14.0, gt=0)
    attribution_size: float = Field(default=5.0, gt=0)
    year_size: float = Field(default=28.0, gt=0)
    description_size: float = Field(default=9.0, gt=0)
    category_size: float = Field(default=7.0, gt=0)

    # ========================================================================
    # Extra space between lines (points)
    # ========================================================================
    event_line_gap: float = 2.5
    attribution_line_gap: float = 1.0
    description_line_gap: float = 2.0

    # ========================================================================
    # Drawing options
    # ========================================================================
    debug: bool = False
    """Outline the computed text and image boxes."""

    crop_marks: bool = True
    """Draw crop marks at card corners and the fold line between faces."""

    summary_page: bool = True
    """Start the document with a page summarising the grid."""


class Config(BaseModel):
    """Root configuration of a deck."""

    layout: Layout = Field(default_factory=Layout)
    theme: Theme = Field(default_factory=Theme)

    output_file: Path = Path("timeline.pdf")
    """Default output path when none is given on the command line."""

    images_dir: Path = Path("images")
    """Directory card images are looked up in, relative to the deck file."""
