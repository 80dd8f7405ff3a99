"""Print specifications and dimension utilities."""

from dataclasses import dataclass as _dataclass

# The only place the millimeter/point factor lives.
MM_TO_POINTS = 2.834645669


@_dataclass(frozen=True)
class PageSize:
    """Page size specification."""

    width: float   # millimeters
    height: float  # millimeters
    label: str     # display label for CLI/help


@_dataclass(frozen=True)
class PointDims:
    """Dimensions in points (PDF coordinate system: 1 mm = 2.834645669 points)."""

    width: float
    height: float
    x: float
    y: float


# Registry of standard page sizes (portrait)
PAGE_SIZES = {
    "a3": PageSize(297.0, 420.0, "A3 (297×420mm)"),
    "a4": PageSize(210.0, 297.0, "A4 (210×297mm)"),
    "a5": PageSize(148.0, 210.0, "A5 (148×210mm)"),
    "letter": PageSize(215.9, 279.4, "Letter (8.5×11)"),
    "legal": PageSize(215.9, 355.6, "Legal (8.5×14)"),
}


def get_page_size(name: str) -> PageSize:
    """
    Get page size by name.

    Args:
        name: Page size name (e.g., "a4", "letter").

    Returns:
        PageSize object.

    Raises:
        ValueError: If the name is not a known page size.
    """
    try:
        return PAGE_SIZES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown page size '{name}'. Available page sizes: {', '.join(PAGE_SIZES)}"
        ) from None


@_dataclass
class Dimensions:
    """
    Dimensions stored canonically in millimeters.

    Card and section geometry is declared in millimeters and converted to
    points only when it reaches the canvas.
    """

    width: float  # mm
    height: float  # mm
    x: float = 0.0  # x position (mm)
    y: float = 0.0  # y position (mm)

    def to_points(self) -> PointDims:
        """
        Convert to points (PDF coordinate system).

        Returns:
            Frozen PointDims object.
        """
        return PointDims(
            width=mm_to_points(self.width),
            height=mm_to_points(self.height),
            x=mm_to_points(self.x),
            y=mm_to_points(self.y),
        )


def mm_to_points(mm: float) -> float:
    """
    Convert millimeters to points.

    Args:
        mm: Measurement in millimeters.

    Returns:
        Measurement in points.
    """
    return mm * MM_TO_POINTS


def points_to_mm(points: float) -> float:
    """
    Convert points to millimeters.

    Args:
        points: Measurement in points.

    Returns:
        Measurement in millimeters.
    """
    return points / MM_TO_POINTS
