"""Image processing utilities using Pillow."""

from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from PIL import Image, ImageStat
from reportlab.lib.utils import ImageReader

from timelinegen.utils.color import NormalizedRGB, hex_to_rgb, is_dark, rgb_to_hex

SUPPORTED_IMAGE_SUFFIXES = (".jpg", ".jpeg", ".png")


@dataclass(frozen=True)
class AverageColor:
    """Average color of an image, used as the card background."""

    hex: str
    is_dark: bool

    @property
    def rgb(self) -> NormalizedRGB:
        return hex_to_rgb(self.hex)

    @classmethod
    def from_hex(cls, hex_color: str) -> "AverageColor":
        rgb = hex_to_rgb(hex_color)
        channels = (round(rgb.r * 255), round(rgb.g * 255), round(rgb.b * 255))
        return cls(hex=rgb_to_hex(*channels), is_dark=is_dark(*channels))


WHITE_BACKGROUND = AverageColor.from_hex("#FFFFFF")


def load_card_image(path: Path) -> Image.Image:
    """
    Load a card image from disk.

    Args:
        path: Image file path.

    Returns:
        PIL Image in RGB mode.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a JPEG or PNG.
    """
    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")
    if path.suffix.lower() not in SUPPORTED_IMAGE_SUFFIXES:
        raise ValueError(
            f"Unsupported image format for file: {path}. "
            f"Supported formats are {', '.join(SUPPORTED_IMAGE_SUFFIXES)}"
        )

    with Image.open(path) as img:
        img.load()
        return img.convert("RGB") if img.mode != "RGB" else img.copy()


def average_color(image: Image.Image) -> AverageColor:
    """
    Compute the mean color of an image.

    Args:
        image: PIL Image.

    Returns:
        AverageColor with hex value and dark/light classification.
    """
    if image.mode != "RGB":
        image = image.convert("RGB")
    r, g, b = (round(channel) for channel in ImageStat.Stat(image).mean[:3])
    return AverageColor(hex=rgb_to_hex(r, g, b), is_dark=is_dark(r, g, b))


def scale_to_fit(width: float, height: float, max_width: float, max_height: float) -> tuple[float, float]:
    """
    Scale a box down (never up) to fit inside a bounding box, keeping aspect.

    Args:
        width: Original width.
        height: Original height.
        max_width: Available width.
        max_height: Available height.

    Returns:
        (width, height) after scaling.
    """
    scale = min(max_width / width, max_height / height, 1.0)
    return (width * scale, height * scale)


def pil_to_image_reader(image: Image.Image) -> ImageReader:
    """
    Convert a PIL Image to ReportLab ImageReader.

    Args:
        image: PIL Image object to convert.

    Returns:
        ImageReader object ready for canvas.drawImage().
    """
    img_buffer = BytesIO()
    image.save(img_buffer, format="PNG")
    img_buffer.seek(0)
    return ImageReader(img_buffer)
