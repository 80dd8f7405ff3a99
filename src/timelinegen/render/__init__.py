"""Rendering to PDF."""

from timelinegen.render.pdf import PDFRenderer

__all__ = ["PDFRenderer"]
