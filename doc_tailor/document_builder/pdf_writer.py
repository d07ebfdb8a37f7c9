"""PDF Writer Module

Draws paginated text runs onto a ReportLab canvas. Every run is drawn
verbatim at its pre-computed position; no layout decisions happen here.
"""
import io
from typing import List

from reportlab.pdfgen import canvas as pdfcanvas

from ..exceptions import SerializationError
from .font_manager import FontManager
from .layout_types import Page


class PdfWriter:
    """Write pages of positioned text runs into a PDF document."""

    def __init__(self, font_manager: FontManager):
        """
        Initialize PDF writer.

        Args:
            font_manager: Provides the registered face names for each FontVariant.
                Must be the same manager that measured the runs.
        """
        self.font_manager = font_manager

    def write(self, pages: List[Page]) -> bytes:
        """
        Serialize pages into PDF bytes.

        Args:
            pages: Pages in reading order (at least one)

        Returns:
            PDF document as bytes

        Raises:
            SerializationError: If ReportLab fails to draw or save the document
        """
        buffer = io.BytesIO()

        try:
            c = pdfcanvas.Canvas(buffer)

            for page in pages:
                c.setPageSize((page.width, page.height))
                c.setFillColorRGB(0, 0, 0)
                for run in page.runs:
                    c.setFont(self.font_manager.font_name_for(run.font_variant), run.size_pt)
                    c.drawString(run.x, run.y, run.text)
                c.showPage()

            c.save()
        except Exception as e:
            raise SerializationError("PDF", e) from e

        return buffer.getvalue()


def serialize_pdf(pages: List[Page], font_manager: FontManager) -> bytes:
    """Helper function to serialize pages with a PdfWriter."""
    return PdfWriter(font_manager).write(pages)
