"""Paginated Renderer Module

Lays generated plain text onto fixed-size pages:
- Heading detection per line (bold, body size + 2)
- Greedy word wrapping with measured text widths
- Page breaks when the cursor drops below the bottom margin
- Half-height spacers for blank lines

Coordinates follow ReportLab conventions: origin at the bottom-left corner,
y is the text baseline and decreases as lines are added.
"""
from typing import List, Optional

from ..config import DEFAULT_FONT_SIZE, HEADING_SIZE_DELTA, LINE_HEIGHT_FACTOR
from .layout_types import FontVariant, Page, PageGeometry, TextMeasurer, TextRun
from .line_classifier import LineKind, classify_line, split_lines


class PaginatedRenderer:
    """Render plain text into positioned text runs on fixed pages.

    The renderer never touches a font library directly: every width comes
    from the injected TextMeasurer, so the layout can be tested with a fake
    fixed-width measurer.

    Attributes:
        font_size: Body font size in points (headings use font_size + 2)
        line_height: Vertical advance per wrapped line, for all line kinds
    """

    def __init__(
        self,
        font_size: float = DEFAULT_FONT_SIZE,
        line_height_factor: float = LINE_HEIGHT_FACTOR,
    ):
        """
        Initialize paginated renderer.

        Args:
            font_size: Body font size in points
            line_height_factor: Line height as a multiple of the body font size
        """
        self.font_size = font_size
        self.heading_size = font_size + HEADING_SIZE_DELTA
        self.line_height = font_size * line_height_factor

        self._pages: List[Page] = []
        self._geometry: Optional[PageGeometry] = None
        self._y = 0.0

    def render(
        self,
        source_text: str,
        measurer: TextMeasurer,
        geometry: Optional[PageGeometry] = None,
    ) -> List[Page]:
        """
        Lay out source text line by line.

        Args:
            source_text: Generated plain text
            measurer: Capability returning text widths in layout units
            geometry: Page size and margin (defaults to A4 with 50pt margins)

        Returns:
            Pages in reading order; exactly one empty page for blank input

        Raises:
            MeasurementError: If the measurer cannot size a candidate line
        """
        self._geometry = geometry or PageGeometry()
        self._pages = []
        self._new_page()

        for line in split_lines(source_text):
            kind = classify_line(line)

            if kind is LineKind.BLANK:
                # Spacers never break pages; the next text line checks overflow
                self._y -= self.line_height / 2
                continue

            self._break_page_if_needed()
            self._render_line(line, kind, measurer)

        pages = self._pages
        self._pages = []
        return pages

    def _render_line(self, line: str, kind: LineKind, measurer: TextMeasurer):
        """Word-wrap one non-blank line into the content width."""
        is_heading = kind is LineKind.HEADING
        font_variant = FontVariant.BOLD if is_heading else FontVariant.REGULAR
        size = self.heading_size if is_heading else self.font_size
        max_width = self._geometry.content_width

        current_line = ""
        for word in line.split(" "):
            test_line = f"{current_line} {word}" if current_line else word
            text_width = measurer.width_of(test_line, font_variant, size)

            if text_width > max_width and current_line:
                self._emit(current_line, font_variant, size)
                current_line = word
                self._break_page_if_needed()
            else:
                # A lone word wider than the content box is kept whole
                current_line = test_line

        if current_line:
            self._emit(current_line, font_variant, size)

    def _emit(self, text: str, font_variant: FontVariant, size: float):
        """Place a run at the left margin on the current baseline and advance."""
        run = TextRun(
            text=text,
            x=self._geometry.margin,
            y=self._y,
            font_variant=font_variant,
            size_pt=size,
        )
        self._pages[-1].runs.append(run)
        self._y -= self.line_height

    def _break_page_if_needed(self):
        if self._y < self._geometry.margin:
            self._new_page()

    def _new_page(self):
        self._pages.append(Page(width=self._geometry.width, height=self._geometry.height))
        self._y = self._geometry.top


def render_pages(
    source_text: str,
    measurer: TextMeasurer,
    geometry: Optional[PageGeometry] = None,
    font_size: float = DEFAULT_FONT_SIZE,
) -> List[Page]:
    """Helper function to render text with a fresh PaginatedRenderer."""
    return PaginatedRenderer(font_size=font_size).render(source_text, measurer, geometry)
