"""Document Builder Package

This package provides the rendering engine that turns generated plain text
into exportable documents:

Core Functions:
- classify_line: Heading / body / blank heuristic shared by both renderers
- build_flow_blocks: One flow block per line, for DOCX output
- render_pages: Word-wrapped, paginated text runs, for PDF output

Core Classes:
- FontManager: Font registration and text measurement (TextMeasurer)
- PaginatedRenderer: Measurement-based wrapping and page breaking
- DocxWriter: Flow blocks → DOCX bytes (python-docx)
- PdfWriter: Pages → PDF bytes (ReportLab canvas)

Value Types:
- HeadingBlock, BodyBlock, SpacerBlock, TextRun, Page, PageGeometry, FontVariant
"""

# Import core functions and classes
from .line_classifier import LineKind, classify_line, split_lines, trim_line
from .layout_types import (
    Block,
    BodyBlock,
    FontVariant,
    HeadingBlock,
    Page,
    PageGeometry,
    SpacerBlock,
    TextMeasurer,
    TextRun,
)
from .font_manager import FontManager
from .flow_builder import build_flow_blocks
from .paginated_renderer import PaginatedRenderer, render_pages
from .docx_writer import DocxWriter, serialize_docx
from .pdf_writer import PdfWriter, serialize_pdf

# Expose public API
__all__ = [
    # Classification
    'LineKind',
    'classify_line',
    'split_lines',
    'trim_line',

    # Value types
    'Block',
    'BodyBlock',
    'FontVariant',
    'HeadingBlock',
    'Page',
    'PageGeometry',
    'SpacerBlock',
    'TextMeasurer',
    'TextRun',

    # Renderers
    'FontManager',
    'build_flow_blocks',
    'PaginatedRenderer',
    'render_pages',

    # Serializers
    'DocxWriter',
    'serialize_docx',
    'PdfWriter',
    'serialize_pdf',
]
