"""DOCX Writer Module

Serializes flow blocks into a Word document package with python-docx.
"""
import io
from typing import List

from docx import Document

from ..config import HEADING_LEVEL
from ..exceptions import SerializationError
from .layout_types import Block, BodyBlock, HeadingBlock, SpacerBlock


class DocxWriter:
    """Write flow blocks into a single-section DOCX package.

    The document keeps python-docx defaults for page size and margins and
    has no headers, footers or images.
    """

    def __init__(self, heading_level: int = HEADING_LEVEL):
        """
        Initialize DOCX writer.

        Args:
            heading_level: Word heading level used for every HeadingBlock
        """
        self.heading_level = heading_level

    def write(self, blocks: List[Block]) -> bytes:
        """
        Serialize blocks into DOCX bytes.

        Args:
            blocks: Flow blocks in reading order

        Returns:
            DOCX package as bytes

        Raises:
            SerializationError: If python-docx rejects the content
        """
        try:
            doc = Document()

            for block in blocks:
                if isinstance(block, SpacerBlock):
                    doc.add_paragraph("")
                elif isinstance(block, HeadingBlock):
                    doc.add_heading(block.text, level=self.heading_level)
                elif isinstance(block, BodyBlock):
                    paragraph = doc.add_paragraph()
                    paragraph.add_run(block.text)
                else:
                    raise TypeError(f"Unsupported block type: {type(block).__name__}")

            buffer = io.BytesIO()
            doc.save(buffer)
        except Exception as e:
            raise SerializationError("DOCX", e) from e

        return buffer.getvalue()


def serialize_docx(blocks: List[Block]) -> bytes:
    """Helper function to serialize flow blocks with default settings."""
    return DocxWriter().write(blocks)
