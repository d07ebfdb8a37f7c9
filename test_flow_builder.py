"""Tests for flow block building and DOCX serialization."""
import io

import pytest
from docx import Document

from doc_tailor.document_builder import (
    BodyBlock,
    DocxWriter,
    HeadingBlock,
    SpacerBlock,
    build_flow_blocks,
    serialize_docx,
)
from doc_tailor.exceptions import SerializationError


def test_heading_and_body_blocks():
    blocks = build_flow_blocks("Summary:\nBuilt scalable systems.")

    assert blocks == [HeadingBlock("Summary:"), BodyBlock("Built scalable systems.")]


def test_empty_text_has_no_blocks():
    assert build_flow_blocks("") == []


def test_blank_lines_become_spacers():
    blocks = build_flow_blocks("EXPERIENCE\n\n   \nLed the platform team for three years")

    assert blocks == [
        HeadingBlock("EXPERIENCE"),
        SpacerBlock(),
        SpacerBlock(),
        BodyBlock("Led the platform team for three years"),
    ]


def test_block_count_matches_line_count():
    text = "Jane Doe\n\nSummary:\nEngineer with ten years of experience.\n\n\nSKILLS\nPython, Go\n"

    assert len(build_flow_blocks(text)) == len(text.split("\n"))


def test_body_block_keeps_raw_line():
    line = "  - Reduced latency by 40% across  services  "

    assert build_flow_blocks(line) == [BodyBlock(line)]


def _read_docx(data: bytes):
    return Document(io.BytesIO(data))


def test_docx_paragraph_styles():
    blocks = build_flow_blocks("Summary:\nBuilt scalable systems.\n\nSKILLS")

    doc = _read_docx(serialize_docx(blocks))
    paragraphs = doc.paragraphs

    assert [p.text for p in paragraphs] == ["Summary:", "Built scalable systems.", "", "SKILLS"]
    assert paragraphs[0].style.name == "Heading 2"
    assert paragraphs[1].style.name == "Normal"
    assert len(paragraphs[1].runs) == 1
    assert paragraphs[3].style.name == "Heading 2"


def test_docx_single_section_without_images():
    doc = _read_docx(serialize_docx([BodyBlock("Hello")]))

    assert len(doc.sections) == 1
    assert len(doc.inline_shapes) == 0


def test_docx_empty_document_is_valid():
    doc = _read_docx(serialize_docx([]))

    assert doc.paragraphs == [] or all(p.text == "" for p in doc.paragraphs)


def test_docx_custom_heading_level():
    doc = _read_docx(DocxWriter(heading_level=1).write([HeadingBlock("Education")]))

    assert doc.paragraphs[-1].style.name == "Heading 1"


def test_docx_rejects_control_characters():
    with pytest.raises(SerializationError) as exc_info:
        serialize_docx([BodyBlock("bad \x00 text")])

    assert exc_info.value.format_name == "DOCX"
