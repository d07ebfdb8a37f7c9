"""Line Classification Module

Heuristic heading detection for generated plain text. Both the flow (DOCX)
and the paginated (PDF) renderers classify lines through this module so the
two outputs agree on which lines are headings.
"""
import re
from enum import Enum
from typing import List

from ..config import HEADING_MAX_LENGTH, TITLE_CASE_PATTERN

_TITLE_CASE_RE = re.compile(TITLE_CASE_PATTERN)
# Whitespace plus the byte order mark, which str.strip() keeps
_EDGE_SPACE_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+\Z")


class LineKind(Enum):
    """Structural role of a single source line."""

    HEADING = "heading"
    BODY = "body"
    BLANK = "blank"


def split_lines(source_text: str) -> List[str]:
    """
    Split source text into lines on newline characters.

    The empty string has no lines; anything else keeps every line, including
    blank ones, so vertical rhythm survives rendering.

    Args:
        source_text: Generated plain text

    Returns:
        List of raw lines in original order
    """
    if not source_text:
        return []
    return source_text.split("\n")


def trim_line(line: str) -> str:
    """Strip surrounding whitespace and byte order marks from a line."""
    return _EDGE_SPACE_RE.sub("", line)


def classify_line(line: str) -> LineKind:
    """
    Classify a line as heading, body, or blank.

    A non-blank line is a heading when its trimmed form is shorter than
    HEADING_MAX_LENGTH characters and at least one of these holds:
    - it ends with a colon ("Experience:")
    - it has no lower-case letters ("SKILLS", but also "2021 - 2024")
    - it is Title Case words only ("Work Experience")

    Args:
        line: Raw line without its newline

    Returns:
        LineKind for the line
    """
    trimmed = trim_line(line)
    if not trimmed:
        return LineKind.BLANK

    if len(trimmed) >= HEADING_MAX_LENGTH:
        return LineKind.BODY

    if (
        trimmed.endswith(":")
        or line == line.upper()
        or _TITLE_CASE_RE.fullmatch(trimmed)
    ):
        return LineKind.HEADING

    return LineKind.BODY
