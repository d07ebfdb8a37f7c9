"""Flow Builder Module

Turns generated plain text into an ordered sequence of flow blocks. Layout
(wrapping, pagination) is left to the word processor that opens the DOCX.
"""
from typing import List

from .layout_types import Block, BodyBlock, HeadingBlock, SpacerBlock
from .line_classifier import LineKind, classify_line, split_lines


def build_flow_blocks(source_text: str) -> List[Block]:
    """
    Build one flow block per source line, in original order.

    - Blank lines → SpacerBlock (keeps vertical rhythm)
    - Heading lines → HeadingBlock
    - Everything else → BodyBlock with the raw line as its only run

    Args:
        source_text: Generated plain text

    Returns:
        List of blocks; empty for empty input
    """
    blocks: List[Block] = []

    for line in split_lines(source_text):
        kind = classify_line(line)
        if kind is LineKind.BLANK:
            blocks.append(SpacerBlock())
        elif kind is LineKind.HEADING:
            blocks.append(HeadingBlock(line))
        else:
            blocks.append(BodyBlock(line))

    return blocks
