"""Shared pytest fixtures."""
import pytest

from doc_tailor.document_builder import FontVariant


class FixedWidthMeasurer:
    """Measures every character as char_width units, regardless of font and size.

    Records each call so tests can check which faces and sizes were requested.
    """

    def __init__(self, char_width: float = 1.0):
        self.char_width = char_width
        self.calls = []

    def width_of(self, text: str, font_variant: FontVariant, size_pt: float) -> float:
        self.calls.append((text, font_variant, size_pt))
        return len(text) * self.char_width


@pytest.fixture
def measurer():
    return FixedWidthMeasurer()


@pytest.fixture
def measurer_factory():
    return FixedWidthMeasurer
