"""Layout Types Module

Value types shared by the flow and paginated renderers:
- Flow blocks: HeadingBlock, BodyBlock, SpacerBlock
- Fixed-layout output: TextRun, Page
- PageGeometry with the usable content box
- TextMeasurer protocol consumed by the paginated renderer
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Protocol, Union

from ..config import DEFAULT_PAGE_SIZE, DEFAULT_MARGIN
from ..exceptions import InvalidConfigurationError


class FontVariant(Enum):
    """Font face variant used for a run of text."""

    REGULAR = "regular"
    BOLD = "bold"


@dataclass(frozen=True)
class HeadingBlock:
    """Heading paragraph of a flow document."""

    text: str


@dataclass(frozen=True)
class BodyBlock:
    """Plain paragraph holding the raw line as a single run."""

    text: str


@dataclass(frozen=True)
class SpacerBlock:
    """Empty paragraph standing in for a blank source line."""


Block = Union[HeadingBlock, BodyBlock, SpacerBlock]


@dataclass(frozen=True)
class TextRun:
    """One positioned, stylistically uniform span of text on a page.

    Attributes:
        text: Text drawn verbatim
        x: Left edge in layout units
        y: Baseline in layout units (origin at bottom-left, like ReportLab)
        font_variant: Regular or bold face
        size_pt: Font size in points
    """

    text: str
    x: float
    y: float
    font_variant: FontVariant
    size_pt: float


@dataclass
class Page:
    """Fixed-size page holding text runs in reading order."""

    width: float
    height: float
    runs: List[TextRun] = field(default_factory=list)


@dataclass(frozen=True)
class PageGeometry:
    """Page size and uniform margin for paginated rendering.

    Attributes:
        width: Page width in layout units (default A4 width in points)
        height: Page height in layout units (default A4 height in points)
        margin: Margin applied on all four sides
    """

    width: float = DEFAULT_PAGE_SIZE[0]
    height: float = DEFAULT_PAGE_SIZE[1]
    margin: float = DEFAULT_MARGIN

    def __post_init__(self):
        """Validate that the margins leave a usable content box."""
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfigurationError(
                f"Page size must be positive, got {self.width}x{self.height}"
            )
        if self.margin < 0:
            raise InvalidConfigurationError(
                f"margin must not be negative, got {self.margin}"
            )
        if 2 * self.margin >= self.width or 2 * self.margin >= self.height:
            raise InvalidConfigurationError(
                f"margin {self.margin} leaves no content area on a "
                f"{self.width}x{self.height} page"
            )

    @property
    def content_width(self) -> float:
        """Usable width between the left and right margins."""
        return self.width - 2 * self.margin

    @property
    def content_height(self) -> float:
        """Usable height between the top and bottom margins."""
        return self.height - 2 * self.margin

    @property
    def top(self) -> float:
        """Baseline of the first line on a fresh page."""
        return self.height - self.margin


class TextMeasurer(Protocol):
    """Capability reporting the rendered width of text."""

    def width_of(self, text: str, font_variant: FontVariant, size_pt: float) -> float:
        ...
