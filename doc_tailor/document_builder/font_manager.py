"""Font Manager Module

Handles font registration, text measurement, and font fallback chains.
"""
import os
from typing import List, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..config import (
    STANDARD_FONT_REGULAR,
    STANDARD_FONT_BOLD,
    STANDARD_FONT_ENCODING,
    UNICODE_FONT_NAME,
    UNICODE_FONT_NAME_BOLD,
    UNICODE_FONT_PATHS,
    UNICODE_BOLD_FONT_PATHS,
)
from ..exceptions import FontError, MeasurementError
from .layout_types import FontVariant


class FontManager:
    """Manages font registration and measures text for the paginated renderer.

    This class handles:
    - Regular and bold variants of one typeface (Times by default)
    - Optional Unicode TrueType faces (DejaVu Sans) for non-Latin text
    - Font registration with ReportLab
    - Text width measurement (the TextMeasurer capability)

    Attributes:
        font_name: Name of the registered regular font (e.g., 'Times-Roman' or 'DejaVuSans')
        font_name_bold: Name of the registered bold font (e.g., 'Times-Bold' or 'DejaVuSans-Bold')
        is_unicode: True when TrueType faces are in use
    """

    def __init__(
        self,
        unicode_fonts: bool = False,
        regular_font_path: Optional[str] = None,
        bold_font_path: Optional[str] = None,
    ):
        """
        Initialize FontManager and register the requested faces.

        Args:
            unicode_fonts: If True, search bundled and system paths for DejaVu Sans
            regular_font_path: Optional explicit TrueType file for the regular face
            bold_font_path: Optional explicit TrueType file for the bold face

        Raises:
            FontError: If an explicitly given font file cannot be registered
        """
        self.font_name = STANDARD_FONT_REGULAR
        self.font_name_bold = STANDARD_FONT_BOLD
        self.is_unicode = False

        if regular_font_path:
            self._register_explicit_fonts(regular_font_path, bold_font_path)
        elif unicode_fonts:
            self._setup_unicode_fonts()

        print(f"DEBUG: Fonts in use: regular={self.font_name}, bold={self.font_name_bold}")

    def _register_explicit_fonts(self, regular_font_path: str, bold_font_path: Optional[str]):
        """Register caller-supplied TrueType files; bold falls back to regular."""
        self.font_name = self._register_ttf(regular_font_path)
        self.font_name_bold = (
            self._register_ttf(bold_font_path) if bold_font_path else self.font_name
        )
        self.is_unicode = True

    @staticmethod
    def _register_ttf(font_path: str) -> str:
        if not os.path.exists(font_path):
            raise FontError(f"Font file does not exist: {font_path}")

        font_name = os.path.splitext(os.path.basename(font_path))[0]
        try:
            pdfmetrics.registerFont(TTFont(font_name, font_path))
        except Exception as e:
            raise FontError(f"Failed to register font {font_path}: {e}") from e
        return font_name

    def _setup_unicode_fonts(self):
        """
        Register TrueType fonts with Unicode coverage.

        Tries font paths in order of preference:
        1. Bundled DejaVu Sans (in fonts/ directory)
        2. DejaVu Sans (Linux system paths)
        3. DejaVu Sans (macOS)

        Falls back to the standard Times faces if no font is found.
        WARNING: Times only covers the WinAnsi character set!

        Also registers bold variant if available.
        """
        print("DEBUG: Setting up fonts for Unicode support...")
        regular_path = self._register_first(UNICODE_FONT_NAME, UNICODE_FONT_PATHS)

        if regular_path is None:
            print("=" * 60)
            print("WARNING: No Unicode-compatible font found!")
            print("WARNING: Using Times fallback - non-Latin text cannot be exported to PDF!")
            print("WARNING: Install fonts-dejavu-core or add DejaVuSans.ttf to fonts/ directory")
            print("=" * 60)
            return

        self.font_name = UNICODE_FONT_NAME
        self.is_unicode = True

        bold_path = self._register_first(UNICODE_FONT_NAME_BOLD, UNICODE_BOLD_FONT_PATHS)
        if bold_path is None:
            print("=" * 60)
            print("WARNING: Bold font not found, using regular font for headings")
            print("=" * 60)
            self.font_name_bold = self.font_name
        else:
            self.font_name_bold = UNICODE_FONT_NAME_BOLD

    @staticmethod
    def _register_first(font_name: str, font_paths: List[str]) -> Optional[str]:
        """Register the first existing font file under font_name and return its path."""
        for font_path in font_paths:
            print(f"DEBUG: Checking font path: {font_path}")
            if not os.path.exists(font_path):
                continue
            try:
                pdfmetrics.registerFont(TTFont(font_name, font_path))
            except Exception as e:
                print(f"DEBUG: Failed to register font {font_path}: {e}")
                continue
            print(f"DEBUG: Successfully registered font from: {font_path}")
            return font_path
        return None

    def get_font_name(self, bold: bool = False) -> str:
        """
        Get the registered font name.

        Args:
            bold: If True, return the bold variant; otherwise return regular font

        Returns:
            Font name string suitable for use with ReportLab (e.g., 'Times-Roman')
        """
        return self.font_name_bold if bold else self.font_name

    def font_name_for(self, font_variant: FontVariant) -> str:
        """Get the registered font name for a FontVariant."""
        return self.get_font_name(bold=font_variant is FontVariant.BOLD)

    def width_of(self, text: str, font_variant: FontVariant, size_pt: float) -> float:
        """
        Measure the rendered width of text.

        Args:
            text: Text to measure
            font_variant: Regular or bold face
            size_pt: Font size in points

        Returns:
            Width in points

        Raises:
            MeasurementError: If the face cannot render the text
        """
        font_name = self.font_name_for(font_variant)

        if self.is_unicode:
            self._check_glyph_coverage(text, font_name)
        else:
            try:
                text.encode(STANDARD_FONT_ENCODING)
            except UnicodeEncodeError as e:
                raise MeasurementError(
                    text,
                    font_name,
                    f"character {text[e.start]!r} is not supported by the standard font encoding",
                ) from e

        try:
            return pdfmetrics.stringWidth(text, font_name, size_pt)
        except Exception as e:
            raise MeasurementError(text, font_name, str(e)) from e

    @staticmethod
    def _check_glyph_coverage(text: str, font_name: str):
        """
        Reject characters the TrueType face has no glyph for.

        ReportLab measures and draws missing glyphs as blank boxes instead of
        failing, so coverage is checked against the face's cmap up front.

        Raises:
            MeasurementError: On the first character without a glyph
        """
        try:
            char_to_glyph = pdfmetrics.getFont(font_name).face.charToGlyph
        except Exception as e:
            raise MeasurementError(text, font_name, str(e)) from e

        for char in text:
            if ord(char) not in char_to_glyph:
                raise MeasurementError(
                    text,
                    font_name,
                    f"character {char!r} has no glyph in this font",
                )
