"""Configuration Constants

Constants for document tailoring and export configuration.
"""
import os

from reportlab.lib.pagesizes import A4

# Page Layout (points)
DEFAULT_PAGE_SIZE = A4
DEFAULT_MARGIN = 50

# Typography
DEFAULT_FONT_SIZE = 11
HEADING_SIZE_DELTA = 2  # Headings are body size + 2 (11pt → 13pt)
LINE_HEIGHT_FACTOR = 1.5  # Same leading for headings and body lines

# Standard PDF faces (WinAnsi encoded, no Unicode coverage beyond cp1252)
STANDARD_FONT_REGULAR = "Times-Roman"
STANDARD_FONT_BOLD = "Times-Bold"
STANDARD_FONT_ENCODING = "cp1252"

# Unicode TrueType faces, searched in order when unicode fonts are requested
FONTS_DIR = os.path.join(os.path.dirname(__file__), "..", "fonts")
UNICODE_FONT_NAME = "DejaVuSans"
UNICODE_FONT_NAME_BOLD = "DejaVuSans-Bold"
UNICODE_FONT_PATHS = [
    os.path.join(FONTS_DIR, "DejaVuSans.ttf"),
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/Library/Fonts/DejaVuSans.ttf",  # macOS
]
UNICODE_BOLD_FONT_PATHS = [
    os.path.join(FONTS_DIR, "DejaVuSans-Bold.ttf"),
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "/Library/Fonts/DejaVuSans-Bold.ttf",
]

# Line Classification
HEADING_MAX_LENGTH = 50  # Trimmed headings must be shorter than this
TITLE_CASE_PATTERN = r"[A-Z][a-z]+( [A-Z][a-z]+)*"

# Flow (DOCX) output
HEADING_LEVEL = 2

# Export Artifacts
DOCUMENT_BASE_NAMES = {
    "cv": "tailored-cv",
    "cover_letter": "tailored-cover-letter",
}
EXPORT_EXTENSIONS = {
    "flow": "docx",
    "paginated": "pdf",
}
EXPORT_MIME_TYPES = {
    "flow": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "paginated": "application/pdf",
}

# Progress Steps (for UI progress tracking)
PROGRESS_STEPS = {
    "VALIDATE": 0.05,
    "TAILOR_CV": 0.10,
    "TAILOR_COVER_LETTER": 0.55,
    "COMPLETE": 1.0,
}

# Generation (hosted chat-completion model)
DEFAULT_API_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7
GENERATION_TIMEOUT_SECONDS = 60
MISSING_COVER_LETTER_TEXT = "No cover letter provided"
