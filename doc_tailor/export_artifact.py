"""Export Artifact Dataclass

Export kinds, document kinds and the binary artifact produced by one export.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .config import DOCUMENT_BASE_NAMES, EXPORT_EXTENSIONS, EXPORT_MIME_TYPES
from .exceptions import InvalidConfigurationError


class ExportKind(Enum):
    """Output format family: reflowable DOCX or fixed-layout PDF."""

    FLOW = "flow"
    PAGINATED = "paginated"

    @property
    def extension(self) -> str:
        return EXPORT_EXTENSIONS[self.value]

    @property
    def mime_type(self) -> str:
        return EXPORT_MIME_TYPES[self.value]

    @classmethod
    def parse(cls, value: Union["ExportKind", str]) -> "ExportKind":
        """
        Resolve an ExportKind from an enum member, kind name or file extension.

        Args:
            value: ExportKind, "flow"/"paginated", or "docx"/"pdf"

        Returns:
            Matching ExportKind

        Raises:
            InvalidConfigurationError: If the value names no known kind
        """
        if isinstance(value, cls):
            return value
        for kind in cls:
            if value in (kind.value, kind.extension):
                return kind
        raise InvalidConfigurationError(f"Unknown export kind: {value!r}")


class DocumentKind(Enum):
    """Which of the two tailored documents is active."""

    CV = "cv"
    COVER_LETTER = "cover_letter"

    @property
    def base_name(self) -> str:
        """Deterministic download file name without extension."""
        return DOCUMENT_BASE_NAMES[self.value]

    @classmethod
    def parse(cls, value: Union["DocumentKind", str]) -> "DocumentKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidConfigurationError(f"Unknown document kind: {value!r}") from None


@dataclass
class ExportArtifact:
    """Binary document produced by a single export call.

    Attributes:
        data: Serialized document bytes
        filename: Download file name including extension
        mime_type: MIME type of the document
    """

    data: bytes
    filename: str
    mime_type: str

    @property
    def size_bytes(self) -> int:
        return len(self.data)
