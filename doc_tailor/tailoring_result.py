"""Tailoring Result Dataclass

Result outputs from the document tailoring pipeline.
"""
from dataclasses import dataclass
from typing import Optional

from .export_artifact import DocumentKind


@dataclass
class TailoredDocuments:
    """The two generated documents awaiting review and export.

    Owned by the caller (UI session state) and passed explicitly into every
    export call.
    """

    cv: str
    cover_letter: str

    def select(self, document: DocumentKind) -> str:
        """Return the text of the active document."""
        if document is DocumentKind.CV:
            return self.cv
        return self.cover_letter


@dataclass
class TailoringResult:
    """Result from the tailoring pipeline.

    Attributes:
        status: Processing status ("completed", "failed")
        status_message: Human-readable status message
        documents: Tailored CV and cover letter (None if generation failed)
        error: Error message if processing failed (None otherwise)
    """

    # Status
    status: str  # "completed", "failed"
    status_message: str

    # Outputs
    documents: Optional[TailoredDocuments] = None

    # Error Handling
    error: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """True if both documents were generated."""
        return self.status == "completed" and self.documents is not None

    @property
    def is_failed(self) -> bool:
        """True if processing failed with an error."""
        return self.status == "failed"
