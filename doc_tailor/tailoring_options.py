"""Tailoring Options Dataclass

Inputs for the document tailoring pipeline.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class TailoringOptions:
    """Source documents submitted for tailoring.

    Attributes:
        cv: Original CV text (required)
        job_description: Target job description text (required)
        cover_letter: Original cover letter text (optional)
    """

    cv: str
    job_description: str
    cover_letter: Optional[str] = None

    def __post_init__(self):
        """Normalize missing inputs to empty strings; the pipeline validates."""
        self.cv = self.cv or ""
        self.job_description = self.job_description or ""
        self.cover_letter = self.cover_letter or None
