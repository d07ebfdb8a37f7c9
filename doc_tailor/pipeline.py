"""Document Tailoring Pipeline

Main orchestration logic for the tailoring workflow.
"""
from typing import Callable, Optional

from .config import MISSING_COVER_LETTER_TEXT, PROGRESS_STEPS
from .exceptions import DocTailorError, PipelineStepError, ValidationError
from .generator import TailoringGenerator
from .tailoring_options import TailoringOptions
from .tailoring_result import TailoredDocuments, TailoringResult


class TailoringPipeline:
    """Document tailoring pipeline orchestrator.

    This class orchestrates the complete tailoring workflow:
    1. Validation - CV and job description are required
    2. CV Generation - rewrite the CV for the job description
    3. Cover Letter Generation - rewrite or write the cover letter

    Attributes:
        generator: Tailoring generator instance
        progress_callback: Optional callback for progress updates (progress, desc)
    """

    def __init__(
        self,
        generator: TailoringGenerator,
        progress_callback: Optional[Callable[[float, str], None]] = None
    ):
        """Initialize pipeline with a generator and optional progress callback.

        Args:
            generator: Collaborator implementing tailor_cv / tailor_cover_letter
            progress_callback: Optional function(progress: float, desc: str) for progress updates
        """
        self.generator = generator
        self.progress = progress_callback or (lambda p, d: None)

    def process(self, options: TailoringOptions) -> TailoringResult:
        """Execute complete tailoring pipeline.

        Args:
            options: Source documents

        Returns:
            TailoringResult with documents and status

        Raises:
            Does not raise - all errors are captured in TailoringResult.error
        """
        try:
            # Step 1: Validation
            self.progress(PROGRESS_STEPS["VALIDATE"], "Validating inputs...")
            self._validate_inputs(options)

            # Step 2: Tailor CV
            self.progress(PROGRESS_STEPS["TAILOR_CV"], "Tailoring CV...")
            tailored_cv = self._run_step(
                "tailor_cv",
                lambda: self.generator.tailor_cv(options.cv, options.job_description),
            )

            # Step 3: Tailor cover letter
            self.progress(PROGRESS_STEPS["TAILOR_COVER_LETTER"], "Tailoring cover letter...")
            tailored_cover_letter = self._run_step(
                "tailor_cover_letter",
                lambda: self.generator.tailor_cover_letter(
                    options.cv,
                    options.cover_letter or MISSING_COVER_LETTER_TEXT,
                    options.job_description,
                ),
            )

            self.progress(PROGRESS_STEPS["COMPLETE"], "Complete!")

            return TailoringResult(
                status="completed",
                status_message="✅ Documents generated!",
                documents=TailoredDocuments(
                    cv=tailored_cv,
                    cover_letter=tailored_cover_letter,
                ),
            )

        except ValidationError as e:
            return TailoringResult(
                status="failed",
                status_message=str(e),
                error=str(e),
            )
        except Exception as e:
            print(f"ERROR: Generating documents failed: {e}")
            return TailoringResult(
                status="failed",
                status_message=f"Failed to generate documents: {str(e)}",
                error=str(e),
            )

    def _validate_inputs(self, options: TailoringOptions):
        """Require non-blank CV and job description.

        Raises:
            ValidationError: If either required input is missing
        """
        if not options.cv.strip() or not options.job_description.strip():
            raise ValidationError("CV and Job Description are required")

    @staticmethod
    def _run_step(step_name: str, step: Callable[[], str]) -> str:
        """Run a generation step, tagging non-library failures with the step name."""
        try:
            return step()
        except DocTailorError:
            raise
        except Exception as e:
            raise PipelineStepError(step_name, e) from e
