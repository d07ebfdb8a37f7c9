"""Custom Exception Hierarchy

Exception hierarchy for doc-tailor providing granular exception types for
the generation, rendering and export steps.
"""


class DocTailorError(Exception):
    """Base exception for all doc-tailor errors.

    This is the root of the exception hierarchy. Catching this exception
    will catch all custom exceptions from the doc-tailor application.
    """
    pass


# Validation Errors
class ValidationError(DocTailorError):
    """Raised when input validation fails."""
    pass


class InvalidConfigurationError(ValidationError):
    """Raised when configuration parameters are invalid."""
    pass


# Rendering Errors
class RenderingError(DocTailorError):
    """Base class for document rendering and export errors."""
    pass


class FontError(RenderingError):
    """Raised when font setup or registration fails."""
    pass


class MeasurementError(RenderingError):
    """Raised when the measurer cannot size a text/font/size combination."""

    def __init__(self, text: str, font_name: str, reason: str):
        self.text = text
        self.font_name = font_name
        self.reason = reason
        preview = text if len(text) <= 40 else text[:40] + "..."
        super().__init__(
            f"Cannot measure '{preview}' in font '{font_name}': {reason}"
        )


class SerializationError(RenderingError):
    """Raised when packaging a document into its binary format fails.

    The message carries the underlying error verbatim.
    """

    def __init__(self, format_name: str, original_exception: Exception):
        self.format_name = format_name
        self.original_exception = original_exception
        super().__init__(
            f"Failed to serialize {format_name} document: {str(original_exception)}"
        )


# Generation Errors
class GenerationError(DocTailorError):
    """Base class for language model generation errors."""
    pass


class GenerationAPIError(GenerationError):
    """Raised when the generation API request fails."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(f"Generation API error ({status_code}): {message}")


class GenerationAuthenticationError(GenerationError):
    """Raised when the generation API key is missing or rejected."""

    def __init__(self, message: str = None):
        super().__init__(
            message or "Generation API authentication failed. Please check OPENAI_API_KEY."
        )


class GenerationTimeoutError(GenerationError):
    """Raised when a generation request exceeds its time budget."""

    def __init__(self, timeout_seconds: int):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Generation request timed out after {timeout_seconds} seconds"
        )


# Pipeline Errors
class PipelineError(DocTailorError):
    """Base class for pipeline orchestration errors."""
    pass


class PipelineStepError(PipelineError):
    """Raised when a specific pipeline step fails.

    This wraps the underlying exception while preserving the pipeline context.
    """

    def __init__(self, step_name: str, original_exception: Exception):
        self.step_name = step_name
        self.original_exception = original_exception
        super().__init__(
            f"Pipeline step '{step_name}' failed: {str(original_exception)}"
        )
