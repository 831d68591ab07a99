"""
Core Exceptions
Standardized base exceptions for story generation.
"""


class StoryReelError(Exception):
    """Base exception for all application errors."""
    pass


class PipelineError(StoryReelError):
    """Base exception for generation pipeline errors."""
    pass


class InfrastructureError(StoryReelError):
    """Base exception for infrastructure errors (credentials, Gemini API, downloads)."""
    pass


class MissingCredentialError(InfrastructureError):
    """No API key could be resolved from the environment or local settings."""

    def __init__(self, message: str = "API Key is missing. Please enter it in the settings screen."):
        super().__init__(message)


class PermissionDeniedError(InfrastructureError):
    """Gemini rejected the call with a 403 (paid tier / billing required)."""
    pass


class EmptyResponseError(PipelineError):
    """The endpoint returned no usable payload."""
    pass


class MalformedResponseError(PipelineError):
    """A payload was returned but could not be parsed or validated."""
    pass


class GenerationFailedError(PipelineError):
    """The model answered but produced no image, audio or video reference."""
    pass


class VideoDownloadError(GenerationFailedError):
    """The generated video asset could not be fetched."""
    pass


class VideoTimeoutError(GenerationFailedError):
    """The video operation did not finish within the configured wait."""

    def __init__(self, waited_seconds: float, max_wait: float):
        self.waited_seconds = waited_seconds
        self.max_wait = max_wait
        super().__init__(
            f"Video generation did not complete within {max_wait:.0f}s "
            f"(waited {waited_seconds:.0f}s)"
        )
