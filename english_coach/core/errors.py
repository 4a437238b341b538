# english_coach/core/errors.py
from typing import Optional


class ExerciseServiceError(Exception):
    """Base class for failures that are turned into error-shaped JSON responses."""


class ConfigurationError(ExerciseServiceError):
    """Gemini credentials are missing or the SDK could not be configured."""


class UpstreamError(ExerciseServiceError):
    """The Gemini call failed or returned no usable completion."""


class MalformedResponseError(ExerciseServiceError):
    """A completion could not be parsed into the expected JSON shape."""

    def __init__(self, message: str, raw_text: Optional[str] = None):
        super().__init__(message)
        self.raw_text = raw_text
