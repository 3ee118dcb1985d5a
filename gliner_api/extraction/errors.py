"""Exception hierarchy shared by the detection pipeline."""
from __future__ import annotations


MODEL_NOT_LOADED_MESSAGE = (
    "PII detection model not loaded. Please ensure model files are available."
)


class ExtractionError(Exception):
    """Base class for failures reported back to API callers."""


class ModelNotLoadedError(ExtractionError):
    """Raised when a request arrives while the model slot is empty."""

    def __init__(self, message: str = MODEL_NOT_LOADED_MESSAGE) -> None:
        super().__init__(message)


class InputError(ExtractionError):
    """The text or the label set could not be turned into engine input."""


class InferenceError(ExtractionError):
    """The engine failed while running a prediction."""


class InitError(ExtractionError):
    """The engine could not be built from the configured artifacts."""
