"""Inference-serving core of the entity detection service."""
from .errors import (
    MODEL_NOT_LOADED_MESSAGE,
    ExtractionError,
    InferenceError,
    InitError,
    InputError,
    ModelNotLoadedError,
)
from .inference import InferenceInvoker
from .model_handle import ModelHandle
from .models import DEFAULT_LABELS, EntitySpan, ExtractionResult, ModelInput, RawOutput
from .ner import GlinerEngine, InferenceEngine, load_gliner_engine
from .normalization import normalize
from .projection import project
from .service import DetectionService

__all__ = [
    "DEFAULT_LABELS",
    "DetectionService",
    "EntitySpan",
    "ExtractionError",
    "ExtractionResult",
    "GlinerEngine",
    "InferenceEngine",
    "InferenceError",
    "InferenceInvoker",
    "InitError",
    "InputError",
    "MODEL_NOT_LOADED_MESSAGE",
    "ModelHandle",
    "ModelInput",
    "ModelNotLoadedError",
    "RawOutput",
    "load_gliner_engine",
    "normalize",
    "project",
]
