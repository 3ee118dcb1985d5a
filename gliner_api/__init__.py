"""gliner-api - PII entity detection over HTTP."""
from .api import create_app
from .extraction import DetectionService, ExtractionResult, ModelHandle
from .services.detection import DetectionConfig, build_detection_container

__all__ = [
    "DetectionConfig",
    "DetectionService",
    "ExtractionResult",
    "ModelHandle",
    "build_detection_container",
    "create_app",
]
