"""PII detection service: container, schemas and routes."""

from .container import DetectionConfig, DetectionContainer, build_detection_container

__all__ = ["DetectionConfig", "DetectionContainer", "build_detection_container"]
