"""Request and response models exposed by the detection API."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from gliner_api.extraction import EntitySpan, ExtractionResult


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform envelope returned by every API endpoint."""

    success: bool
    data: T | None = None
    message: str | None = None

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, message=message)


class HealthResponse(BaseModel):
    status: str
    message: str


class DetectRequest(BaseModel):
    """Text submitted for PII detection."""

    text: str


class EntityResponse(BaseModel):
    text: str
    label: str
    sequence: int
    probability: float

    @classmethod
    def from_dataclass(cls, span: EntitySpan) -> "EntityResponse":
        return cls(
            text=span.text,
            label=span.label,
            sequence=span.sequence,
            probability=span.probability,
        )


class ExtractionResultResponse(BaseModel):
    text: str
    entities: list[EntityResponse]
    total_entities: int

    @classmethod
    def from_dataclass(cls, result: ExtractionResult) -> "ExtractionResultResponse":
        return cls(
            text=result.text,
            entities=[EntityResponse.from_dataclass(span) for span in result.entities],
            total_entities=result.total_entities,
        )


__all__ = [
    "ApiResponse",
    "DetectRequest",
    "EntityResponse",
    "ExtractionResultResponse",
    "HealthResponse",
]
