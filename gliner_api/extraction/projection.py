"""Projection of raw engine output into API results."""
from __future__ import annotations

from .models import ExtractionResult, RawOutput


def project(raw: RawOutput, original_text: str) -> ExtractionResult:
    """Flatten every span of every sequence, preserving emission order."""

    entities = tuple(span for sequence in raw.spans for span in sequence)
    return ExtractionResult(text=original_text, entities=entities)


__all__ = ["project"]
