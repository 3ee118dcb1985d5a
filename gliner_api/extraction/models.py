"""Dataclasses shared by the detection pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field


DEFAULT_LABELS: tuple[str, ...] = (
    "person",
    "email",
    "phone",
    "address",
    "organization",
)


@dataclass(frozen=True, slots=True)
class EntitySpan:
    """Entity detected by the engine inside one input sequence."""

    text: str
    label: str
    sequence: int
    probability: float


@dataclass(frozen=True, slots=True)
class ModelInput:
    """Text sequences and labels in the shape expected by the engine."""

    texts: tuple[str, ...]
    labels: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RawOutput:
    """Spans returned by the engine, one tuple per input sequence."""

    spans: tuple[tuple[EntitySpan, ...], ...] = ()


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Flattened detection output returned to API callers."""

    text: str
    entities: tuple[EntitySpan, ...] = field(default_factory=tuple)

    @property
    def total_entities(self) -> int:
        return len(self.entities)
