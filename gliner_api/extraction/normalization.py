"""Conversion of raw request text into engine input."""
from __future__ import annotations

from typing import Sequence

from .errors import InputError
from .models import ModelInput


def normalize(text: str, labels: Sequence[str]) -> ModelInput:
    """Wrap ``text`` and ``labels`` into a single-sequence :class:`ModelInput`.

    Raises :class:`InputError` with the underlying cause when the labels are
    unusable or the text cannot be encoded for the tokenizer.
    """

    if not isinstance(text, str):
        raise InputError(f"Text must be a string, got {type(text).__name__}")
    validated_labels = _validate_labels(labels)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InputError(f"Invalid input text: {exc}") from exc
    return ModelInput(texts=(text,), labels=validated_labels)


def _validate_labels(labels: Sequence[str]) -> tuple[str, ...]:
    validated = tuple(labels)
    if not validated:
        raise InputError("At least one entity label is required")
    for label in validated:
        if not isinstance(label, str) or not label.strip():
            raise InputError(f"Invalid entity label: {label!r}")
    return validated


__all__ = ["normalize"]
