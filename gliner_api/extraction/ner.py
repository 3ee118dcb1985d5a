"""Protocols and adapters for the GLiNER inference engine."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from .errors import InitError
from .models import EntitySpan, ModelInput, RawOutput


DEFAULT_THRESHOLD = 0.5
GLINER_CONFIG_FILE = "gliner_config.json"


class InferenceEngine(Protocol):
    """Interface for a span-labelling engine."""

    def inference(self, model_input: ModelInput) -> RawOutput:
        """Return the spans detected for every sequence of ``model_input``."""


class GlinerEngine(InferenceEngine):
    """:class:`InferenceEngine` backed by a ``gliner.GLiNER`` model."""

    def __init__(self, model: Any, *, threshold: float = DEFAULT_THRESHOLD) -> None:
        self._model = model
        self._threshold = threshold

    def inference(self, model_input: ModelInput) -> RawOutput:
        sequences: list[tuple[EntitySpan, ...]] = []
        for index, text in enumerate(model_input.texts):
            predictions = self._model.predict_entities(
                text, list(model_input.labels), threshold=self._threshold
            )
            sequences.append(
                tuple(
                    EntitySpan(
                        text=item["text"],
                        label=item["label"],
                        sequence=index,
                        probability=float(item["score"]),
                    )
                    for item in predictions
                )
            )
        return RawOutput(spans=tuple(sequences))


def load_gliner_engine(
    *,
    tokenizer_path: Path,
    model_path: Path,
    threshold: float = DEFAULT_THRESHOLD,
    **options: Any,
) -> GlinerEngine:
    """Build a :class:`GlinerEngine` from a local ONNX export.

    Both artifacts must live in the same directory, next to the
    ``gliner_config.json`` shipped with the export.
    """

    config_path = model_path.parent / GLINER_CONFIG_FILE
    for artifact in (tokenizer_path, model_path, config_path):
        if not artifact.is_file():
            raise InitError(f"Model artifact not found: {artifact}")
    if tokenizer_path.parent != model_path.parent:
        raise InitError(
            f"Tokenizer and model must share a directory: {tokenizer_path.parent} != {model_path.parent}"
        )

    from gliner import GLiNER

    model = GLiNER.from_pretrained(
        str(model_path.parent),
        load_onnx_model=True,
        onnx_model_file=model_path.name,
        local_files_only=True,
        **options,
    )
    return GlinerEngine(model, threshold=threshold)


__all__ = [
    "DEFAULT_THRESHOLD",
    "GLINER_CONFIG_FILE",
    "GlinerEngine",
    "InferenceEngine",
    "load_gliner_engine",
]
