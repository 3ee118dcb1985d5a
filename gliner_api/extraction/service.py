"""Per-request orchestration of the detection pipeline."""
from __future__ import annotations

import logging
from typing import Sequence

from .errors import ExtractionError, ModelNotLoadedError
from .inference import InferenceInvoker
from .model_handle import ModelHandle
from .models import DEFAULT_LABELS, ExtractionResult
from .normalization import normalize
from .projection import project


class DetectionService:
    """Coordinates model check, normalization, inference and projection."""

    def __init__(
        self,
        *,
        handle: ModelHandle,
        labels: Sequence[str] = DEFAULT_LABELS,
    ) -> None:
        self._handle = handle
        self._labels = tuple(labels)
        self._invoker = InferenceInvoker(handle)
        self._log = logging.getLogger("gliner_api.detection")

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    @property
    def model_loaded(self) -> bool:
        return self._handle.loaded

    async def detect(self, text: str) -> ExtractionResult:
        """Return the entities found in ``text``.

        Raises a subclass of :class:`ExtractionError` describing why the
        request was rejected.
        """

        try:
            if not self._handle.loaded:
                raise ModelNotLoadedError()
            model_input = normalize(text, self._labels)
            raw = await self._invoker.run_async(model_input)
        except ExtractionError as exc:
            self._log.warning("Detection rejected (%s): %s", type(exc).__name__, exc)
            raise
        result = project(raw, text)
        self._log.debug("Detected %d entities", result.total_entities)
        return result


__all__ = ["DetectionService"]
