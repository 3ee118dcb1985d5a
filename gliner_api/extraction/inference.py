"""Serialized execution of inference calls against the shared engine."""
from __future__ import annotations

import asyncio
import logging

from fastapi.concurrency import run_in_threadpool

from .errors import InferenceError
from .model_handle import ModelHandle
from .models import ModelInput, RawOutput


class InferenceInvoker:
    """Runs one inference call at a time on the engine held by a handle."""

    def __init__(self, handle: ModelHandle) -> None:
        self._handle = handle
        self._queue_lock = asyncio.Lock()
        self._log = logging.getLogger("gliner_api.inference")

    def run(self, model_input: ModelInput) -> RawOutput:
        """Execute inference while holding the handle lock.

        Raises :class:`ModelNotLoadedError` when the handle is empty and
        :class:`InferenceError` wrapping any engine failure.
        """

        with self._handle.acquire() as engine:
            try:
                return engine.inference(model_input)
            except InferenceError:
                raise
            except Exception as exc:
                self._log.exception("Inference failed for %d sequence(s)", len(model_input.texts))
                raise InferenceError(f"Inference failed: {exc}") from exc

    async def run_async(self, model_input: ModelInput) -> RawOutput:
        """Run :meth:`run` on the worker thread pool.

        Waiting requests queue on the event loop, so at most one worker
        thread is busy with inference and the rest of the pool stays free.
        """

        async with self._queue_lock:
            return await run_in_threadpool(self.run, model_input)


__all__ = ["InferenceInvoker"]
