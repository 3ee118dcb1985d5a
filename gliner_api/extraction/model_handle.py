"""Slot holding the single engine instance shared by all requests."""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import InitVar, dataclass, field
from typing import Callable, Iterator

from .errors import InitError, ModelNotLoadedError
from .ner import InferenceEngine


@dataclass
class ModelHandle:
    """Holds at most one loaded engine and serializes access to it."""

    engine: InitVar[InferenceEngine | None] = None
    """Engine to preload; leave unset to populate the slot with :meth:`initialize`."""

    _engine: InferenceEngine | None = field(default=None, init=False, repr=False)
    """Engine populated by :meth:`initialize`; ``None`` while the slot is empty."""

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    """Guarantees a single inference call at a time."""

    _attempted: bool = field(default=False, init=False, repr=False)
    """Set once initialization ran, successful or not."""

    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger("gliner_api.model"),
        init=False,
        repr=False,
    )

    def __post_init__(self, engine: InferenceEngine | None) -> None:
        if engine is not None:
            self._engine = engine
            self._attempted = True

    @property
    def loaded(self) -> bool:
        return self._engine is not None

    def get(self) -> InferenceEngine | None:
        """Return the loaded engine, or ``None`` when the slot is empty."""

        return self._engine

    def initialize(self, loader: Callable[[], InferenceEngine]) -> InferenceEngine:
        """Populate the slot by calling ``loader`` exactly once.

        Failures are raised as :class:`InitError`. A failed initialization is
        not retried: later calls raise again without invoking ``loader``.
        """

        if self._engine is not None:
            return self._engine
        if self._attempted:
            raise InitError("Model initialization already failed; not retrying")
        self._attempted = True
        try:
            engine = loader()
        except InitError:
            raise
        except Exception as exc:
            raise InitError(f"Failed to load model: {exc}") from exc
        self._engine = engine
        self._log.info("Model loaded: %s", type(engine).__name__)
        return engine

    @contextmanager
    def acquire(self) -> Iterator[InferenceEngine]:
        """Yield the engine while holding the exclusive inference lock."""

        engine = self._engine
        if engine is None:
            raise ModelNotLoadedError()
        with self._lock:
            yield engine


__all__ = ["ModelHandle"]
