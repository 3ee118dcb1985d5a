"""Dependency container for the PII detection service."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from functools import partial
from importlib import import_module
from pathlib import Path
from typing import Any, Callable

from gliner_api.extraction import (
    DEFAULT_LABELS,
    DetectionService,
    InferenceEngine,
    InitError,
    ModelHandle,
)
from gliner_api.extraction.ner import GLINER_CONFIG_FILE
from gliner_api.settings import (
    DEFAULT_ENGINE_FACTORY,
    DEFAULT_MODEL_ID,
    DEFAULT_MODELS_DIR,
)


@dataclass
class DetectionConfig:
    """Configuration required to bootstrap the detection service."""

    model_id: str = DEFAULT_MODEL_ID
    models_dir: Path = Path(DEFAULT_MODELS_DIR)
    engine_factory: str | None = DEFAULT_ENGINE_FACTORY
    engine_settings: dict[str, Any] = field(default_factory=dict)
    labels: tuple[str, ...] = DEFAULT_LABELS
    engine: InferenceEngine | None = None
    handle: ModelHandle | None = None

    @property
    def model_dir(self) -> Path:
        return self.models_dir / self.model_id

    @property
    def tokenizer_path(self) -> Path:
        return self.model_dir / "tokenizer.json"

    @property
    def model_path(self) -> Path:
        return self.model_dir / "model.onnx"

    @property
    def gliner_config_path(self) -> Path:
        return self.model_dir / GLINER_CONFIG_FILE

    @classmethod
    def from_env(cls) -> "DetectionConfig":
        """Build a configuration instance from environment variables."""

        def _json_env(name: str) -> dict[str, Any]:
            raw = os.getenv(name)
            if not raw:
                return {}
            try:
                payload = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise RuntimeError(f"Invalid JSON in environment variable {name!r}: {raw}") from exc
            if not isinstance(payload, dict):
                raise RuntimeError(f"Environment variable {name!r} must hold a JSON object")
            return payload

        return cls(
            model_id=os.getenv("GLINER_MODEL", DEFAULT_MODEL_ID),
            models_dir=Path(os.getenv("GLINER_MODELS_DIR", DEFAULT_MODELS_DIR)),
            engine_factory=os.getenv("GLINER_ENGINE_FACTORY", DEFAULT_ENGINE_FACTORY),
            engine_settings=_json_env("GLINER_ENGINE_SETTINGS"),
        )


@dataclass
class DetectionContainer:
    """Resolved dependencies for the detection service."""

    config: DetectionConfig
    handle: ModelHandle
    service: DetectionService


def build_detection_container(config: DetectionConfig) -> DetectionContainer:
    """Instantiate the model handle and the detection service.

    Model loading failures are logged and leave the handle empty; the service
    then reports every detection request as "model not loaded".
    """

    log = logging.getLogger("gliner_api.model")
    handle = config.handle if config.handle is not None else ModelHandle()

    if not handle.loaded:
        log.info(
            "Loading model %s from %s", config.model_id, config.model_dir
        )
        try:
            handle.initialize(_engine_loader(config))
        except InitError as exc:
            log.error("Model initialization failed: %s", exc)

    service = DetectionService(handle=handle, labels=config.labels)
    return DetectionContainer(config=config, handle=handle, service=service)


def _engine_loader(config: DetectionConfig) -> Callable[[], InferenceEngine]:
    if config.engine is not None:
        engine = config.engine
        return lambda: engine
    if config.engine_factory is None:
        raise InitError("No engine factory configured")
    return partial(
        _load_engine,
        config.engine_factory,
        config.tokenizer_path,
        config.model_path,
        config.engine_settings,
    )


def _load_engine(
    factory_path: str,
    tokenizer_path: Path,
    model_path: Path,
    settings: dict[str, Any],
) -> InferenceEngine:
    module_name, _, attribute = factory_path.partition(":")
    if not attribute:
        raise InitError("GLINER_ENGINE_FACTORY must follow the 'module:attribute' format")
    module = import_module(module_name)
    factory = getattr(module, attribute)
    if callable(factory):
        return factory(tokenizer_path=tokenizer_path, model_path=model_path, **settings)
    return factory


__all__ = [
    "DetectionConfig",
    "DetectionContainer",
    "build_detection_container",
]
