"""Shared settings loaded from environment variables."""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_API_BIND_HOST = "0.0.0.0"
_DEFAULT_API_PORT = 8000
_DEFAULT_LOG_LEVEL = "INFO"

DEFAULT_MODEL_ID = "onnx-community/gliner-multitask-large-v0.5"
DEFAULT_MODELS_DIR = "models"
DEFAULT_ENGINE_FACTORY = "gliner_api.extraction.ner:load_gliner_engine"

API_VERSION = "0.1.0"


@lru_cache(maxsize=None)
def get_api_port() -> int:
    """Return the port the API listens on."""

    return int(os.getenv("GLINER_API_PORT", os.getenv("PORT", _DEFAULT_API_PORT)))


@lru_cache(maxsize=None)
def get_api_bind_host() -> str:
    """Return the host used by Uvicorn to accept connections."""

    return os.getenv("GLINER_API_BIND_HOST", _DEFAULT_API_BIND_HOST)


@lru_cache(maxsize=None)
def get_log_level() -> str:
    return os.getenv("GLINER_LOG_LEVEL", _DEFAULT_LOG_LEVEL)


__all__ = [
    "API_VERSION",
    "DEFAULT_ENGINE_FACTORY",
    "DEFAULT_MODELS_DIR",
    "DEFAULT_MODEL_ID",
    "get_api_bind_host",
    "get_api_port",
    "get_log_level",
]
