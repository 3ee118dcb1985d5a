"""REST entry point of the gliner-api service."""
from __future__ import annotations

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from gliner_api.services.detection import DetectionConfig, build_detection_container
from gliner_api.services.detection.api import (
    configure_cors,
    configure_not_found,
    include_routes,
)
from gliner_api.settings import API_VERSION, get_api_bind_host, get_api_port


def create_app(config: DetectionConfig | None = None) -> FastAPI:
    """Create the FastAPI application, loading the model once."""

    config = config or DetectionConfig.from_env()
    container = build_detection_container(config)

    app = FastAPI(
        title="Gliner RS API",
        version=API_VERSION,
        description="Detects PII entities in free text with a GLiNER model.",
    )
    configure_cors(app)
    configure_not_found(app)
    include_routes(app, container)
    app.state.container = container
    return app


def run(host: str | None = None, port: int | None = None) -> None:
    """Run the API using Uvicorn."""

    load_dotenv()
    uvicorn.run(
        "gliner_api.api:create_app",
        host=host or get_api_bind_host(),
        port=port or get_api_port(),
        factory=True,
    )


__all__ = ["create_app", "run"]
