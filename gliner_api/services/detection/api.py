"""FastAPI routes exposing PII detection."""
from __future__ import annotations

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gliner_api.extraction import ExtractionError
from gliner_api.settings import API_VERSION

from .container import DetectionContainer
from .schemas import (
    ApiResponse,
    DetectRequest,
    ExtractionResultResponse,
    HealthResponse,
)


WELCOME_MESSAGE = "Welcome to Gliner RS API"


def configure_cors(app: FastAPI) -> None:
    """Apply the default CORS configuration used by the service."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def configure_not_found(app: FastAPI) -> None:
    """Answer unsupported methods on known routes as plain not-found."""

    async def method_not_allowed(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": "Not Found"})

    app.add_exception_handler(405, method_not_allowed)


def include_routes(app: FastAPI, container: DetectionContainer, *, prefix: str = "") -> None:
    """Register the status and detection routes on a FastAPI application."""

    router = APIRouter(prefix=prefix, tags=["PII"])

    @router.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        return HealthResponse(status="ok", message="API is running")

    @router.get("/", response_model=ApiResponse[str])
    async def index() -> ApiResponse[str]:
        return ApiResponse[str].ok(WELCOME_MESSAGE)

    @router.get("/api/version", response_model=ApiResponse[str])
    async def version() -> ApiResponse[str]:
        return ApiResponse[str].ok(API_VERSION)

    @router.post(
        "/api/pii/detect",
        response_model=ApiResponse[ExtractionResultResponse],
    )
    async def detect_pii(payload: DetectRequest) -> ApiResponse[ExtractionResultResponse]:
        try:
            result = await container.service.detect(payload.text)
        except ExtractionError as exc:
            return ApiResponse[ExtractionResultResponse].fail(str(exc))
        return ApiResponse[ExtractionResultResponse].ok(
            ExtractionResultResponse.from_dataclass(result)
        )

    app.include_router(router)


__all__ = [
    "WELCOME_MESSAGE",
    "configure_cors",
    "configure_not_found",
    "include_routes",
]
