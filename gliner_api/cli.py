"""Command line interface for operating the gliner-api service."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from gliner_api.api import run as run_api
from gliner_api.extraction import ExtractionError
from gliner_api.services.detection import DetectionConfig, build_detection_container
from gliner_api.services.detection.schemas import ApiResponse, ExtractionResultResponse
from gliner_api.settings import get_log_level


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="gliner-api - PII entity detection")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        help="Logging level (default: GLINER_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Start the HTTP API")
    serve.add_argument("--host", help="Bind address")
    serve.add_argument("--port", type=int, help="Listening port")

    detect = subparsers.add_parser(
        "detect", help="Load the model and print the detection envelope for a text"
    )
    detect.add_argument("text", help="Text to analyse")

    subparsers.add_parser(
        "paths", help="Show the configured model and whether its artifacts exist"
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    level_name = args.log_level or get_log_level()
    handler = RichHandler(console=Console(stderr=True), markup=True, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    logger = logging.getLogger("gliner_api.cli")

    if args.command == "serve":
        logger.info("Starting API")
        run_api(host=args.host, port=args.port)
        return 0
    if args.command == "detect":
        envelope = _detect_once(args.text)
        console.print_json(json.dumps(envelope.model_dump()))
        return 0 if envelope.success else 1
    if args.command == "paths":
        _print_paths(console, DetectionConfig.from_env())
        return 0
    return 2  # pragma: no cover - argparse rejects unknown commands


def _detect_once(text: str) -> ApiResponse[ExtractionResultResponse]:
    container = build_detection_container(DetectionConfig.from_env())
    try:
        result = asyncio.run(container.service.detect(text))
    except ExtractionError as exc:
        return ApiResponse[ExtractionResultResponse].fail(str(exc))
    return ApiResponse[ExtractionResultResponse].ok(
        ExtractionResultResponse.from_dataclass(result)
    )


def _print_paths(console: Console, config: DetectionConfig) -> None:
    table = Table(title=f"Model {config.model_id}")
    table.add_column("Artifact")
    table.add_column("Path")
    table.add_column("Present")
    for name, path in (
        ("tokenizer", config.tokenizer_path),
        ("model", config.model_path),
        ("config", config.gliner_config_path),
    ):
        present = "[green]yes[/green]" if path.is_file() else "[red]no[/red]"
        table.add_row(name, str(path), present)
    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
