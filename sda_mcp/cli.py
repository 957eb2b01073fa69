"""Command-line entry point.

Reads configuration from the environment / .env (see ``core.config``), applies
command-line overrides, configures logging and runs the stdio MCP server.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import pydantic
import typer

from .core.config import DEFAULT_BASE_URL, Settings
from .core.logging_config import get_logger, setup_logging
from .server import serve

app = typer.Typer(add_completion=False, help="MCP server for the Sudan Digital Archive API.")

logger = get_logger(__name__)


def load_settings(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> Settings:
    """Build settings from the environment, letting explicit values win."""
    overrides = {
        "api_key": api_key,
        "base_url": base_url,
        "http_timeout": timeout,
        "log_level": log_level,
        "log_file": log_file,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


@app.command()
def run(
    api_key: Optional[str] = typer.Option(
        None, "--api-key", envvar="API_KEY", help="API key for the Sudan Digital Archive."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help=f"Base URL of the archive API [default: {DEFAULT_BASE_URL}]."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0.001, help="HTTP timeout in seconds. Unset means no timeout."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level, e.g. DEBUG or INFO."),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write DEBUG logs to this file."),
) -> None:
    """Serve the archive tools over MCP stdio."""
    settings = load_settings(api_key, base_url, timeout, log_level, log_file)
    setup_logging(settings.log_level, settings.log_format, settings.log_file)
    try:
        client_config = settings.client
    except pydantic.ValidationError:
        raise typer.BadParameter("an API key is required (--api-key or API_KEY)", param_hint="--api-key")
    logger.info("Starting SDA MCP server")
    asyncio.run(serve(client_config))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
