"""
Logging Configuration Module.

Centralized logging setup for the SDA MCP server.

Every handler writes to STDERR: STDOUT carries the MCP stdio transport and any
stray log line there would corrupt the JSON-RPC stream.

Features:
- Configurable root level plus per-module levels
- simple / detailed / json line formats
- Optional file logging
"""

import logging
import sys
from pathlib import Path
from typing import Optional

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "sda_mcp": "DEBUG",
    "sda_mcp.archive_api": "INFO",
    "sda_mcp.tools": "DEBUG",
    # Third-party libraries (reduce noise)
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "mcp": "INFO",
    "asyncio": "WARNING",
}


def _format_string(log_format: str) -> str:
    if log_format == "json":
        return JSON_FORMAT
    if log_format == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "detailed",
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Line format (simple, detailed, json)
        log_file: When given, also log everything at DEBUG to this file
    """
    level = log_level.upper()
    formatter = logging.Formatter(_format_string(log_format), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(
        "Logging configured: level=%s, format=%s, file=%s", level, log_format, log_file or "-"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
