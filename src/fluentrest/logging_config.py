"""
Logging configuration for fluentrest.

The package logs under the ``fluentrest`` logger. Request/response wire dumps
enabled through ``RestClient.debug`` go to a per-client ``fluentrest.wire``
logger that is kept out of the logging registry.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import TextIO


WIRE_LOGGER = "fluentrest.wire"


class StructuredFormatter(logging.Formatter):
    """Formatter that exposes module and function names as fields."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'module_name'):
            record.module_name = record.module
        if not hasattr(record, 'function_name'):
            record.function_name = record.funcName

        return super().format(record)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    log_dir: str | None = None,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    enable_console: bool = True,
    enable_file: bool = False,
) -> logging.Logger:
    """
    Set up logging for fluentrest.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Custom log file path (overrides log_dir)
        log_dir: Directory for log files (defaults to ~/.fluentrest/logs)
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep
        enable_console: Enable console logging
        enable_file: Enable file logging

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("fluentrest")
    logger.setLevel(getattr(logging, level.upper()))

    logger.handlers.clear()

    console_fmt = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_fmt = StructuredFormatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)-20s | %(module_name)-15s | '
            '%(function_name)-20s | %(lineno)-4d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(console_fmt)
        logger.addHandler(console_handler)

    if enable_file:
        if log_file:
            log_path = Path(log_file)
        elif log_dir:
            log_path = Path(log_dir) / "fluentrest.log"
        else:
            log_path = Path.home() / ".fluentrest" / "logs" / "fluentrest.log"

        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_fmt)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (e.g., 'fluentrest.client')

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    debug: bool = False,
    log_to_file: bool = False,
    log_file: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """
    Quick logging configuration.

    Args:
        debug: Enable debug logging
        log_to_file: Enable file logging
        log_file: Log file path (implies log_to_file)
        console: Enable console logging
    """
    level = "DEBUG" if debug else "INFO"
    return setup_logging(
        level=level,
        log_file=log_file,
        enable_console=console,
        enable_file=log_to_file or log_file is not None,
    )


def create_wire_logger() -> logging.Logger:
    """Return a private wire logger for one client.

    The logger is not registered with ``logging.getLogger``; its handlers only
    receive the owning client's exchanges.
    """
    logger = logging.Logger(WIRE_LOGGER, logging.DEBUG)
    logger.propagate = False
    return logger


def attach_wire_stream(logger: logging.Logger, stream: TextIO | None = None) -> logging.Handler:
    """Send wire dumps to a stream (stderr by default), unformatted.

    Attaching the same stream twice returns the existing handler.
    """
    stream = stream or sys.stderr
    for existing in logger.handlers:
        if isinstance(existing, logging.StreamHandler) and existing.stream is stream:
            return existing

    handler = logging.StreamHandler(stream)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)
    return handler
