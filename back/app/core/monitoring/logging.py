# Standard library imports
from collections.abc import MutableMapping
from functools import lru_cache
import logging
import sys
from typing import Any

# Third-party imports
from fastapi import Request

# Local application imports
from app.settings import settings


class CustomFormatter(logging.Formatter):
    """
    Colour formatter for console output.
    """

    # ANSI color codes
    GREY = "\x1b[38;20m"
    YELLOW = "\x1b[33;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    FORMATS = {
        logging.DEBUG: GREY + CONSOLE_FORMAT + RESET,
        logging.INFO: GREY + CONSOLE_FORMAT + RESET,
        logging.WARNING: YELLOW + CONSOLE_FORMAT + RESET,
        logging.ERROR: RED + CONSOLE_FORMAT + RESET,
        logging.CRITICAL: BOLD_RED + CONSOLE_FORMAT + RESET,
    }

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


@lru_cache
def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Get a logger with the given name and a stdout handler.
    Cached so repeated calls for one name share the same logger.

    Args:
        name: The name of the logger
        level: Optional logging level override

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times to the same logger
    if logger.handlers:
        return logger

    if level is None:
        level = logging.DEBUG if settings.DEBUG_MODE else logging.INFO

    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(CustomFormatter())
    logger.addHandler(console_handler)

    return logger


class LoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """
    Logger adapter that appends `key=value` context to every message.
    """

    def __init__(self, logger: logging.Logger, extra: dict[str, Any] | None = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        if self.extra:
            context_str = " ".join(f"{k}={v}" for k, v in self.extra.items() if v is not None)
            if context_str:
                msg = f"{msg} [{context_str}]"
        return msg, kwargs


def get_contextual_logger(name: str, **context: Any) -> LoggerAdapter:
    """
    Get a logger with additional context variables that will be included
    in all log messages.

    Args:
        name: The name of the logger
        **context: Additional context parameters to include in logs

    Returns:
        A configured logger adapter
    """
    logger = get_logger(name)
    return LoggerAdapter(logger, context)


def get_request_logger(name: str, request: Request, **context: Any) -> LoggerAdapter:
    """Contextual logger tagged with the request id and method/path."""
    request_id = getattr(request.state, "request_id", None)
    return get_contextual_logger(
        name,
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        **context,
    )
