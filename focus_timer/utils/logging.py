"""
Logging configuration for focus-timer.

Structured logging through structlog. Events are rendered by structlog and
written through the ``focus_timer`` stdlib logger, so the console and an
optional log file receive the same lines.
"""

import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

import structlog

PACKAGE_LOGGER = "focus_timer"


class _ConsoleHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stdout is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stdout


def _renderer(format_type: str, colors: bool) -> Any:
    if format_type == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=colors)


def setup_logging(
    level: str = "INFO",
    format_type: str = "text",
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structured logging for focus-timer.

    Calling it again replaces the previous configuration, including any
    log file handler.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Format type ("text" or "json")
        log_file: Optional file receiving the same lines as the console
        stream: Console stream (defaults to the current sys.stdout)

    Example:
        >>> setup_logging(level="DEBUG", format_type="json", log_file="timers.log")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    console: logging.Handler = logging.StreamHandler(stream) if stream else _ConsoleHandler()
    handlers: List[logging.Handler] = [console]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False

    # Colour codes only make sense on an interactive console
    colors = not log_file and (stream or sys.stdout).isatty()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(format_type, colors),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, **initial_values: Any) -> structlog.BoundLogger:
    """
    Get a logger instance with optional initial context.

    Args:
        name: Logger name (usually __name__)
        **initial_values: Initial context values to bind

    Example:
        >>> logger = get_logger(__name__, component="engine")
        >>> logger.info("timer_started", timer_id=1)
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def log_error(error: Exception, **context: Any) -> Dict[str, Any]:
    """
    Structured fields describing an error.

    Exceptions from the package carry their details and cause along.

    Example:
        >>> logger.error("checkpoint_failed", **log_error(e, key="focus-timers"))
    """
    error_data: Dict[str, Any] = {
        "error_type": type(error).__name__,
        "error_message": str(getattr(error, "message", error)),
    }

    details = getattr(error, "details", None)
    if details:
        error_data["details"] = details
    cause = getattr(error, "cause", None)
    if cause is not None:
        error_data["cause"] = repr(cause)

    error_data.update(context)
    return error_data
