"""Structured logging and observability utilities.

Provides JSON log lines with request-id propagation, a timer for request
durations, and metric collection hooks.
"""

import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

# Context variable for request-scoped data
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

ROOT_LOGGER = "state_proxy"


class LogLevel(str, Enum):
    """Log levels matching Python's logging module."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LogContext:
    """Context data to include with every log entry."""

    request_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def current(cls) -> "LogContext":
        """Get current context from context variables."""
        return cls(request_id=request_id_var.get())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        if self.request_id:
            result["request_id"] = self.request_id
        result.update(self.extra)
        return result


@dataclass
class LogEntry:
    """A structured log entry."""

    level: LogLevel
    message: str
    timestamp: str
    logger: str
    context: dict[str, Any] = field(default_factory=dict)
    error: dict[str, Any] | None = None
    duration_ms: float | None = None

    def to_json(self) -> str:
        """Serialize to JSON string."""
        data: dict[str, Any] = {
            "level": self.level.value,
            "message": self.message,
            "timestamp": self.timestamp,
            "logger": self.logger,
        }
        if self.context:
            data["context"] = self.context
        if self.error:
            data["error"] = self.error
        if self.duration_ms is not None:
            data["duration_ms"] = self.duration_ms
        return json.dumps(data)


class StructuredFormatter(logging.Formatter):
    """Formats log records as structured JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        context = LogContext.current().to_dict()

        if hasattr(record, "context") and isinstance(record.context, dict):
            context.update(record.context)

        error = None
        if record.exc_info:
            error = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else "Unknown",
                "message": str(record.exc_info[1]) if record.exc_info[1] else "",
            }

        entry = LogEntry(
            level=LogLevel(record.levelname),
            message=record.getMessage(),
            timestamp=datetime.now(timezone.utc).isoformat(),
            logger=record.name,
            context=context,
            error=error,
            duration_ms=getattr(record, "duration_ms", None),
        )

        return entry.to_json()


class StructuredLogger:
    """Wrapper around Python logging with structured output.

    Handlers and levels are set once on the ``state_proxy`` logger by
    ``configure_logging``; module loggers propagate to it.

    Example:
        logger = StructuredLogger("state_proxy.server.routes")
        logger.info("Request served", context={"status": 200})
        logger.error("Store call failed", error=exception)
    """

    def __init__(self, name: str) -> None:
        """Initialize structured logger.

        Args:
            name: Logger name (typically module name)
        """
        self.logger = logging.getLogger(name)

    def _log(
        self,
        level: LogLevel,
        message: str,
        context: dict[str, Any] | None = None,
        error: BaseException | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Internal log method."""
        extra: dict[str, Any] = {}
        if context:
            extra["context"] = context
        if duration_ms is not None:
            extra["duration_ms"] = duration_ms

        log_func = getattr(self.logger, level.value.lower())
        if error:
            log_func(message, exc_info=(type(error), error, error.__traceback__), extra=extra)
        else:
            log_func(message, extra=extra)

    def log(
        self,
        level: LogLevel,
        message: str,
        context: dict[str, Any] | None = None,
        error: BaseException | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Log at an explicit level."""
        self._log(level, message, context, error, duration_ms)

    def info(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, message, context, duration_ms=duration_ms)

    def error(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        error: BaseException | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, message, context, error, duration_ms)

    def critical(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        error: BaseException | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Log at CRITICAL level."""
        self._log(LogLevel.CRITICAL, message, context, error, duration_ms)


class RequestContext:
    """Context manager for request-scoped logging context.

    Example:
        async with RequestContext(request_id="req-123"):
            # All logs in this block will include the request id
            logger.info("Processing request")
    """

    def __init__(self, request_id: str | None = None) -> None:
        """Initialize request context.

        Args:
            request_id: Unique request identifier (generated if omitted)
        """
        self.request_id = request_id or str(uuid.uuid4())
        self._token: Token[str | None] | None = None

    def __enter__(self) -> "RequestContext":
        """Set context variables."""
        self._token = request_id_var.set(self.request_id)
        return self

    def __exit__(self, *args: Any) -> None:
        """Reset context variables to their previous values."""
        if self._token is not None:
            request_id_var.reset(self._token)
            self._token = None

    async def __aenter__(self) -> "RequestContext":
        """Async context manager entry."""
        return self.__enter__()

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        self.__exit__(*args)


class Timer:
    """Context manager for timing operations.

    Example:
        with Timer() as t:
            await do_operation()
        logger.info("Operation complete", duration_ms=t.duration_ms)
    """

    def __init__(self) -> None:
        """Initialize timer."""
        self.start_time: float = 0
        self.end_time: float = 0

    @property
    def duration_ms(self) -> float:
        """Get duration in milliseconds.

        Reads the elapsed time so far while the timer is still running.
        """
        end = self.end_time or time.perf_counter()
        return (end - self.start_time) * 1000

    def __enter__(self) -> "Timer":
        """Start timer."""
        self.start_time = time.perf_counter()
        self.end_time = 0
        return self

    def __exit__(self, *args: Any) -> None:
        """Stop timer."""
        self.end_time = time.perf_counter()


# Metric collection hook type
MetricCallback = Callable[[str, float, dict[str, Any]], None]

_metric_callbacks: list[MetricCallback] = []


def register_metric_callback(callback: MetricCallback) -> None:
    """Register a callback to receive metric events.

    Args:
        callback: Function(name, value, labels) to call on metrics
    """
    _metric_callbacks.append(callback)


def clear_metric_callbacks() -> None:
    """Remove all registered metric callbacks."""
    _metric_callbacks.clear()


def emit_metric(name: str, value: float, labels: dict[str, Any] | None = None) -> None:
    """Emit a metric to all registered callbacks.

    A failing callback is logged and skipped; it never affects the request.

    Args:
        name: Metric name
        value: Metric value
        labels: Optional labels/dimensions
    """
    labels = labels or {}

    for callback in _metric_callbacks:
        try:
            callback(name, value, labels)
        except Exception:
            logging.getLogger(ROOT_LOGGER).warning(
                "Metric callback failed for %s", name, exc_info=True
            )


def emit_counter(name: str, labels: dict[str, Any] | None = None) -> None:
    """Emit a counter metric (increment by 1)."""
    emit_metric(name, 1.0, labels)


def emit_timer(name: str, duration_ms: float, labels: dict[str, Any] | None = None) -> None:
    """Emit a timer metric."""
    emit_metric(name, duration_ms, labels)


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    format: str = "json",
) -> None:
    """Configure the package logger for the application.

    Args:
        level: Minimum log level
        format: Output format ("json" or "text")
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level.value)

    # Remove existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)

    if format == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))

    root_logger.addHandler(handler)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger
    """
    return StructuredLogger(name)
