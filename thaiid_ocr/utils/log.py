"""Logging configuration using structlog.

Log records are JSON lines on stderr, so command output on stdout (such as
``thaiid-ocr parse --json``) can be piped straight into other tools.
"""

import logging
import sys
import time
from typing import Any, Dict, Optional, TextIO

import structlog

from . import config

PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    # Thai card text stays readable in the output
    structlog.processors.JSONRenderer(ensure_ascii=False),
]


def resolve_log_level(name: Any) -> int:
    """Map a LOG_LEVEL setting to a stdlib level, falling back to INFO."""
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(stream: Optional[TextIO] = None):
    """Configure stdlib logging and structlog for JSON output.

    Args:
        stream: Where log lines are written; stderr when omitted
    """
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=resolve_log_level(config.settings.LOG_LEVEL),
    )

    structlog.configure(
        processors=PROCESSORS,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a configured logger instance."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(name)


class LoggerMixin:
    """Gives a class a cached ``logger`` and start/success/error timing helpers."""

    @property
    def logger(self) -> structlog.BoundLogger:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger

    @staticmethod
    def _operation_fields(context: Dict[str, Any], **kwargs: Any) -> Dict[str, Any]:
        fields = {k: v for k, v in context.items() if k != "event"}
        if "start_time" in context:
            fields["duration_ms"] = int((time.time() - context["start_time"]) * 1000)
        fields.update(kwargs)
        return fields

    def log_start(self, event: str, **kwargs: Any) -> Dict[str, Any]:
        """Log the start of an operation and return its timing context."""
        context = {"event": event, "start_time": time.time(), **kwargs}
        self.logger.info(f"{event} started", **kwargs, start_time=context["start_time"])
        return context

    def log_success(self, context: Dict[str, Any], **kwargs: Any):
        event = context.get("event", "operation")
        self.logger.info(f"{event} completed", **self._operation_fields(context, **kwargs))

    def log_error(self, context: Dict[str, Any], error: Exception, **kwargs: Any):
        event = context.get("event", "operation")
        self.logger.error(
            f"{event} failed",
            **self._operation_fields(
                context, error=str(error), error_type=type(error).__name__, **kwargs
            ),
        )
