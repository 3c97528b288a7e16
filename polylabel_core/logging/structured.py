"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Structured logger that emits one JSON object per record.

Design:
- JSON output (compatible with log aggregators)
- Thread-safe (uses standard logging module)
- Contextual metadata (probes, radius, polygon_id, etc.)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="search")
    >>> logger.info(
    ...     event=LogEvent.SEARCH_COMPLETED,
    ...     message="Pole found",
    ...     metadata={'radius': 5.0, 'probes': 42}
    ... )

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "search",
        "event": "search.completed",
        "message": "Pole found",
        "metadata": {"radius": 5.0, "probes": 42}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


DEFAULT_LEVEL = logging.WARNING


class StructuredLogger:
    """
    JSON structured logger.

    Wraps Python's logging module with structured metadata support.

    Attributes:
        component: Component name (e.g., "search", "cli")
        logger: Underlying Python logger instance

    Thread Safety:
        Thread-safe via Python's logging module.
    """

    def __init__(
        self,
        component: str,
        level: Optional[int] = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "search")
            level: Logging level (default: INFO). None keeps the level
                already set on the named logger, or WARNING if it has none.
            logger_name: Custom logger name (default: polylabel.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"polylabel.{component}"
        self.logger = logging.getLogger(self.logger_name)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

        # Named loggers are process-wide; only an explicit level overrides one
        if level is not None:
            self.logger.setLevel(level)
        elif self.logger.level == logging.NOTSET:
            self.logger.setLevel(DEFAULT_LEVEL)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Internal log method with structured format.

        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR)
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception for ERROR logs
        """
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(
            log_level,
            json.dumps(log_entry),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message (per-iteration detail)."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Example:
            >>> logger.warning(
            ...     event=LogEvent.SEARCH_DEGENERATE,
            ...     message="Zero-area bounding box",
            ...     metadata={'width': 10.0, 'height': 0.0}
            ... )
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance for traceback
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Formatter used by StructuredLogger.

    The message is already a JSON document, so it is passed through.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: Optional[int] = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: INFO); None reuses the current level

    Returns:
        Configured StructuredLogger instance

    Example:
        >>> logger = create_logger("search", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
