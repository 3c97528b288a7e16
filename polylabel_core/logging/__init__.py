"""
Structured Logging for polylabel
================================

Bounded Context: Observability

JSON-structured logging for the pole search and CLI.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from polylabel_core.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="search")
    >>> logger.info(
    ...     event=LogEvent.SEARCH_COMPLETED,
    ...     message="Pole found",
    ...     metadata={'radius': 5.0, 'probes': 42}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
