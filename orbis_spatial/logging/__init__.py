"""
Structured Logging for Orbis
============================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from orbis_spatial.logging import create_logger, LogEvent
    >>> logger = create_logger("context")
    >>> logger.info(
    ...     event=LogEvent.CONTEXT_CREATED,
    ...     message="Resolved spatial context",
    ...     metadata={'geo': True, 'wrap': False}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
