"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Design:
- JSON output (one object per record)
- Thread-safe (uses standard logging module)
- Contextual metadata (component, geo flag, coordinates, query line)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="context")
    >>> logger.info(
    ...     event=LogEvent.CONTEXT_CREATED,
    ...     message="Resolved spatial context",
    ...     metadata={'geo': True}
    ... )

Output:
    {
        "timestamp": "2025-10-24T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "context",
        "event": "context.created",
        "message": "Resolved spatial context",
        "metadata": {"geo": true}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Wraps Python's logging module with structured metadata support.

    Attributes:
        component: Component name (e.g., "context", "oracle")
        logger: Underlying Python logger instance

    Thread Safety:
        Thread-safe via Python's logging module.
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "context")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: orbis.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"orbis.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
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
            json.dumps(log_entry, default=str),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.ORACLE_SAMPLE_DATA_LOADED,
            ...     message="Indexed sample documents",
            ...     metadata={'count': 52}
            ... )
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
            ...     event=LogEvent.CONTEXT_LEGACY_API,
            ...     message="SpatialContext.from_legacy is deprecated"
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


class JSONFormatter(logging.Formatter):
    """
    Formatter used by StructuredLogger.

    The message produced by StructuredLogger is already JSON, so it is
    passed through untouched.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("oracle", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
