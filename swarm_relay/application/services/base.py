"""Base service logging mixin.

Provides the LoggingMixin class for structured logging across the
application services.

Usage:
    from swarm_relay.application.services.base import LoggingMixin

    class MyService(LoggingMixin):
        def __init__(self, dependency: SomePort) -> None:
            self._dependency = dependency
            self._init_logger()

        def do_something(self, change: str) -> None:
            log = self._log_operation("do_something", change=change)
            log.info("operation_started")
            # ... do work ...
            log.info("operation_completed")
"""

import structlog

from swarm_relay.infrastructure.observability.event_context import get_event_id


class LoggingMixin:
    """Mixin providing structured logging for services.

    The logger is bound with:
    - service: The class name of the service
    - component: The component type (default: "relay")

    Each operation gets:
    - operation: The name of the operation being performed
    - event_id: The current host event, for correlation
    - Any additional context passed to _log_operation()

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "relay") -> None:
        """Initialize the logger with service name binding.

        Should be called in __init__ after setting up dependencies.

        Args:
            component: The component type for log categorization.
        """
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create operation-scoped logger with the current event ID.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.

        Returns:
            BoundLogger with operation and event context.
        """
        return self._log.bind(
            operation=operation,
            event_id=get_event_id(),
            **context,
        )
