"""Structured logging configuration with structlog.

The relay's Debug setting (0-9) decides verbosity:

    0  errors only
    1  + warnings
    2  + info
    3+ + debug
    9  + every line echoed to the client as "SWARM_EXT: <event>"

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "config_initialized",
        "event_id": "uuid",
        "user": "alice",
        "host": "10.0.0.5",
        ...additional context
    }

Output goes to the file named by SWARM_RELAY_LOG_FILE, else stderr. Stdout
is left to messages meant for the user.

Usage:
    from swarm_relay.infrastructure.observability import configure_structlog

    configure_structlog(debug_level=config.debug_level)
"""

import atexit
import logging
import os
import sys
from collections.abc import Callable
from typing import Any, TextIO, cast

import structlog
from structlog.typing import Processor

from swarm_relay.infrastructure.observability.event_context import event_id_processor

# Environment variable for the log file (default: stderr)
LOG_FILE_ENV = "SWARM_RELAY_LOG_FILE"
# Environment variable for the renderer: production (JSON) or development
LOG_ENVIRONMENT_ENV = "SWARM_RELAY_LOG_ENV"
DEFAULT_ENVIRONMENT = "production"

CLIENT_ECHO_PREFIX = "SWARM_EXT: "

ClientOutput = Callable[[str], None]


def debug_level_to_log_level(debug_level: int) -> int:
    """Map the relay Debug setting onto a logging level.

    Args:
        debug_level: Configured Debug value (0-9).

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    if debug_level <= 0:
        return logging.ERROR
    if debug_level == 1:
        return logging.WARNING
    if debug_level == 2:
        return logging.INFO
    return logging.DEBUG


class ClientEchoProcessor:
    """Structlog processor copying each log event to the client.

    Used at Debug level 9, where the user running the command sees the
    relay's log lines as they happen.
    """

    def __init__(self, client_output: ClientOutput) -> None:
        self._client_output = client_output

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event = event_dict.get("event")
        if event is not None:
            self._client_output(f"{CLIENT_ECHO_PREFIX}{event}\n")
        return event_dict


# One handle per log file path, shared by every configure_structlog call
_open_log_files: dict[str, TextIO] = {}


def _close_log_files() -> None:
    for handle in _open_log_files.values():
        handle.close()
    _open_log_files.clear()


atexit.register(_close_log_files)


def _log_sink() -> TextIO:
    log_file = os.getenv(LOG_FILE_ENV)
    if not log_file:
        return sys.stderr
    handle = _open_log_files.get(log_file)
    if handle is None or handle.closed:
        handle = open(log_file, "a", encoding="utf-8")
        _open_log_files[log_file] = handle
    return handle


def configure_structlog(
    debug_level: int = 3,
    environment: str | None = None,
    client_output: ClientOutput | None = None,
    sink: TextIO | None = None,
) -> None:
    """Configure structlog for the relay.

    May be called more than once: once with the default level before the
    configuration is read, then again with the configured level.

    Args:
        debug_level: Relay Debug setting (0-9).
        environment: 'production' for JSON output, 'development' for console.
            Defaults to SWARM_RELAY_LOG_ENV, then 'production'.
        client_output: Where client echo goes. Echo is enabled only when this
            is given and debug_level is 9 or higher.
        sink: Stream to write log lines to. Defaults to the log file or stderr.
    """
    environment = environment or os.getenv(LOG_ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)

    # Shared processors for all environments
    shared_processors: list[Processor] = [
        # Merge context from contextvars (user, host, hook)
        structlog.contextvars.merge_contextvars,
        # Add log level
        structlog.processors.add_log_level,
        # Add ISO 8601 timestamp
        structlog.processors.TimeStamper(fmt="iso"),
        # Add event ID from context
        cast(Processor, event_id_processor),
        # Handle stack traces nicely
        structlog.processors.StackInfoRenderer(),
        # Handle Unicode properly
        structlog.processors.UnicodeDecoder(),
    ]

    if client_output is not None and debug_level >= 9:
        shared_processors.append(cast(Processor, ClientEchoProcessor(client_output)))

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=False)

    processors = shared_processors + [final_processor]

    # Loggers are not cached: the level changes once the config is known.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            debug_level_to_log_level(debug_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sink or _log_sink()),
        cache_logger_on_first_use=False,
    )


def get_logger_for_service(
    service_name: str, component: str = "relay"
) -> structlog.BoundLogger:
    """Get a logger with service name and component already bound.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "relay").

    Returns:
        A BoundLogger with service and component bound.
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
