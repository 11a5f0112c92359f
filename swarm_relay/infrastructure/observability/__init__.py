"""Observability infrastructure for structured logging and event correlation.

This module provides cross-cutting observability concerns:
- Structured logging with structlog, levelled by the relay Debug setting
- Per-event context (event ID, user, client address)
- Optional echo of log lines to the client at Debug level 9

Usage:
    from swarm_relay.infrastructure.observability import (
        configure_structlog,
        event_context,
    )

    configure_structlog(debug_level=3)
    with event_context(user="alice", client_ip="10.0.0.5"):
        ...
"""

from swarm_relay.infrastructure.observability.event_context import (
    event_context,
    event_id_processor,
    generate_event_id,
    get_event_id,
)
from swarm_relay.infrastructure.observability.logging import (
    ClientEchoProcessor,
    configure_structlog,
    debug_level_to_log_level,
    get_logger_for_service,
)

__all__: list[str] = [
    "ClientEchoProcessor",
    "configure_structlog",
    "debug_level_to_log_level",
    "event_context",
    "event_id_processor",
    "generate_event_id",
    "get_event_id",
    "get_logger_for_service",
]
