"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from typing import TextIO

from swarm_relay.config.swarm_config import DEFAULT_DEBUG_LEVEL
from swarm_relay.infrastructure.observability import configure_structlog as _configure_structlog
from swarm_relay.infrastructure.observability.logging import ClientOutput


def configure_logging(
    debug_level: int = DEFAULT_DEBUG_LEVEL,
    client_output: ClientOutput | None = None,
    sink: TextIO | None = None,
) -> None:
    """Configure structlog for the given Debug level."""
    _configure_structlog(debug_level=debug_level, client_output=client_output, sink=sink)


__all__ = ["configure_logging"]
