"""Bootstrap wiring for swarm-relay."""

from swarm_relay.bootstrap.container import (
    RelayRuntime,
    RelayServices,
    build_services,
)
from swarm_relay.bootstrap.logging import configure_logging

__all__ = ["RelayRuntime", "RelayServices", "build_services", "configure_logging"]
