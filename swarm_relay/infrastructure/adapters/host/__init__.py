"""Host trigger boundary: trigger variables to typed events."""

from swarm_relay.infrastructure.adapters.host.trigger_variables import (
    build_hook_event,
    parse_event_kind,
    parse_variable_args,
)

__all__ = ["build_hook_event", "parse_event_kind", "parse_variable_args"]
