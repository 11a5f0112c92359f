"""
Hook events for swarm-relay.

Typed payloads for the events a Helix Core server raises. Each is built
once at the boundary from the host's string-keyed variables and is
immutable afterwards.
"""

from swarm_relay.domain.events.hook_events import (
    ChangeEvent,
    FormEvent,
    FormKind,
    HookEvent,
    HookEventKind,
    ShelveDeleteEvent,
)

__all__: list[str] = [
    "ChangeEvent",
    "FormEvent",
    "FormKind",
    "HookEvent",
    "HookEventKind",
    "ShelveDeleteEvent",
]
