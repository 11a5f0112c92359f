"""
Domain layer - pure relay logic for swarm-relay.

This layer contains:
- Typed hook events built from the host's variable bag
- Value objects (verdicts, queue items, hook decisions)
- Pure services (path normalization, shelve argument parsing)
- Domain exceptions

This layer must NOT import from application, infrastructure or bootstrap.
Only stdlib and typing imports are allowed.
"""

from swarm_relay.domain.exceptions import SwarmRelayError
from swarm_relay.domain.models import HookDecision, QueueItem, RemoteVerdict

__all__: list[str] = [
    "SwarmRelayError",
    "HookDecision",
    "QueueItem",
    "RemoteVerdict",
]
