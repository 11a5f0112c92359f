"""Domain models (value objects) for swarm-relay."""

from swarm_relay.domain.models.hook_decision import HookDecision
from swarm_relay.domain.models.queue_item import QueueItem, QueueItemType
from swarm_relay.domain.models.verdict import RemoteVerdict

__all__: list[str] = [
    "HookDecision",
    "QueueItem",
    "QueueItemType",
    "RemoteVerdict",
]
