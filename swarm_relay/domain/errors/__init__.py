"""Domain errors for swarm-relay.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from SwarmRelayError.
"""

from swarm_relay.domain.errors.configuration import ConfigurationError
from swarm_relay.domain.errors.host_event import HostEventError
from swarm_relay.domain.errors.queue import EnqueueFailure
from swarm_relay.domain.errors.remote import (
    ProtocolError,
    RemoteServiceError,
    TransportError,
)
from swarm_relay.domain.errors.validation import ValidationRejection

__all__: list[str] = [
    "ConfigurationError",
    "EnqueueFailure",
    "HostEventError",
    "ProtocolError",
    "RemoteServiceError",
    "TransportError",
    "ValidationRejection",
]
