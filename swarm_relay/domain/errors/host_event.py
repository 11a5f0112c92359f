"""Host event errors."""

from swarm_relay.domain.exceptions import SwarmRelayError


class HostEventError(SwarmRelayError):
    """The host handed over an event the relay cannot build.

    Raised for unknown event names and for missing required variables.

    Attributes:
        event_name: The event name as received.
    """

    def __init__(self, message: str, event_name: str) -> None:
        self.event_name = event_name
        super().__init__(message)
