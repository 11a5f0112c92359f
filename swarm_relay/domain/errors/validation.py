"""Validation rejection raised when Swarm reports a changelist as invalid."""

from swarm_relay.domain.exceptions import SwarmRelayError


class ValidationRejection(SwarmRelayError):
    """Swarm explicitly rejected the changelist.

    The message is shown to the submitting user verbatim.

    Attributes:
        messages: The ordered messages from the verdict.
    """

    def __init__(self, messages: list[str], message: str) -> None:
        self.messages = list(messages)
        super().__init__(message)
