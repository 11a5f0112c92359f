"""Configuration errors.

A ConfigurationError always blocks: it is reported to the operator and the
triggering event is rejected. Only two settings are ever defaulted silently,
the Swarm-URL trailing slash and an unset Swarm-Secure flag.
"""

from swarm_relay.domain.exceptions import SwarmRelayError


class ConfigurationError(SwarmRelayError):
    """Raised when a required setting is missing or malformed.

    Attributes:
        key: The offending configuration key, when one is known.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)
