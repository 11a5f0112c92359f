"""Base exception classes for the swarm-relay domain layer."""


class SwarmRelayError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class so the
    event boundary can tell relay failures apart from programming errors.

    Subclasses:
    - ConfigurationError
    - TransportError / ProtocolError (via RemoteServiceError)
    - ValidationRejection
    - EnqueueFailure
    - HostEventError
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
