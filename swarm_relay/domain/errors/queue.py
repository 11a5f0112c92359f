"""Queue errors."""

from swarm_relay.domain.exceptions import SwarmRelayError


class EnqueueFailure(SwarmRelayError):
    """A POST to the Swarm queue endpoint failed.

    Whether this blocks the host operation depends only on ignoreErrors.

    Attributes:
        type_tag: Queue item type that failed to send.
        status_code: HTTP status code, or None if Swarm was not reachable.
        detail: Decoded error text from Swarm, or None if there was none.
    """

    def __init__(
        self, type_tag: str, status_code: int | None = None, detail: str | None = None
    ) -> None:
        self.type_tag = type_tag
        self.status_code = status_code
        self.detail = detail
        super().__init__(
            f"Failed to queue [{type_tag}] item"
            + (f": {status_code} ({detail})" if status_code is not None else ": server not reachable")
        )

    def user_message(self, prefix: str) -> str:
        """Build the client-facing message.

        Args:
            prefix: "Warning" or "ERROR", depending on the error policy.
        """
        if self.detail is not None:
            return f"{prefix}: Swarm communication error ({self.detail})"
        return f"{prefix}: Unable to communicate with Swarm server"
