"""Remote service errors.

Two failure shapes exist when talking to Swarm:

- TransportError: no HTTP response at all (unreachable, refused, timed out).
  No status code is available.
- ProtocolError: Swarm answered, but not with something usable (non-200 on a
  POST, a body that is not JSON, or an envelope carrying an ``error`` field).
  The status code is available.

During workflow validation both are fail-closed. During enqueue they are
subject to the ignoreErrors setting.
"""

from swarm_relay.domain.exceptions import SwarmRelayError


class RemoteServiceError(SwarmRelayError):
    """Base class for failures talking to the Swarm service.

    Attributes:
        url: The URL that was being called.
        status_code: HTTP status code, or None if no response arrived.
        detail: Plain-text detail from the response, if any.
    """

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class TransportError(RemoteServiceError):
    """Swarm could not be reached, or the call timed out."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Swarm server not reachable at [{url}]", url=url)


class ProtocolError(RemoteServiceError):
    """Swarm responded, but with an error or an unusable body."""

    def __init__(self, url: str, status_code: int | None, detail: str | None) -> None:
        super().__init__(
            f"Swarm returned {status_code} for [{url}] ({detail or ''})",
            url=url,
            status_code=status_code,
            detail=detail,
        )
