"""Swarm API port - interface for calls to the Swarm service.

The contract mirrors what callers need to decide on: was the call usable,
what status came back, and either the parsed JSON envelope (success) or a
plain-text error (failure). A transport failure has neither a status code
nor a result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from swarm_relay.domain.errors.remote import (
    ProtocolError,
    RemoteServiceError,
    TransportError,
)


@dataclass(frozen=True)
class RemoteResponse:
    """Classified response from a Swarm call.

    Attributes:
        ok: The call succeeded and ``result`` is usable.
        status_code: HTTP status code, or None when nothing came back.
        result: Parsed envelope on a successful GET, "" on a successful
            POST, the error text on a failure, None on a transport failure.
        url: The URL that was called.
    """

    ok: bool
    status_code: int | None
    result: Any
    url: str = ""

    @property
    def reached_server(self) -> bool:
        return self.status_code is not None

    def to_error(self) -> RemoteServiceError:
        """Turn a failed response into the matching domain error."""
        if not self.reached_server:
            return TransportError(self.url)
        detail = self.result if isinstance(self.result, str) else None
        return ProtocolError(self.url, self.status_code, detail)

    def raise_for_outcome(self) -> None:
        """Raise TransportError or ProtocolError if the call failed."""
        if not self.ok:
            raise self.to_error()


class SwarmApi(ABC):
    """Abstract interface for the Swarm HTTP API."""

    @abstractmethod
    def get(self, url: str) -> RemoteResponse:
        """GET a JSON envelope from Swarm.

        Args:
            url: Absolute URL.

        Returns:
            RemoteResponse; ok only if the body parsed and carried no error.
        """
        ...

    @abstractmethod
    def post(self, url: str, body: str, content_type: str) -> RemoteResponse:
        """POST a body to Swarm.

        Args:
            url: Absolute URL.
            body: Request body.
            content_type: Content-Type header value.

        Returns:
            RemoteResponse; ok only on HTTP 200.
        """
        ...

    def close(self) -> None:
        """Release any held connections."""
