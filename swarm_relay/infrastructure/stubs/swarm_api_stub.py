"""Stub SwarmApi for testing.

Records every call and answers from a per-URL table, falling back to a
passing verdict for GET and an empty 200 for POST. A stub built with
``reachable=False`` answers every call with a transport failure.

WARNING: This stub is for development/testing only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from swarm_relay.application.ports.swarm_api import RemoteResponse, SwarmApi


@dataclass(frozen=True)
class RecordedCall:
    """A call made against the stub.

    Attributes:
        method: "GET" or "POST".
        url: Requested URL.
        body: POST body (None for GET).
        content_type: POST content type (None for GET).
    """

    method: str
    url: str
    body: str | None = None
    content_type: str | None = None


class SwarmApiStub(SwarmApi):
    """Stub implementation of the Swarm API.

    Attributes:
        calls: Every call received, in order.
    """

    def __init__(self, *, reachable: bool = True) -> None:
        self.calls: list[RecordedCall] = []
        self._reachable = reachable
        self._responses: dict[tuple[str, str], RemoteResponse] = {}
        self.closed = False

    def set_get_response(self, url: str, envelope: Any, *, ok: bool = True, status_code: int = 200) -> None:
        self._responses[("GET", url)] = RemoteResponse(ok, status_code, envelope, url)

    def set_post_response(self, url: str, *, ok: bool = True, status_code: int = 200, result: str = "") -> None:
        self._responses[("POST", url)] = RemoteResponse(ok, status_code, result, url)

    def set_verdict(self, url: str, is_valid: bool, messages: list[str] | None = None) -> None:
        """Answer a check URL with a workflow verdict envelope."""
        envelope: dict[str, Any] = {"isValid": is_valid}
        if messages is not None:
            envelope["messages"] = messages
        self.set_get_response(url, envelope)

    def set_reachable(self, reachable: bool) -> None:
        self._reachable = reachable

    @property
    def get_calls(self) -> list[RecordedCall]:
        return [c for c in self.calls if c.method == "GET"]

    @property
    def post_calls(self) -> list[RecordedCall]:
        return [c for c in self.calls if c.method == "POST"]

    def get(self, url: str) -> RemoteResponse:
        self.calls.append(RecordedCall("GET", url))
        return self._answer("GET", url, default=RemoteResponse(True, 200, {"isValid": True}, url))

    def post(self, url: str, body: str, content_type: str) -> RemoteResponse:
        self.calls.append(RecordedCall("POST", url, body, content_type))
        return self._answer("POST", url, default=RemoteResponse(True, 200, "", url))

    def _answer(self, method: str, url: str, default: RemoteResponse) -> RemoteResponse:
        if not self._reachable:
            return RemoteResponse(False, None, None, url)
        return self._responses.get((method, url), default)

    def close(self) -> None:
        self.closed = True
