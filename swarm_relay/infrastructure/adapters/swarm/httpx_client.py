"""HTTP client for the Swarm API, built on httpx.

Response classification:
- GET: usable only if the transport worked AND the body is a JSON object.
  A ``version`` field marks the version probe and is returned as-is; an
  ``error`` field turns the call into a failure.
- POST: usable only on HTTP 200. Other statuses carry an HTML/percent
  escaped error text in the body, which is decoded for the user.
- No response at all (refused, DNS, timeout): failure with no status code.

Security note: TLS verification follows Swarm-Secure. A snapshot with the
flag unset does NOT verify certificates (see SwarmConfig.verify_tls).
"""

from __future__ import annotations

import html
from typing import Any
from urllib.parse import unquote

import httpx
import structlog

from swarm_relay.application.ports.swarm_api import RemoteResponse, SwarmApi
from swarm_relay.config.swarm_config import SwarmConfig

log = structlog.get_logger()

TOKEN_COOKIE = "Swarm-Token"
UNEXPECTED_FORMAT = "Unexpected response format"


def classify_envelope(data: Any, status_code: int, url: str = "") -> RemoteResponse:
    """Classify a parsed Swarm JSON envelope.

    Args:
        data: Parsed JSON body.
        status_code: HTTP status of the response.
        url: The URL that was called.

    Returns:
        RemoteResponse with the envelope, or the wrapped error text.
    """
    if not isinstance(data, dict):
        return RemoteResponse(False, status_code, UNEXPECTED_FORMAT, url)

    # The version probe has its own shape
    if data.get("version") is not None:
        return RemoteResponse(True, status_code, data, url)

    if data.get("error") is not None:
        return RemoteResponse(
            False, status_code, f"Swarm returned an error ({data['error']})", url
        )

    return RemoteResponse(True, status_code, data, url)


def decode_error_body(body: str) -> str:
    """Turn an escaped Swarm error body into plain text.

    Percent-encoding is undone first; &quot; becomes a single quote so the
    text can be embedded in quoted client messages; other HTML entities are
    decoded as usual.
    """
    text = unquote(body)
    text = text.replace("&quot;", "'")
    return html.unescape(text).strip()


class HttpxSwarmClient(SwarmApi):
    """Blocking Swarm API client.

    Example:
        with HttpxSwarmClient(config) as client:
            response = client.get(config.url + "api/version")
    """

    def __init__(
        self,
        config: SwarmConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            config: Configuration snapshot (token, cookies, TLS, timeout).
            transport: Optional httpx transport, e.g. httpx.MockTransport.
        """
        self._config = config
        # timeout=None leaves calls unbounded when httpTimeout is not set
        self._client = httpx.Client(
            verify=config.verify_tls,
            timeout=config.timeout_seconds,
            transport=transport,
        )

    def __enter__(self) -> HttpxSwarmClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _get_cookie_header(self) -> str:
        cookie = f"{TOKEN_COOKIE}={self._config.token or ''}"
        if self._config.cookies:
            # Configured cookies must come first in the list
            cookie = f"{self._config.cookies};{cookie}"
        return cookie

    def get(self, url: str) -> RemoteResponse:
        log.debug("swarm_get", url=url)
        try:
            response = self._client.get(
                url, headers={"Cookie": self._get_cookie_header()}
            )
        except httpx.RequestError as e:
            log.warning("swarm_get_failed", url=url, error=str(e))
            return RemoteResponse(False, None, None, url)

        log.debug("swarm_get_response", url=url, status_code=response.status_code, body=response.text)

        try:
            data = response.json()
        except ValueError:
            log.warning("swarm_response_not_json", url=url, body=response.text)
            return RemoteResponse(False, response.status_code, UNEXPECTED_FORMAT, url)

        return classify_envelope(data, response.status_code, url)

    def post(self, url: str, body: str, content_type: str) -> RemoteResponse:
        headers = {"Content-Type": content_type}
        if self._config.cookies:
            headers["Cookie"] = self._config.cookies

        log.debug("swarm_post", url=url, body=body)
        try:
            response = self._client.post(
                url, content=body.encode("utf-8"), headers=headers
            )
        except httpx.RequestError as e:
            log.error("swarm_post_unreachable", url=url, error=str(e))
            return RemoteResponse(False, None, None, url)

        if response.status_code == 200:
            return RemoteResponse(True, 200, "", url)

        message = decode_error_body(response.text)
        log.error(
            "swarm_post_failed",
            url=url,
            status_code=response.status_code,
            message=message,
        )
        return RemoteResponse(False, response.status_code, message, url)

    def close(self) -> None:
        """Close HTTP client."""
        self._client.close()
