"""Swarm HTTP adapter."""

from swarm_relay.infrastructure.adapters.swarm.httpx_client import (
    HttpxSwarmClient,
    classify_envelope,
    decode_error_body,
)

__all__ = ["HttpxSwarmClient", "classify_envelope", "decode_error_body"]
