"""Per-event context for log correlation.

Every host event gets an event ID, and the acting user and client address
are bound for its duration, so each log line says who triggered it. The
values live in contextvars and are picked up by the structlog processor
chain.

Usage:
    # At the event boundary
    with event_context(user=event.user, client_ip=event.client_ip):
        handler.handle(event)

    # In structlog configuration
    processors = [..., event_id_processor, ...]
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

import structlog

# Default is empty string to avoid None type issues
_event_id: ContextVar[str] = ContextVar("event_id", default="")


def generate_event_id() -> str:
    """Generate a new event ID (UUID4)."""
    return str(uuid4())


def get_event_id() -> str:
    """Get the current event ID, or "" outside of an event."""
    return _event_id.get()


@contextmanager
def event_context(
    *, user: str = "", client_ip: str = "", event: str = ""
) -> Iterator[str]:
    """Bind event ID, user, client address and event name for one event.

    Args:
        user: Acting user.
        client_ip: Address of the client that triggered the event.
        event: Host event name.

    Yields:
        The generated event ID.
    """
    event_id = generate_event_id()
    token = _event_id.set(event_id)
    structlog.contextvars.bind_contextvars(user=user, host=client_ip, hook=event)
    try:
        yield event_id
    finally:
        structlog.contextvars.unbind_contextvars("user", "host", "hook")
        _event_id.reset(token)


def event_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding the current event_id to every log entry.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with event_id added.
    """
    event_id = get_event_id()
    if event_id:
        event_dict["event_id"] = event_id
    return event_dict
