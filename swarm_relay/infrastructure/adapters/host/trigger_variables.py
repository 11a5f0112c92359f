"""Build typed hook events from trigger variables.

A trigger invocation hands the relay its event name and the host
variables as ``name=value`` arguments (see config.registrations for the
substitutions each event uses):

    swarm-relay event change-submit change=1234 user=alice clientip=10.0.0.5

Values may contain "=" and spaces; only the first "=" separates the name.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from swarm_relay.domain.errors.host_event import HostEventError
from swarm_relay.domain.events.hook_events import (
    CHANGE_EVENT_KINDS,
    ChangeEvent,
    FormEvent,
    FormKind,
    HookEvent,
    HookEventKind,
    ShelveDeleteEvent,
)


def parse_variable_args(args: Iterable[str]) -> dict[str, str]:
    """Split ``name=value`` arguments into a variable mapping.

    Raises:
        ValueError: If an argument has no "=" or an empty name.
    """
    variables: dict[str, str] = {}
    for arg in args:
        name, sep, value = arg.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got [{arg}]")
        variables[name] = value
    return variables


def parse_event_kind(event_name: str) -> HookEventKind:
    try:
        return HookEventKind(event_name)
    except ValueError:
        raise HostEventError(f"Unknown event [{event_name}]", event_name) from None


def _require(variables: Mapping[str, str], name: str, event_name: str) -> str:
    value = variables.get(name)
    if value is None:
        raise HostEventError(
            f"Event [{event_name}] is missing variable [{name}]", event_name
        )
    return value


def build_hook_event(event_name: str, variables: Mapping[str, str]) -> HookEvent:
    """Turn an event name and its variables into a typed event.

    Args:
        event_name: Host event name, e.g. "change-submit".
        variables: Host variables for the event.

    Returns:
        ChangeEvent, ShelveDeleteEvent or FormEvent.

    Raises:
        HostEventError: If the event is unknown or a required variable is
            missing.
    """
    kind = parse_event_kind(event_name)
    user = _require(variables, "user", event_name)
    client_ip = variables.get("clientip", "")

    if kind in CHANGE_EVENT_KINDS:
        return ChangeEvent(
            kind=kind,
            change=_require(variables, "change", event_name),
            user=user,
            client_ip=client_ip,
        )

    if kind is HookEventKind.SHELVE_DELETE:
        return ShelveDeleteEvent(
            change=_require(variables, "change", event_name),
            user=user,
            client=variables.get("client", ""),
            cwd=_require(variables, "clientcwd", event_name),
            args_quoted=variables.get("argsQuoted", ""),
            client_ip=client_ip,
        )

    form_type = _require(variables, "formtype", event_name)
    return FormEvent(
        kind=kind,
        form_kind=FormKind.from_host(form_type),
        form_type=form_type,
        form_name=_require(variables, "formname", event_name),
        user=user,
        client_ip=client_ip,
    )
