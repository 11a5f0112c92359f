"""Host event registrations.

Which host events the relay listens to, and what each is filtered on:
changelist events by the configured depot path, form events by form type.
The trigger table rendered from this is what an administrator installs
with `p4 triggers`.
"""

from __future__ import annotations

from dataclasses import dataclass

from swarm_relay.config.swarm_config import SwarmConfig
from swarm_relay.domain.events.hook_events import FormKind, HookEventKind

DEFAULT_DEPOT_PATH = "//..."
TRIGGER_NAME_PREFIX = "swarm"


@dataclass(frozen=True)
class EventRegistration:
    """One host event the relay subscribes to.

    Attributes:
        kind: Host event.
        path: Depot path filter (changelist events).
        form_kinds: Form types filter (form events).
    """

    kind: HookEventKind
    path: str | None = None
    form_kinds: tuple[FormKind, ...] = ()

    def filters(self) -> list[str]:
        if self.kind.is_form_event:
            return [kind.value for kind in self.form_kinds]
        return [self.path or DEFAULT_DEPOT_PATH]


def event_registrations(config: SwarmConfig) -> list[EventRegistration]:
    """Build the registration table for the given configuration."""
    path = config.depot_path or DEFAULT_DEPOT_PATH
    return [
        EventRegistration(HookEventKind.CHANGE_COMMIT, path=path),
        EventRegistration(HookEventKind.CHANGE_SUBMIT, path=path),
        EventRegistration(HookEventKind.CHANGE_CONTENT, path=path),
        EventRegistration(HookEventKind.SHELVE_COMMIT, path=path),
        EventRegistration(HookEventKind.SHELVE_SUBMIT, path=path),
        EventRegistration(HookEventKind.SHELVE_DELETE, path=path),
        EventRegistration(
            HookEventKind.FORM_COMMIT,
            form_kinds=(FormKind.JOB, FormKind.USER, FormKind.GROUP),
        ),
        EventRegistration(HookEventKind.FORM_SAVE, form_kinds=(FormKind.CHANGE,)),
        EventRegistration(
            HookEventKind.FORM_DELETE, form_kinds=(FormKind.USER, FormKind.GROUP)
        ),
    ]


# Host variables each event kind hands over, as trigger %var% substitutions.
EVENT_VARIABLES: dict[HookEventKind, tuple[str, ...]] = {
    HookEventKind.CHANGE_SUBMIT: ("change", "user", "clientip"),
    HookEventKind.CHANGE_CONTENT: ("change", "user", "clientip"),
    HookEventKind.CHANGE_COMMIT: ("change", "user", "clientip"),
    HookEventKind.SHELVE_SUBMIT: ("change", "user", "clientip"),
    HookEventKind.SHELVE_COMMIT: ("change", "user", "clientip"),
    HookEventKind.SHELVE_DELETE: (
        "change",
        "user",
        "client",
        "clientcwd",
        "argsQuoted",
        "clientip",
    ),
    HookEventKind.FORM_COMMIT: ("formtype", "formname", "user", "clientip"),
    HookEventKind.FORM_SAVE: ("formtype", "formname", "user", "clientip"),
    HookEventKind.FORM_DELETE: ("formtype", "formname", "user", "clientip"),
}


def trigger_table_lines(
    config: SwarmConfig, command: str = "swarm-relay"
) -> list[str]:
    """Render registrations as Perforce trigger table lines.

    Args:
        config: Configuration snapshot (supplies the depot path filter).
        command: The relay executable as seen by the server.

    Returns:
        One line per (event, filter) pair, ready for `p4 triggers -i`.
    """
    lines: list[str] = []
    for registration in event_registrations(config):
        variables = " ".join(
            f"{name}=%{name}%" for name in EVENT_VARIABLES[registration.kind]
        )
        name = f"{TRIGGER_NAME_PREFIX}.{registration.kind.value.replace('-', '')}"
        for path_or_form in registration.filters():
            lines.append(
                f'\t{name} {registration.kind.value} {path_or_form} '
                f'"{command} event {registration.kind.value} {variables}"'
            )
    return lines
