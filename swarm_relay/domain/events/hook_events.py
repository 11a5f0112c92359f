"""Typed hook event payloads.

The host exposes per-event variables (change, user, client, clientcwd,
argsQuoted, formtype, formname, ...) as a loose string bag. These classes
give each event kind a fixed shape:

- ChangeEvent: change-submit, change-content, change-commit,
  shelve-submit, shelve-commit
- ShelveDeleteEvent: shelve-delete (carries the client's cwd and the raw
  quoted argument list)
- FormEvent: form-commit, form-save, form-delete
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class HookEventKind(str, Enum):
    """Host event names, as used in trigger and extension registrations."""

    CHANGE_SUBMIT = "change-submit"
    CHANGE_CONTENT = "change-content"
    CHANGE_COMMIT = "change-commit"
    SHELVE_SUBMIT = "shelve-submit"
    SHELVE_COMMIT = "shelve-commit"
    SHELVE_DELETE = "shelve-delete"
    FORM_COMMIT = "form-commit"
    FORM_SAVE = "form-save"
    FORM_DELETE = "form-delete"

    @property
    def is_form_event(self) -> bool:
        return self in FORM_EVENT_KINDS


FORM_EVENT_KINDS = frozenset(
    {HookEventKind.FORM_COMMIT, HookEventKind.FORM_SAVE, HookEventKind.FORM_DELETE}
)

CHANGE_EVENT_KINDS = frozenset(
    {
        HookEventKind.CHANGE_SUBMIT,
        HookEventKind.CHANGE_CONTENT,
        HookEventKind.CHANGE_COMMIT,
        HookEventKind.SHELVE_SUBMIT,
        HookEventKind.SHELVE_COMMIT,
    }
)


class FormKind(str, Enum):
    """Form types that Swarm cares about.

    UNKNOWN stands for every other form type the host may report (branch,
    client, label, ...). Those events are accepted without queueing.
    """

    USER = "user"
    GROUP = "group"
    JOB = "job"
    CHANGE = "change"
    UNKNOWN = "unknown"

    @classmethod
    def from_host(cls, value: str) -> FormKind:
        try:
            kind = cls(value.strip())
        except ValueError:
            return cls.UNKNOWN
        return kind


@dataclass(frozen=True)
class ChangeEvent:
    """A changelist event (submit, content, commit, shelve submit/commit).

    Attributes:
        kind: Which host event this is.
        change: Changelist number as reported by the host.
        user: Acting user.
        client_ip: Address of the submitting client, for logging.
    """

    kind: HookEventKind
    change: str
    user: str
    client_ip: str = ""


@dataclass(frozen=True)
class ShelveDeleteEvent:
    """Files removed from a shelved changelist.

    Attributes:
        change: Shelved changelist number.
        user: Acting user.
        client: Client workspace name.
        cwd: The client's working directory, in the client's own OS syntax.
        args_quoted: Raw comma-separated, quoted argument list of the command.
        client_ip: Address of the submitting client, for logging.
    """

    change: str
    user: str
    client: str
    cwd: str
    args_quoted: str
    client_ip: str = ""

    @property
    def kind(self) -> HookEventKind:
        return HookEventKind.SHELVE_DELETE


@dataclass(frozen=True)
class FormEvent:
    """A spec form was committed, saved or deleted.

    Attributes:
        kind: form-commit, form-save or form-delete.
        form_kind: The form type.
        form_type: The form type exactly as the host reported it.
        form_name: Name of the entity (user, group, job name or change number).
        user: Acting user.
        client_ip: Address of the submitting client, for logging.
    """

    kind: HookEventKind
    form_kind: FormKind
    form_type: str
    form_name: str
    user: str
    client_ip: str = ""


HookEvent = Union[ChangeEvent, ShelveDeleteEvent, FormEvent]
