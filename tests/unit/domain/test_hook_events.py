"""Unit tests for typed hook events."""

from __future__ import annotations

from swarm_relay.domain.events.hook_events import (
    ChangeEvent,
    FormKind,
    HookEventKind,
    ShelveDeleteEvent,
)


class TestFormKind:
    """Tests for FormKind.from_host."""

    def test_known_kinds(self) -> None:
        assert FormKind.from_host("user") is FormKind.USER
        assert FormKind.from_host("group") is FormKind.GROUP
        assert FormKind.from_host("job") is FormKind.JOB
        assert FormKind.from_host("change") is FormKind.CHANGE

    def test_unknown_kind(self) -> None:
        assert FormKind.from_host("branch") is FormKind.UNKNOWN
        assert FormKind.from_host("") is FormKind.UNKNOWN


class TestHookEventKind:
    """Tests for HookEventKind."""

    def test_form_events(self) -> None:
        assert HookEventKind.FORM_COMMIT.is_form_event
        assert HookEventKind.FORM_SAVE.is_form_event
        assert HookEventKind.FORM_DELETE.is_form_event

    def test_change_events_are_not_form_events(self) -> None:
        assert not HookEventKind.CHANGE_SUBMIT.is_form_event
        assert not HookEventKind.SHELVE_DELETE.is_form_event


class TestEvents:
    """Tests for event payload classes."""

    def test_change_event_defaults(self) -> None:
        event = ChangeEvent(HookEventKind.CHANGE_COMMIT, "12", "alice")

        assert event.client_ip == ""

    def test_shelve_delete_kind(self) -> None:
        event = ShelveDeleteEvent("12", "alice", "ws", "/home", "a.c")

        assert event.kind is HookEventKind.SHELVE_DELETE
