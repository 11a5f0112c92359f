"""Unit tests for the queue dispatcher."""

from __future__ import annotations

import json
from dataclasses import replace

from swarm_relay.application.services.queue_dispatcher_service import (
    QueueDispatcherService,
    shelve_delete_body,
)
from swarm_relay.config.swarm_config import SwarmConfig
from swarm_relay.domain.events.hook_events import ShelveDeleteEvent
from swarm_relay.domain.models.queue_item import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    QueueItemType,
)
from swarm_relay.infrastructure.stubs import SwarmApiStub

QUEUE_URL = "https://swarm.example.com/queue/add/tok"


class TestEnqueue:
    """Tests for flat queue items."""

    def test_posts_type_and_value(self, config: SwarmConfig, swarm_api: SwarmApiStub) -> None:
        decision = QueueDispatcherService(config, swarm_api).enqueue(QueueItemType.COMMIT, "12")

        assert decision.accepted
        assert decision.message is None
        call = swarm_api.post_calls[0]
        assert call.url == QUEUE_URL
        assert call.body == "commit,12"
        assert call.content_type == FORM_CONTENT_TYPE

    def test_transport_failure_rejects(self, config: SwarmConfig) -> None:
        api = SwarmApiStub(reachable=False)

        decision = QueueDispatcherService(config, api).enqueue(QueueItemType.COMMIT, "12")

        assert not decision.accepted
        assert "Unable to communicate" in decision.message
        assert decision.message.startswith("ERROR:")

    def test_transport_failure_ignored(self, config: SwarmConfig) -> None:
        config = replace(config, ignore_errors=True)
        api = SwarmApiStub(reachable=False)

        decision = QueueDispatcherService(config, api).enqueue(QueueItemType.COMMIT, "12")

        assert decision.accepted
        assert decision.message == "Warning: Unable to communicate with Swarm server"

    def test_server_error_detail(self, config: SwarmConfig, swarm_api: SwarmApiStub) -> None:
        swarm_api.set_post_response(QUEUE_URL, ok=False, status_code=500, result="it's broken")

        decision = QueueDispatcherService(config, swarm_api).enqueue(QueueItemType.JOB, "job000001")

        assert not decision.accepted
        assert decision.message == "ERROR: Swarm communication error (it's broken)"

    def test_missing_url(self, swarm_api: SwarmApiStub) -> None:
        config = SwarmConfig(token="tok")

        decision = QueueDispatcherService(config, swarm_api).enqueue(QueueItemType.COMMIT, "12")

        assert not decision.accepted
        assert decision.message == (
            "Swarm extension value 'Swarm-URL' has not been set. "
            "Contact your HelixCore administrator."
        )
        assert swarm_api.calls == []

    def test_missing_token(self, swarm_api: SwarmApiStub) -> None:
        config = SwarmConfig(url="https://swarm.example.com/")

        decision = QueueDispatcherService(config, swarm_api).enqueue(QueueItemType.COMMIT, "12")

        assert "'Swarm-Token' has not been set" in decision.message
        assert swarm_api.calls == []

    def test_missing_setting_not_ignored(self, swarm_api: SwarmApiStub) -> None:
        """ignoreErrors covers delivery failures, not missing settings."""
        config = SwarmConfig(token="tok", ignore_errors=True)

        decision = QueueDispatcherService(config, swarm_api).enqueue(QueueItemType.COMMIT, "12")

        assert not decision.accepted


class TestShelveDelete:
    """Tests for the structured shelve-delete item."""

    def test_payload(self) -> None:
        event = ShelveDeleteEvent(
            change="12",
            user="alice",
            client="alice-ws",
            cwd="/home/alice/project/src",
            args_quoted="-d,-c,12,a/b/c.txt,../docs/c.html,../../Makefile",
        )

        body = shelve_delete_body(event)

        assert body == {
            "user": "alice",
            "client": "alice-ws",
            "cwd": "/home/alice",
            "files": ["project/src/a/b/c.txt", "project/docs/c.html", "project/Makefile"],
        }

    def test_posted_as_json(self, config: SwarmConfig, swarm_api: SwarmApiStub) -> None:
        event = ShelveDeleteEvent("12", "alice", "ws", "C:\\ws", "-d,-c,12,a.txt")

        decision = QueueDispatcherService(config, swarm_api).enqueue_shelve_delete(event)

        assert decision.accepted
        call = swarm_api.post_calls[0]
        assert call.content_type == JSON_CONTENT_TYPE
        header, body = call.body.split("\n", 1)
        assert header == "shelvedel,12"
        assert json.loads(body)["files"] == ["a.txt"]
        assert json.loads(body)["cwd"] == "C:\\ws"

    def test_structured_failure_follows_policy(self, config: SwarmConfig) -> None:
        config = replace(config, ignore_errors=True)
        event = ShelveDeleteEvent("12", "alice", "ws", "/ws", "a.txt")

        decision = QueueDispatcherService(config, SwarmApiStub(reachable=False)).enqueue_shelve_delete(
            event
        )

        assert decision.accepted
        assert decision.message.startswith("Warning:")


class TestEnqueueStructured:
    """Tests for structured items with a JSON body."""

    def test_header_then_json_body(self, config: SwarmConfig, swarm_api: SwarmApiStub) -> None:
        body = {"user": "alice", "files": ["a.txt"]}

        decision = QueueDispatcherService(config, swarm_api).enqueue_structured(
            QueueItemType.SHELVE_DELETE, "12", body
        )

        assert decision.accepted
        call = swarm_api.post_calls[0]
        assert call.url == QUEUE_URL
        assert call.content_type == JSON_CONTENT_TYPE
        header, payload = call.body.split("\n", 1)
        assert header == "shelvedel,12"
        assert json.loads(payload) == body

    def test_shelve_delete_goes_through_structured_path(
        self, config: SwarmConfig, swarm_api: SwarmApiStub, monkeypatch
    ) -> None:
        service = QueueDispatcherService(config, swarm_api)
        seen: list[tuple] = []
        original = service.enqueue_structured

        def recording(type_tag, value, body):
            seen.append((type_tag, value, body))
            return original(type_tag, value, body)

        monkeypatch.setattr(service, "enqueue_structured", recording)
        event = ShelveDeleteEvent("12", "alice", "ws", "/ws", "-d,-c,12,a.txt")

        service.enqueue_shelve_delete(event)

        assert seen == [(QueueItemType.SHELVE_DELETE, "12", shelve_delete_body(event))]
        assert swarm_api.post_calls[0].content_type == JSON_CONTENT_TYPE
