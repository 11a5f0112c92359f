"""Unit tests for the ping, version and validate commands."""

from __future__ import annotations

from dataclasses import replace

from swarm_relay.application.services.operator_command_service import (
    OperatorCommandService,
)
from swarm_relay.config.swarm_config import SwarmConfig
from swarm_relay.infrastructure.stubs import SwarmApiStub

VERSION_URL = "https://swarm.example.com/api/version"
QUEUE_URL = "https://swarm.example.com/queue/add/tok"


def _commands(config: SwarmConfig, api: SwarmApiStub) -> OperatorCommandService:
    return OperatorCommandService(config, api, "0.1.0")


class TestPing:
    """Tests for ping."""

    def test_ok(self, config: SwarmConfig, swarm_api: SwarmApiStub) -> None:
        result = _commands(config, swarm_api).ping()

        assert result.ok
        assert result.lines == ["OK"]
        assert swarm_api.post_calls[0].url == QUEUE_URL
        assert swarm_api.post_calls[0].body == "ping,0"

    def test_url_not_set(self, swarm_api: SwarmApiStub) -> None:
        result = _commands(SwarmConfig(token="tok"), swarm_api).ping()

        assert not result.ok
        assert result.lines == ["BAD (Swarm-URL is not set)"]

    def test_token_not_set(self, swarm_api: SwarmApiStub) -> None:
        result = _commands(SwarmConfig(url="https://swarm.example.com/"), swarm_api).ping()

        assert result.lines == ["BAD (Swarm-Token is not set)"]

    def test_unreachable(self, config: SwarmConfig) -> None:
        result = _commands(config, SwarmApiStub(reachable=False)).ping()

        assert not result.ok
        assert result.lines == ["BAD (Cannot reach 'https://swarm.example.com/')"]

    def test_server_error(self, config: SwarmConfig, swarm_api: SwarmApiStub) -> None:
        swarm_api.set_post_response(QUEUE_URL, ok=False, status_code=403, result="Invalid token")

        result = _commands(config, swarm_api).ping()

        assert not result.ok
        assert result.lines == ["BAD (Invalid token)"]


class TestVersion:
    """Tests for version."""

    def test_known_version(self, config: SwarmConfig, swarm_api: SwarmApiStub) -> None:
        swarm_api.set_get_response(VERSION_URL, {"version": "2022.1/2268697"})

        result = _commands(config, swarm_api).version()

        assert result.lines == ["Swarm Version: 2022.1/2268697", "Extension Version: 0.1.0"]

    def test_unknown_version(self, config: SwarmConfig) -> None:
        result = _commands(config, SwarmApiStub(reachable=False)).version()

        assert result.ok
        assert result.lines == ["Swarm Version: ?", "Extension Version: 0.1.0"]

    def test_no_url(self, swarm_api: SwarmApiStub) -> None:
        result = _commands(SwarmConfig(), swarm_api).version()

        assert result.lines[0] == "Swarm Version: ?"
        assert swarm_api.calls == []


class TestValidate:
    """Tests for validate."""

    def test_valid_configuration(self, config: SwarmConfig, swarm_api: SwarmApiStub) -> None:
        swarm_api.set_get_response(VERSION_URL, {"version": "2022.1"})

        result = _commands(config, swarm_api).validate()

        assert result.ok
        assert result.lines == ["Validates OK"]

    def test_unreachable_stops_early(self, config: SwarmConfig) -> None:
        config = replace(config, token=None, depot_path=None)

        result = _commands(config, SwarmApiStub(reachable=False)).validate()

        assert not result.ok
        assert result.lines == [
            "'Swarm-URL' does not appear correct, invalid response from web server"
        ]

    def test_reports_every_problem(self, swarm_api: SwarmApiStub) -> None:
        result = _commands(SwarmConfig(depot_path="depot/main"), swarm_api).validate()

        assert not result.ok
        assert result.lines == [
            "'Swarm-URL' is nil or empty",
            "'Swarm-Token' is nil or empty",
            "'depot-path' does not look like a valid depot path",
            "'enableWorkflow' is not set, should be true or false",
            "'enableStrict' is not set, should be true or false",
            "'httpTimeout' is not set, should be timeout in seconds",
        ]

    def test_bad_url_and_missing_path(self, swarm_api: SwarmApiStub) -> None:
        config = SwarmConfig(
            url="swarm.example.com/",
            token="tok",
            workflow_enabled=False,
            strict_enabled=False,
            timeout_seconds=10,
        )

        result = _commands(config, swarm_api).validate()

        assert result.lines == [
            "'Swarm-URL' does not look like a valid URL",
            "'depot-path' is nil or empty",
        ]
        assert swarm_api.calls == []

    def test_false_flags_count_as_set(self, config: SwarmConfig, swarm_api: SwarmApiStub) -> None:
        swarm_api.set_get_response(VERSION_URL, {"version": "2022.1"})
        config = replace(config, workflow_enabled=False, strict_enabled=False)

        assert _commands(config, swarm_api).validate().ok
