"""Unit tests for ConfigLoader."""

from __future__ import annotations

import json
from io import StringIO

import pytest

from swarm_relay.application.services.config_loader_service import ConfigLoader
from swarm_relay.config.swarm_config import SwarmConfig
from swarm_relay.domain.errors.configuration import ConfigurationError
from swarm_relay.infrastructure.stubs import ConfigSourceStub


class TestConfigLoader:
    """Tests for snapshot caching and re-initialization."""

    def test_load_reads_once(self, config_source: ConfigSourceStub) -> None:
        loader = ConfigLoader(config_source)

        first = loader.load()
        second = loader.load()

        assert first is second
        assert config_source.read_count == 1
        assert loader.is_initialized

    def test_reload_builds_new_snapshot(self, config_source: ConfigSourceStub) -> None:
        loader = ConfigLoader(config_source)
        first = loader.load()

        config_source.set_instance("enableStrict", "false")
        second = loader.reload()

        assert second is not first
        assert first.strict_enabled is True
        assert second.strict_enabled is False
        assert config_source.read_count == 2

    def test_on_load_sees_each_snapshot(self, config_source: ConfigSourceStub) -> None:
        seen: list[SwarmConfig] = []
        loader = ConfigLoader(config_source, on_load=seen.append)

        loader.load()
        loader.load()
        loader.reload()

        assert len(seen) == 2

    def test_malformed_setting_raises(self) -> None:
        loader = ConfigLoader(ConfigSourceStub({}, {"ignoreErrors": "maybe"}))

        with pytest.raises(ConfigurationError):
            loader.load()
        assert not loader.is_initialized

    def test_logs_initialization_with_masked_token(
        self, config_source: ConfigSourceStub, log_output: StringIO
    ) -> None:
        ConfigLoader(config_source).load()

        entries = [json.loads(line) for line in log_output.getvalue().splitlines()]
        events = [e["event"] for e in entries]
        assert "config_initialized" in events
        assert "url_slash_appended" in events
        token_lines = [e for e in entries if e.get("key") == "Swarm-Token"]
        assert token_lines[0]["value"] == "****"
        assert "tok" not in [e.get("value") for e in entries]

    def test_logs_secure_default(self, log_output: StringIO) -> None:
        ConfigLoader(ConfigSourceStub({"Swarm-URL": "https://swarm/"}, {})).load()

        assert "secure_setting_missing" in log_output.getvalue()
