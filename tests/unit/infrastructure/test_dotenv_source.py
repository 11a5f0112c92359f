"""Unit tests for DotenvConfigSource."""

from __future__ import annotations

from pathlib import Path

import pytest

from swarm_relay.config.swarm_config import load_config
from swarm_relay.domain.errors.configuration import ConfigurationError
from swarm_relay.infrastructure.adapters.config.dotenv_source import (
    GLOBAL_CONFIG_ENV,
    INSTANCE_CONFIG_ENV,
    DotenvConfigSource,
)


@pytest.fixture
def config_files(tmp_path: Path) -> tuple[Path, Path]:
    global_file = tmp_path / "global.env"
    global_file.write_text(
        "Swarm-URL=https://swarm.example.com\nSwarm-Token=tok\nDebug=1\n",
        encoding="utf-8",
    )
    instance_file = tmp_path / "instance.env"
    instance_file.write_text(
        "depot-path=//depot/...\nenableWorkflow=true\nDebug=2\n",
        encoding="utf-8",
    )
    return global_file, instance_file


class TestDotenvConfigSource:
    """Tests for reading settings files."""

    def test_reads_both_files(self, config_files: tuple[Path, Path]) -> None:
        source = DotenvConfigSource(*config_files)

        assert source.global_settings()["Swarm-Token"] == "tok"
        assert source.instance_settings()["depot-path"] == "//depot/..."

    def test_layers_into_config(self, config_files: tuple[Path, Path]) -> None:
        source = DotenvConfigSource(*config_files)

        config = load_config(source.global_settings(), source.instance_settings())

        assert config.debug_level == 2
        assert config.workflow_enabled is True
        assert config.url == "https://swarm.example.com/"

    def test_paths_from_environment(
        self, config_files: tuple[Path, Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(GLOBAL_CONFIG_ENV, str(config_files[0]))
        monkeypatch.setenv(INSTANCE_CONFIG_ENV, str(config_files[1]))

        source = DotenvConfigSource()

        assert source.global_path == config_files[0]
        assert source.instance_settings()["enableWorkflow"] == "true"

    def test_unconfigured_file_is_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(GLOBAL_CONFIG_ENV, raising=False)
        monkeypatch.delenv(INSTANCE_CONFIG_ENV, raising=False)

        source = DotenvConfigSource()

        assert source.global_settings() == {}
        assert source.instance_settings() == {}

    def test_missing_file_is_error(self, tmp_path: Path) -> None:
        source = DotenvConfigSource(global_path=tmp_path / "missing.env")

        with pytest.raises(ConfigurationError, match="not found"):
            source.global_settings()
