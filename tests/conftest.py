"""
Pytest configuration and shared fixtures for swarm-relay tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the package layers
- Ports are replaced by the in-memory stubs in infrastructure/stubs/
- The real HTTP client is exercised through httpx.MockTransport
"""

from __future__ import annotations

from collections.abc import Iterator
from io import StringIO

import pytest
import structlog

from swarm_relay.config.swarm_config import SwarmConfig, load_config
from swarm_relay.infrastructure.observability import configure_structlog
from swarm_relay.infrastructure.stubs import (
    ChangeDescriptionReaderStub,
    ConfigSourceStub,
    SwarmApiStub,
)

SWARM_TOKEN = "tok"


@pytest.fixture(autouse=True)
def log_output() -> Iterator[StringIO]:
    """Route log lines to a buffer and restore structlog defaults afterwards."""
    buffer = StringIO()
    configure_structlog(debug_level=3, environment="production", sink=buffer)
    yield buffer
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def global_settings() -> dict[str, str]:
    return {
        "Swarm-URL": "https://swarm.example.com",
        "Swarm-Token": SWARM_TOKEN,
        "Swarm-Secure": "true",
        "Debug": "3",
    }


@pytest.fixture
def instance_settings() -> dict[str, str]:
    return {
        "depot-path": "//depot/...",
        "enableWorkflow": "true",
        "enableStrict": "true",
        "httpTimeout": "30",
        "ignoreErrors": "false",
    }


@pytest.fixture
def config(global_settings: dict[str, str], instance_settings: dict[str, str]) -> SwarmConfig:
    """Fully configured snapshot for https://swarm.example.com/."""
    return load_config(global_settings, instance_settings)


@pytest.fixture
def config_source(
    global_settings: dict[str, str], instance_settings: dict[str, str]
) -> ConfigSourceStub:
    return ConfigSourceStub(global_settings, instance_settings)


@pytest.fixture
def swarm_api() -> SwarmApiStub:
    return SwarmApiStub()


@pytest.fixture
def describer() -> ChangeDescriptionReaderStub:
    return ChangeDescriptionReaderStub(default="Fix the build")
