"""Configuration source backed by two dotenv-format files.

Example global file (swarm-global.env):

    Swarm-URL=https://swarm.example.com/
    Swarm-Token=7F2B...
    Swarm-Secure=true
    Debug=2

Example instance file (swarm-instance.env):

    depot-path=//depot/...
    enableWorkflow=true
    enableStrict=false
    httpTimeout=30
    ignoreErrors=false

Environment Variables:
- SWARM_RELAY_GLOBAL_CONFIG: Path of the global settings file
- SWARM_RELAY_INSTANCE_CONFIG: Path of the instance settings file
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from swarm_relay.application.ports.config_source import ConfigSource
from swarm_relay.domain.errors.configuration import ConfigurationError

GLOBAL_CONFIG_ENV = "SWARM_RELAY_GLOBAL_CONFIG"
INSTANCE_CONFIG_ENV = "SWARM_RELAY_INSTANCE_CONFIG"


class DotenvConfigSource(ConfigSource):
    """Reads the global and instance settings with python-dotenv.

    A file that is not configured contributes no settings. A file that is
    configured but missing is a configuration error.
    """

    def __init__(
        self,
        global_path: Path | None = None,
        instance_path: Path | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            global_path: Global settings file. Defaults to SWARM_RELAY_GLOBAL_CONFIG.
            instance_path: Instance settings file. Defaults to SWARM_RELAY_INSTANCE_CONFIG.
        """
        self.global_path = global_path or _path_from_env(GLOBAL_CONFIG_ENV)
        self.instance_path = instance_path or _path_from_env(INSTANCE_CONFIG_ENV)

    def global_settings(self) -> Mapping[str, str | None]:
        return _read(self.global_path)

    def instance_settings(self) -> Mapping[str, str | None]:
        return _read(self.instance_path)


def _path_from_env(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


def _read(path: Path | None) -> dict[str, str | None]:
    if path is None:
        return {}
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")
    return dict(dotenv_values(path))
