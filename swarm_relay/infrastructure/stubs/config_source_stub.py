"""Stub ConfigSource holding settings in memory.

WARNING: This stub is for development/testing only.
"""

from __future__ import annotations

from collections.abc import Mapping

from swarm_relay.application.ports.config_source import ConfigSource


class ConfigSourceStub(ConfigSource):
    """In-memory global and instance settings.

    Settings can be replaced between loads to exercise re-initialization.
    """

    def __init__(
        self,
        global_settings: Mapping[str, str | None] | None = None,
        instance_settings: Mapping[str, str | None] | None = None,
    ) -> None:
        self._global = dict(global_settings or {})
        self._instance = dict(instance_settings or {})
        self.read_count = 0

    def global_settings(self) -> Mapping[str, str | None]:
        self.read_count += 1
        return dict(self._global)

    def instance_settings(self) -> Mapping[str, str | None]:
        return dict(self._instance)

    def set_global(self, key: str, value: str | None) -> None:
        self._global[key] = value

    def set_instance(self, key: str, value: str | None) -> None:
        self._instance[key] = value
