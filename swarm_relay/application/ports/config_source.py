"""Config source port - where the layered relay settings are stored."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping


class ConfigSource(ABC):
    """Abstract interface for the host's key/value configuration storage.

    Two layers exist. Global settings are shared by every relay instance on
    the server; instance settings belong to one instance and take priority.
    """

    @abstractmethod
    def global_settings(self) -> Mapping[str, str | None]:
        """Return the raw global settings."""
        ...

    @abstractmethod
    def instance_settings(self) -> Mapping[str, str | None]:
        """Return the raw instance settings."""
        ...
