"""Configuration loader service.

Reads the layered settings once and hands out the same immutable snapshot
until re-initialization is requested. Re-initialization never touches the
old snapshot; it builds a new one.

Usage:
    loader = ConfigLoader(source)
    config = loader.load()      # reads the source
    config = loader.load()      # same snapshot, no read
    config = loader.reload()    # instance config changed: new snapshot
"""

from __future__ import annotations

from collections.abc import Callable

from swarm_relay.application.ports.config_source import ConfigSource
from swarm_relay.application.services.base import LoggingMixin
from swarm_relay.config.swarm_config import CFG_URL, SwarmConfig, load_config


class ConfigLoader(LoggingMixin):
    """Loads and caches the configuration snapshot."""

    def __init__(
        self,
        source: ConfigSource,
        on_load: Callable[[SwarmConfig], None] | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            source: Where the global and instance settings live.
            on_load: Called with every new snapshot before it is logged
                (used to apply the configured Debug level to logging).
        """
        self._source = source
        self._on_load = on_load
        self._snapshot: SwarmConfig | None = None
        self._init_logger()

    @property
    def is_initialized(self) -> bool:
        return self._snapshot is not None

    def load(self) -> SwarmConfig:
        """Return the current snapshot, reading the source on first use.

        Raises:
            ConfigurationError: If a setting is malformed.
        """
        if self._snapshot is None:
            self._snapshot = self._read()
        return self._snapshot

    def reload(self) -> SwarmConfig:
        """Discard the current snapshot and read a new one."""
        self._log_operation("reload").info("config_reload_requested")
        self._snapshot = None
        return self.load()

    def _read(self) -> SwarmConfig:
        config = load_config(
            self._source.global_settings(), self._source.instance_settings()
        )
        if self._on_load is not None:
            self._on_load(config)
            # Logging may have been reconfigured; bind against the new setup
            self._init_logger()

        log = self._log_operation("load")
        log.info("config_initialized", url=config.url, debug_level=config.debug_level)
        for key, value in sorted(config.masked_settings().items()):
            log.debug("config_setting", key=key, value=str(value))
        if config.secure_defaulted:
            log.info("secure_setting_missing", defaulted_to=True)
        if config.url_slash_appended:
            log.info("url_slash_appended", key=CFG_URL, url=config.url)
        return config
