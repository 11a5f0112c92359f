"""Operator commands: ping, version and validate.

These are run by an administrator to check a relay instance. Each
returns the lines to show and whether the check passed:

    ping      posts "ping,0" to the queue: OK or BAD (reason)
    version   Swarm's version (or "?") and the relay version
    validate  one line per configuration problem, or "Validates OK"
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from swarm_relay.application.ports.swarm_api import SwarmApi
from swarm_relay.application.services.base import LoggingMixin
from swarm_relay.application.services.queue_dispatcher_service import queue_url
from swarm_relay.config.swarm_config import (
    CFG_PATH,
    CFG_STRICT,
    CFG_TIMEOUT,
    CFG_TOKEN,
    CFG_URL,
    CFG_WORKFLOW,
    SwarmConfig,
)
from swarm_relay.domain.models.queue_item import QueueItem, QueueItemType

VERSION_PATH = "api/version"
SWARM_URL_PATTERN = re.compile(r"https?://.*/")


@dataclass(frozen=True)
class CommandResult:
    """Output of an operator command.

    Attributes:
        ok: The check passed.
        lines: Lines to print, in order.
    """

    ok: bool
    lines: list[str] = field(default_factory=list)


class OperatorCommandService(LoggingMixin):
    """Implements the administrator commands for one configuration."""

    def __init__(self, config: SwarmConfig, api: SwarmApi, local_version: str) -> None:
        """Initialize the service.

        Args:
            config: Configuration snapshot. URL and token may be missing.
            api: Swarm API port.
            local_version: Version of this relay.
        """
        self._config = config
        self._api = api
        self._local_version = local_version
        self._init_logger(component="operator")

    def ping(self) -> CommandResult:
        """Check that the queue endpoint accepts items."""
        log = self._log_operation("ping")
        log.info("custom_command")

        if not self._config.url:
            return CommandResult(False, [f"BAD ({CFG_URL} is not set)"])
        if not self._config.token:
            return CommandResult(False, [f"BAD ({CFG_TOKEN} is not set)"])

        item = QueueItem(QueueItemType.PING, "0")
        response = self._api.post(
            queue_url(self._config), item.to_content(), item.content_type
        )
        if response.ok:
            return CommandResult(True, ["OK"])
        if not response.reached_server:
            return CommandResult(False, [f"BAD (Cannot reach '{self._config.url}')"])
        return CommandResult(False, [f"BAD ({response.result})"])

    def swarm_version(self) -> str | None:
        """Ask Swarm for its version.

        Returns:
            The version string, or None if Swarm did not answer properly.
        """
        if not self._config.url:
            return None

        log = self._log_operation("swarm_version")
        response = self._api.get(f"{self._config.url}{VERSION_PATH}")
        version = response.result.get("version") if response.ok else None
        if version is None:
            log.error("swarm_unreachable", url=self._config.url)
            return None

        log.info("swarm_connected", version=str(version))
        return str(version)

    def version(self) -> CommandResult:
        swarm_version = self.swarm_version()
        return CommandResult(
            True,
            [
                f"Swarm Version: {swarm_version or '?'}",
                f"Extension Version: {self._local_version}",
            ],
        )

    def validate(self) -> CommandResult:
        """Check the configuration, reporting every problem found.

        An unreachable Swarm URL stops validation early.
        """
        self._log_operation("validate").debug("validate_config")
        config = self._config
        lines: list[str] = []

        if not config.url:
            lines.append(f"'{CFG_URL}' is nil or empty")
        elif not SWARM_URL_PATTERN.match(config.url):
            lines.append(f"'{CFG_URL}' does not look like a valid URL")
        elif self.swarm_version() is None:
            lines.append(
                f"'{CFG_URL}' does not appear correct, invalid response from web server"
            )
            return CommandResult(False, lines)

        if not config.token:
            lines.append(f"'{CFG_TOKEN}' is nil or empty")

        if not config.depot_path:
            lines.append(f"'{CFG_PATH}' is nil or empty")
        elif not config.depot_path.startswith("//"):
            lines.append(f"'{CFG_PATH}' does not look like a valid depot path")

        if config.workflow_enabled is None:
            lines.append(f"'{CFG_WORKFLOW}' is not set, should be true or false")
        if config.strict_enabled is None:
            lines.append(f"'{CFG_STRICT}' is not set, should be true or false")
        if config.timeout_seconds is None:
            lines.append(f"'{CFG_TIMEOUT}' is not set, should be timeout in seconds")

        if lines:
            return CommandResult(False, lines)
        return CommandResult(True, ["Validates OK"])
