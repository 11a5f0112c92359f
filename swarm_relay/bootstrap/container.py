"""Bootstrap wiring for the relay runtime.

RelayRuntime owns the configuration loader and builds the services for
each configuration snapshot. Adapters are created through factories so
tests can swap in stubs:

    runtime = RelayRuntime(
        ConfigSourceStub(global_settings, instance_settings),
        api_factory=lambda config: SwarmApiStub(),
        describer_factory=lambda config: ChangeDescriptionReaderStub(),
    )
    decision = runtime.handle_event(event)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TextIO

from swarm_relay import __version__
from swarm_relay.application.ports.change_description import ChangeDescriptionReader
from swarm_relay.application.ports.config_source import ConfigSource
from swarm_relay.application.ports.swarm_api import SwarmApi
from swarm_relay.application.services.config_loader_service import ConfigLoader
from swarm_relay.application.services.event_handler_service import SwarmEventHandler
from swarm_relay.application.services.exception_matcher_service import (
    ExceptionTagMatcher,
)
from swarm_relay.application.services.operator_command_service import (
    OperatorCommandService,
)
from swarm_relay.application.services.queue_dispatcher_service import (
    QueueDispatcherService,
)
from swarm_relay.application.services.validation_workflow_service import (
    ValidationWorkflowService,
)
from swarm_relay.bootstrap.logging import configure_logging
from swarm_relay.config.swarm_config import SwarmConfig
from swarm_relay.domain.errors.configuration import ConfigurationError
from swarm_relay.domain.events.hook_events import HookEvent
from swarm_relay.domain.models.hook_decision import HookDecision
from swarm_relay.infrastructure.adapters.p4.describe_reader import P4DescribeReader
from swarm_relay.infrastructure.adapters.swarm.httpx_client import HttpxSwarmClient
from swarm_relay.infrastructure.observability import (
    event_context,
    get_logger_for_service,
)
from swarm_relay.infrastructure.observability.logging import ClientOutput

ApiFactory = Callable[[SwarmConfig], SwarmApi]
DescriberFactory = Callable[[SwarmConfig], ChangeDescriptionReader]


def _default_describer(config: SwarmConfig) -> ChangeDescriptionReader:
    return P4DescribeReader(timeout_seconds=config.timeout_seconds)


@dataclass(frozen=True)
class RelayServices:
    """Services wired for one configuration snapshot."""

    config: SwarmConfig
    api: SwarmApi
    handler: SwarmEventHandler
    commands: OperatorCommandService


def build_services(
    config: SwarmConfig,
    api: SwarmApi,
    describer: ChangeDescriptionReader,
    local_version: str = __version__,
) -> RelayServices:
    """Wire the application services around one snapshot."""
    workflow = ValidationWorkflowService(config, api, ExceptionTagMatcher(describer))
    dispatcher = QueueDispatcherService(config, api)
    return RelayServices(
        config=config,
        api=api,
        handler=SwarmEventHandler(config, workflow, dispatcher),
        commands=OperatorCommandService(config, api, local_version),
    )


class RelayRuntime:
    """Configuration loader plus per-snapshot service wiring."""

    def __init__(
        self,
        source: ConfigSource,
        *,
        api_factory: ApiFactory = HttpxSwarmClient,
        describer_factory: DescriberFactory = _default_describer,
        client_output: ClientOutput | None = None,
        log_sink: TextIO | None = None,
    ) -> None:
        """Initialize the runtime.

        Args:
            source: Where the settings live.
            api_factory: Builds the Swarm API adapter for a snapshot.
            describer_factory: Builds the description reader for a snapshot.
            client_output: Receives log echo at Debug level 9.
            log_sink: Stream for log lines (default: log file or stderr).
        """
        self._api_factory = api_factory
        self._describer_factory = describer_factory
        self._client_output = client_output
        self._log_sink = log_sink
        self._log = get_logger_for_service(self.__class__.__name__, component="bootstrap")
        self.loader = ConfigLoader(source, on_load=self._apply_logging)

    def _apply_logging(self, config: SwarmConfig) -> None:
        client_output = self._client_output if config.echo_to_client else None
        configure_logging(config.debug_level, client_output=client_output, sink=self._log_sink)

    def config(self) -> SwarmConfig:
        """Current snapshot, loaded on first use.

        Raises:
            ConfigurationError: If a setting is malformed.
        """
        return self.loader.load()

    def reload(self) -> SwarmConfig:
        """Re-initialize after the instance configuration changed."""
        return self.loader.reload()

    @contextmanager
    def services(self) -> Iterator[RelayServices]:
        """Services for the current snapshot; the API adapter is closed on exit."""
        config = self.config()
        api = self._api_factory(config)
        try:
            yield build_services(config, api, self._describer_factory(config))
        finally:
            api.close()

    def handle_event(self, event: HookEvent) -> HookDecision:
        """Handle one host event end to end.

        Configuration problems reject the event with their message.
        """
        with event_context(
            user=event.user, client_ip=event.client_ip, event=event.kind.value
        ):
            try:
                with self.services() as services:
                    return services.handler.handle(event)
            except ConfigurationError as e:
                self._log.error("configuration_invalid", error=str(e), key=e.key)
                return HookDecision.reject(str(e))
