"""Swarm event handler.

Single entry point for typed host events. Every event goes through the
same steps:

1. The connection settings must be present, otherwise reject.
2. Events from ignored users are accepted without contacting Swarm.
3. The event is routed by kind:

    change-submit    workflow pre-check
    change-content   workflow post-transfer check
    shelve-submit    workflow shelve check
    change-commit    queue "commit"
    shelve-commit    queue "shelve"
    shelve-delete    queue "shelvedel" with normalized paths
    form-commit      queue "job" / "user" / "group"
    form-save        queue "changesave" (change forms)
    form-delete      queue "userdel" / "groupdel"

Form events with a form type Swarm does not track are accepted as-is.
"""

from __future__ import annotations

from swarm_relay.application.services.base import LoggingMixin
from swarm_relay.application.services.queue_dispatcher_service import (
    QueueDispatcherService,
)
from swarm_relay.application.services.validation_workflow_service import (
    ValidationWorkflowService,
)
from swarm_relay.config.swarm_config import SwarmConfig
from swarm_relay.domain.errors.configuration import ConfigurationError
from swarm_relay.domain.events.hook_events import (
    ChangeEvent,
    FormEvent,
    FormKind,
    HookEvent,
    HookEventKind,
    ShelveDeleteEvent,
)
from swarm_relay.domain.models.hook_decision import HookDecision
from swarm_relay.domain.models.queue_item import QueueItemType

# Queue item type per (form event, form kind). Pairs not listed are not
# tracked by Swarm.
FORM_QUEUE_TYPES: dict[tuple[HookEventKind, FormKind], QueueItemType] = {
    (HookEventKind.FORM_COMMIT, FormKind.JOB): QueueItemType.JOB,
    (HookEventKind.FORM_COMMIT, FormKind.USER): QueueItemType.USER,
    (HookEventKind.FORM_COMMIT, FormKind.GROUP): QueueItemType.GROUP,
    (HookEventKind.FORM_SAVE, FormKind.CHANGE): QueueItemType.CHANGE_SAVE,
    (HookEventKind.FORM_DELETE, FormKind.USER): QueueItemType.USER_DELETE,
    (HookEventKind.FORM_DELETE, FormKind.GROUP): QueueItemType.GROUP_DELETE,
}


class SwarmEventHandler(LoggingMixin):
    """Routes host events to the workflow checks or the queue."""

    def __init__(
        self,
        config: SwarmConfig,
        workflow: ValidationWorkflowService,
        dispatcher: QueueDispatcherService,
    ) -> None:
        self._config = config
        self._workflow = workflow
        self._dispatcher = dispatcher
        self._init_logger()

    def handle(self, event: HookEvent) -> HookDecision:
        """Handle one host event.

        Args:
            event: The typed event.

        Returns:
            The decision for the host.
        """
        log = self._log_operation("handle", kind=event.kind.value)
        log.info("event_received")

        try:
            self._config.require_connection()
        except ConfigurationError as e:
            log.error("relay_not_configured")
            return HookDecision.reject(str(e))

        if self._config.is_ignored_user(event.user):
            log.info("ignored_user_event_accepted", user=event.user)
            return HookDecision.accept()

        if isinstance(event, ShelveDeleteEvent):
            return self._dispatcher.enqueue_shelve_delete(event)
        if isinstance(event, FormEvent):
            return self._handle_form(event)
        return self._handle_change(event)

    def _handle_change(self, event: ChangeEvent) -> HookDecision:
        kind = event.kind
        if kind is HookEventKind.CHANGE_SUBMIT:
            return self._workflow.pre_check(event.change, event.user)
        elif kind is HookEventKind.CHANGE_CONTENT:
            return self._workflow.post_transfer_check(event.change, event.user)
        elif kind is HookEventKind.SHELVE_SUBMIT:
            return self._workflow.shelve_check(event.change, event.user)
        elif kind is HookEventKind.CHANGE_COMMIT:
            return self._dispatcher.enqueue(QueueItemType.COMMIT, event.change)
        elif kind is HookEventKind.SHELVE_COMMIT:
            return self._dispatcher.enqueue(QueueItemType.SHELVE, event.change)
        raise ValueError(f"Not a changelist event: {kind.value}")

    def _handle_form(self, event: FormEvent) -> HookDecision:
        item_type = FORM_QUEUE_TYPES.get((event.kind, event.form_kind))
        if item_type is None:
            self._log_operation(
                "handle_form", kind=event.kind.value, form_type=event.form_type
            ).debug("form_event_not_tracked")
            return HookDecision.accept()
        return self._dispatcher.enqueue(item_type, event.form_name)
