"""Queue dispatcher service.

Posts (type, value) items to Swarm's worker queue so Swarm notices
commits, shelves and spec changes. Delivery is best effort: whether a
failed post blocks the host operation depends only on ignoreErrors.

    ignoreErrors=true   accept, with "Warning: ..." for the user
    ignoreErrors=false  reject, with "ERROR: ..." for the user
"""

from __future__ import annotations

from typing import Any

from swarm_relay.application.ports.swarm_api import SwarmApi
from swarm_relay.application.services.base import LoggingMixin
from swarm_relay.config.swarm_config import CFG_TOKEN, CFG_URL, SwarmConfig
from swarm_relay.domain.errors.queue import EnqueueFailure
from swarm_relay.domain.events.hook_events import ShelveDeleteEvent
from swarm_relay.domain.models.hook_decision import HookDecision
from swarm_relay.domain.models.queue_item import QueueItem, QueueItemType
from swarm_relay.domain.services.file_args import parse_file_args
from swarm_relay.domain.services.path_normalizer import (
    infer_separator,
    normalize_paths,
)

QUEUE_PATH = "queue/add/"

MISSING_SETTING_MESSAGE = (
    "Swarm extension value '{key}' has not been set. "
    "Contact your HelixCore administrator."
)


def queue_url(config: SwarmConfig) -> str:
    """URL of the queue endpoint; the token is part of the path."""
    return f"{config.url or ''}{QUEUE_PATH}{config.token or ''}"


def shelve_delete_body(event: ShelveDeleteEvent) -> dict[str, Any]:
    """Build the JSON body describing files removed from a shelf.

    The file arguments are re-rooted under a common directory so Swarm can
    map them back onto the shelved files.
    """
    files = parse_file_args(event.args_quoted)
    normalized = normalize_paths(files, event.cwd, infer_separator(event.cwd))
    return {
        "user": event.user,
        "client": event.client,
        "cwd": normalized.cwd,
        "files": normalized.paths,
    }


class QueueDispatcherService(LoggingMixin):
    """Sends queue items to Swarm and applies the error policy."""

    def __init__(self, config: SwarmConfig, api: SwarmApi) -> None:
        """Initialize the dispatcher.

        Args:
            config: Configuration snapshot.
            api: Swarm API port.
        """
        self._config = config
        self._api = api
        self._init_logger()

    @property
    def queue_url(self) -> str:
        return queue_url(self._config)

    def enqueue(self, type_tag: QueueItemType, value: str) -> HookDecision:
        """Post a flat ``type,value`` item."""
        return self.dispatch(QueueItem(type_tag, value))

    def enqueue_structured(
        self, type_tag: QueueItemType, value: str, body: dict[str, Any]
    ) -> HookDecision:
        """Post a ``type,value`` item followed by a JSON body."""
        return self.dispatch(QueueItem(type_tag, value, body))

    def enqueue_shelve_delete(self, event: ShelveDeleteEvent) -> HookDecision:
        """Post the structured shelve-delete item for one event."""
        body = shelve_delete_body(event)
        self._log_operation("enqueue_shelve_delete", change=event.change).debug(
            "shelve_delete_payload", body=body
        )
        return self.enqueue_structured(QueueItemType.SHELVE_DELETE, event.change, body)

    def dispatch(self, item: QueueItem) -> HookDecision:
        """Post one item and turn the outcome into a host decision.

        Args:
            item: The queue item.

        Returns:
            Accept on success. On failure, accept with a warning or reject
            with an error, depending on ignoreErrors.
        """
        log = self._log_operation(
            "dispatch", type_tag=item.type_tag.value, value=item.value
        )
        log.info("queue_add")

        missing = self._missing_setting()
        if missing is not None:
            log.error("queue_setting_missing", key=missing)
            return HookDecision.reject(MISSING_SETTING_MESSAGE.format(key=missing))

        try:
            self._send(item)
        except EnqueueFailure as e:
            return self._apply_error_policy(e)

        log.debug("queue_add_sent")
        return HookDecision.accept()

    def _missing_setting(self) -> str | None:
        if not self._config.url:
            return CFG_URL
        if not self._config.token:
            return CFG_TOKEN
        return None

    def _send(self, item: QueueItem) -> None:
        response = self._api.post(self.queue_url, item.to_content(), item.content_type)
        if response.ok:
            return
        detail = response.result if response.reached_server else None
        raise EnqueueFailure(item.type_tag.value, response.status_code, detail)

    def _apply_error_policy(self, failure: EnqueueFailure) -> HookDecision:
        log = self._log_operation(
            "apply_error_policy",
            type_tag=failure.type_tag,
            status_code=failure.status_code,
        )
        if self._config.ignore_errors:
            log.error("queue_add_failed_ignored", error=str(failure))
            return HookDecision.accept(failure.user_message("Warning"))

        log.error("queue_add_failed", error=str(failure))
        return HookDecision.reject(failure.user_message("ERROR"))
