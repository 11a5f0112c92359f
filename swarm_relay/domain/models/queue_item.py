"""Queue items sent to Swarm's worker queue.

Swarm's queue endpoint takes a plain-text body:

    {type},{value}                 flat item (form-encoded)
    {type},{value}\n{json body}    structured item (JSON)

Only shelve deletion uses the structured form.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class QueueItemType(str, Enum):
    """Type tags understood by Swarm's queue workers."""

    PING = "ping"
    COMMIT = "commit"
    SHELVE = "shelve"
    SHELVE_DELETE = "shelvedel"
    USER = "user"
    GROUP = "group"
    JOB = "job"
    CHANGE_SAVE = "changesave"
    USER_DELETE = "userdel"
    GROUP_DELETE = "groupdel"


@dataclass(frozen=True)
class QueueItem:
    """A (type tag, payload) pair for the Swarm queue.

    Attributes:
        type_tag: Queue item type.
        value: Scalar payload (change number, user, group or job name).
        body: Optional JSON body for structured items.
    """

    type_tag: QueueItemType
    value: str
    body: dict[str, Any] | None = None

    @property
    def is_structured(self) -> bool:
        return self.body is not None

    @property
    def content_type(self) -> str:
        return JSON_CONTENT_TYPE if self.is_structured else FORM_CONTENT_TYPE

    def to_content(self) -> str:
        """Render the request body for the queue endpoint."""
        header = f"{self.type_tag.value},{self.value}"
        if self.body is None:
            return header
        return f"{header}\n{json.dumps(self.body)}"
