"""Remote verdict returned by Swarm's changelist check endpoint.

Envelope shape:
    {"isValid": bool, "messages": [str, ...], ...}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from swarm_relay.domain.errors.validation import ValidationRejection


@dataclass(frozen=True)
class RemoteVerdict:
    """Result of a workflow check.

    Attributes:
        is_valid: Whether Swarm accepts the changelist.
        messages: Ordered, human-readable messages explaining the verdict.
    """

    is_valid: bool
    messages: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_envelope(cls, envelope: dict[str, Any]) -> RemoteVerdict:
        """Create from a parsed Swarm response envelope.

        A missing ``isValid`` is treated as invalid; a missing or null
        ``messages`` list as empty.
        """
        messages = envelope.get("messages") or []
        return cls(
            is_valid=bool(envelope.get("isValid")),
            messages=tuple(str(m) for m in messages),
        )

    @property
    def joined_messages(self) -> str:
        """Messages joined in order with "; " (empty string if none)."""
        return "; ".join(self.messages)

    def ensure_valid(self) -> None:
        """Raise ValidationRejection unless the verdict is valid.

        Raises:
            ValidationRejection: Carrying the verdict's messages.
        """
        if not self.is_valid:
            raise ValidationRejection(list(self.messages), self.joined_messages)
