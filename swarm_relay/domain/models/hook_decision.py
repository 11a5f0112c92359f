"""Outcome of handling a single host event."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HookDecision:
    """Accept/reject decision returned to the host server.

    Attributes:
        accepted: True lets the host operation proceed.
        message: Optional message for the submitting user. Rejections
            usually carry one; accepted decisions only for warnings.
    """

    accepted: bool
    message: str | None = None

    @classmethod
    def accept(cls, message: str | None = None) -> HookDecision:
        return cls(accepted=True, message=message)

    @classmethod
    def reject(cls, message: str) -> HookDecision:
        return cls(accepted=False, message=message)

    @property
    def exit_code(self) -> int:
        """Trigger exit status: 0 lets the operation proceed."""
        return 0 if self.accepted else 1
