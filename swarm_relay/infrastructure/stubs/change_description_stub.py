"""Stub ChangeDescriptionReader for testing.

WARNING: This stub is for development/testing only.
"""

from __future__ import annotations

from swarm_relay.application.ports.change_description import (
    ChangeDescriptionError,
    ChangeDescriptionReader,
)


class ChangeDescriptionReaderStub(ChangeDescriptionReader):
    """Returns configured descriptions and counts lookups.

    Attributes:
        lookups: Change numbers described, in order.
    """

    def __init__(
        self,
        descriptions: dict[str, str] | None = None,
        *,
        default: str = "",
        fail: bool = False,
    ) -> None:
        self._descriptions = dict(descriptions or {})
        self._default = default
        self._fail = fail
        self.lookups: list[str] = []

    def set_description(self, change: str, description: str) -> None:
        self._descriptions[change] = description

    def describe(self, change: str) -> str:
        self.lookups.append(change)
        if self._fail:
            raise ChangeDescriptionError(f"Unable to describe change {change}")
        return self._descriptions.get(change, self._default)
