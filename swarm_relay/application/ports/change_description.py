"""Change description port - reads a changelist's description text."""

from __future__ import annotations

from abc import ABC, abstractmethod

from swarm_relay.domain.exceptions import SwarmRelayError


class ChangeDescriptionError(SwarmRelayError):
    """The description of a changelist could not be read."""


class ChangeDescriptionReader(ABC):
    """Abstract interface for fetching changelist descriptions.

    Each call is a fresh, synchronous read from the server. Results are
    never cached: a description can be edited between two events of the
    same submit.
    """

    @abstractmethod
    def describe(self, change: str) -> str:
        """Return the description of a changelist.

        Args:
            change: Changelist number.

        Raises:
            ChangeDescriptionError: If the server could not be queried.
        """
        ...
