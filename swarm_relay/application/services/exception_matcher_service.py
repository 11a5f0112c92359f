"""Exception tag matcher.

A changelist whose description contains one of the exception tags opts
out of every Swarm check (typically very large submits). The tags are
matched literally and case-sensitively, anywhere in the description.
"""

from __future__ import annotations

from swarm_relay.application.ports.change_description import ChangeDescriptionReader
from swarm_relay.application.services.base import LoggingMixin

EXCEPTION_TAGS: tuple[str, ...] = ("#noswarm", "#no-swarm", "#skipswarm", "#skip-swarm")


def find_exception_tag(description: str) -> str | None:
    """Return the first exception tag found in the description, if any."""
    for tag in EXCEPTION_TAGS:
        if tag in description:
            return tag
    return None


class ExceptionTagMatcher(LoggingMixin):
    """Decides whether a changelist is exempt from Swarm validation."""

    def __init__(self, reader: ChangeDescriptionReader) -> None:
        """Initialize the matcher.

        Args:
            reader: Source of changelist descriptions. Read on every call.
        """
        self._reader = reader
        self._init_logger()

    def is_exception(self, change: str) -> bool:
        """Check the changelist description for an exception tag.

        Args:
            change: Changelist number.

        Returns:
            True if the changelist should skip Swarm workflows.

        Raises:
            ChangeDescriptionError: If the description could not be read.
        """
        log = self._log_operation("is_exception", change=change)
        log.info("checking_exception_tags")

        tag = find_exception_tag(self._reader.describe(change))
        if tag is None:
            return False

        log.info("exception_tag_found", tag=tag)
        return True
