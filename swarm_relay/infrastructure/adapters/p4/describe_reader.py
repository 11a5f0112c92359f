"""Changelist description reader using the p4 command line client.

Runs ``p4 -ztag -Mj describe -s -m 1 <change>``, which prints one JSON
object per result, and returns the ``desc`` field of the first one. The
server connection comes from the usual P4PORT/P4USER/P4TICKETS settings of
the trigger's environment.
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Sequence

import structlog

from swarm_relay.application.ports.change_description import (
    ChangeDescriptionError,
    ChangeDescriptionReader,
)

log = structlog.get_logger()

DEFAULT_P4_COMMAND: tuple[str, ...] = ("p4",)
DESCRIBE_ARGS: tuple[str, ...] = ("-ztag", "-Mj", "describe", "-s", "-m", "1")


class P4DescribeReader(ChangeDescriptionReader):
    """Reads descriptions by shelling out to p4."""

    def __init__(
        self,
        p4_command: Sequence[str] = DEFAULT_P4_COMMAND,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            p4_command: The p4 executable plus any global options
                (e.g. ["p4", "-p", "ssl:perforce:1666"]).
            timeout_seconds: Upper bound for the p4 call, None for unbounded.
        """
        self._p4_command = tuple(p4_command)
        self._timeout = timeout_seconds

    def describe(self, change: str) -> str:
        args = [*self._p4_command, *DESCRIBE_ARGS, change]
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ChangeDescriptionError(f"Unable to run p4 describe for {change}: {e}") from e

        if result.returncode != 0:
            raise ChangeDescriptionError(
                f"p4 describe {change} failed ({result.returncode}): {result.stderr.strip()}"
            )

        for line in result.stdout.splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ChangeDescriptionError(f"Unreadable p4 describe output for {change}") from e
            if "desc" in record:
                log.debug("change_described", change=change)
                return str(record["desc"])

        raise ChangeDescriptionError(f"No description returned for change {change}")
