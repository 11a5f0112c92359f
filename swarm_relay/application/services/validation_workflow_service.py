"""Validation workflow service.

Three checks gate changelists on Swarm's verdict:

- pre-check (change-submit): before file transfer, metadata only, fast.
  Runs when enableWorkflow is on.
- post-transfer check (change-content): after file transfer, content
  aware. Runs when enableWorkflow and enableStrict are both on.
- shelve check (shelve-submit): always runs.

Every check first asks the exception matcher, and an exempt changelist is
accepted without contacting Swarm. Otherwise Swarm's verdict decides. When
Swarm cannot be reached or answers with an error, the check fails closed
with a fixed message asking the user to contact their administrator.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote, urlencode

from swarm_relay.application.ports.change_description import ChangeDescriptionError
from swarm_relay.application.ports.swarm_api import SwarmApi
from swarm_relay.application.services.base import LoggingMixin
from swarm_relay.application.services.exception_matcher_service import (
    ExceptionTagMatcher,
)
from swarm_relay.config.swarm_config import SwarmConfig
from swarm_relay.domain.errors.remote import RemoteServiceError
from swarm_relay.domain.errors.validation import ValidationRejection
from swarm_relay.domain.models.hook_decision import HookDecision
from swarm_relay.domain.models.verdict import RemoteVerdict

API_CHANGES = "api/v9/changes/"


class CheckType(str, Enum):
    """Swarm changelist check types."""

    ENFORCED = "enforced"
    STRICT = "strict"
    SHELVE = "shelve"


# Shown to the user when Swarm could not give a verdict
CHECK_FAILURE_MESSAGES: dict[CheckType, str] = {
    CheckType.ENFORCED: (
        "ChangeSubmit error: Swarm workflow validation failed. "
        "Contact your administrator."
    ),
    CheckType.STRICT: (
        "ChangeContent Error: Call to Swarm failed. Contact your administrator."
    ),
    CheckType.SHELVE: (
        "ShelveSubmit Error: Call to Swarm failed. Contact your administrator."
    ),
}


def check_url(base_url: str, change: str, check: CheckType, user: str) -> str:
    """Build the changelist check URL for one check type."""
    query = urlencode({"type": check.value, "user": user})
    return f"{base_url}{API_CHANGES}{quote(change, safe='')}/check?{query}"


class ValidationWorkflowService(LoggingMixin):
    """Runs Swarm workflow checks for one configuration snapshot.

    Nothing is shared between checks apart from the configuration: each
    call re-reads the description and asks Swarm afresh.
    """

    def __init__(
        self,
        config: SwarmConfig,
        api: SwarmApi,
        matcher: ExceptionTagMatcher,
    ) -> None:
        """Initialize the service.

        Args:
            config: Configuration snapshot; URL and token must be set.
            api: Swarm API port.
            matcher: Exception tag matcher.
        """
        self._config = config
        self._api = api
        self._matcher = matcher
        self._init_logger()

    def pre_check(self, change: str, user: str) -> HookDecision:
        """Fast workflow check before file transfer (change-submit)."""
        if not self._config.workflow_enabled:
            return HookDecision.accept()
        return self._run_check(CheckType.ENFORCED, change, user)

    def post_transfer_check(self, change: str, user: str) -> HookDecision:
        """Strict check after file transfer (change-content)."""
        if not (self._config.workflow_enabled and self._config.strict_enabled):
            return HookDecision.accept()
        return self._run_check(CheckType.STRICT, change, user)

    def shelve_check(self, change: str, user: str) -> HookDecision:
        """Check before a shelf is submitted (shelve-submit)."""
        return self._run_check(CheckType.SHELVE, change, user)

    def _run_check(self, check: CheckType, change: str, user: str) -> HookDecision:
        log = self._log_operation("run_check", check=check.value, change=change)

        if self._is_exempt(change):
            return HookDecision.accept()

        url = check_url(self._config.url or "", change, check, user)
        try:
            verdict = self._fetch_verdict(url)
            verdict.ensure_valid()
        except ValidationRejection as e:
            log.warning("check_rejected", messages=e.messages)
            return HookDecision.reject(str(e))
        except RemoteServiceError as e:
            log.error("check_call_failed", url=url, status_code=e.status_code, error=str(e))
            return HookDecision.reject(CHECK_FAILURE_MESSAGES[check])

        log.debug("check_passed")
        return HookDecision.accept()

    def _is_exempt(self, change: str) -> bool:
        try:
            return self._matcher.is_exception(change)
        except ChangeDescriptionError as e:
            # Unreadable description: let Swarm decide
            self._log_operation("is_exempt", change=change).warning(
                "description_unavailable", error=str(e)
            )
            return False

    def _fetch_verdict(self, url: str) -> RemoteVerdict:
        response = self._api.get(url)
        response.raise_for_outcome()
        return RemoteVerdict.from_envelope(response.result)
