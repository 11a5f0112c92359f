"""Application services for the Swarm relay."""

from swarm_relay.application.services.base import LoggingMixin
from swarm_relay.application.services.config_loader_service import ConfigLoader
from swarm_relay.application.services.event_handler_service import (
    FORM_QUEUE_TYPES,
    SwarmEventHandler,
)
from swarm_relay.application.services.exception_matcher_service import (
    EXCEPTION_TAGS,
    ExceptionTagMatcher,
    find_exception_tag,
)
from swarm_relay.application.services.operator_command_service import (
    CommandResult,
    OperatorCommandService,
)
from swarm_relay.application.services.queue_dispatcher_service import (
    MISSING_SETTING_MESSAGE,
    QueueDispatcherService,
    queue_url,
    shelve_delete_body,
)
from swarm_relay.application.services.validation_workflow_service import (
    CHECK_FAILURE_MESSAGES,
    CheckType,
    ValidationWorkflowService,
    check_url,
)

__all__ = [
    "CHECK_FAILURE_MESSAGES",
    "CheckType",
    "CommandResult",
    "ConfigLoader",
    "EXCEPTION_TAGS",
    "ExceptionTagMatcher",
    "FORM_QUEUE_TYPES",
    "LoggingMixin",
    "MISSING_SETTING_MESSAGE",
    "OperatorCommandService",
    "QueueDispatcherService",
    "SwarmEventHandler",
    "ValidationWorkflowService",
    "check_url",
    "find_exception_tag",
    "queue_url",
    "shelve_delete_body",
]
