"""Configuration module for swarm-relay.

Available Configurations:
- SwarmConfig: Immutable snapshot of the global + instance settings
- event_registrations: Host events the relay subscribes to
"""

from swarm_relay.config.registrations import (
    EventRegistration,
    event_registrations,
    trigger_table_lines,
)
from swarm_relay.config.swarm_config import (
    GLOBAL_CONFIG_DEFAULTS,
    INSTANCE_CONFIG_DEFAULTS,
    NOT_CONFIGURED_MESSAGE,
    SwarmConfig,
    load_config,
    merge_settings,
    parse_setting_value,
)

__all__ = [
    "EventRegistration",
    "GLOBAL_CONFIG_DEFAULTS",
    "INSTANCE_CONFIG_DEFAULTS",
    "NOT_CONFIGURED_MESSAGE",
    "SwarmConfig",
    "event_registrations",
    "load_config",
    "merge_settings",
    "parse_setting_value",
    "trigger_table_lines",
]
