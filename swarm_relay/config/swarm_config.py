"""Swarm relay configuration (global + instance settings).

Settings come from two layered sources, global first and instance second.
Instance entries shadow global entries with the same key. Raw values are
strings; they are trimmed, and the literals "true"/"false" become booleans.

Global settings:
- Swarm-URL: Swarm base URL. A missing trailing "/" is appended.
- Swarm-Token: Swarm API token (also used as the queue token).
- Swarm-Secure: Verify TLS certificates and host names (default: true when unset).
- Swarm-Cookies: Extra cookies to send ahead of the token cookie.
- Debug: 0 = errors, 1 = warnings, 2 = info, 3 = debug, 9 = debug echoed to client.

Instance settings:
- depot-path: Path filter the events are registered against (//...).
- enableWorkflow: Run the workflow pre-check on submit.
- enableStrict: Run the strict post-transfer check on submit.
- httpTimeout: Per-request timeout in seconds.
- ignoreErrors: Let host operations proceed when the queue is unreachable.
- ignoredUsers: Users whose events are accepted without contacting Swarm.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

from swarm_relay.domain.errors.configuration import ConfigurationError

# Global configuration keys
CFG_URL = "Swarm-URL"
CFG_TOKEN = "Swarm-Token"
CFG_SECURE = "Swarm-Secure"
CFG_COOKIES = "Swarm-Cookies"
CFG_DEBUG = "Debug"

# Instance configuration keys
CFG_PATH = "depot-path"
CFG_WORKFLOW = "enableWorkflow"
CFG_STRICT = "enableStrict"
CFG_IGNORE_ERRORS = "ignoreErrors"
CFG_IGNORED_USERS = "ignoredUsers"
CFG_TIMEOUT = "httpTimeout"

# Debug level used until a configured one is known
DEFAULT_DEBUG_LEVEL = 3
MIN_DEBUG_LEVEL = 0
MAX_DEBUG_LEVEL = 9
# At this level and above every log line is also sent to the client
CLIENT_ECHO_DEBUG_LEVEL = 9

NOT_CONFIGURED_MESSAGE = "Swarm extension is installed but not properly configured."

# Defaults written into fresh configuration files. The token placeholder
# starts with "..." so an unedited value is easy to spot.
GLOBAL_CONFIG_DEFAULTS: dict[str, str] = {
    CFG_URL: "http://localhost/",
    CFG_TOKEN: "... SWARM-TOKEN",
    CFG_SECURE: "true",
    CFG_DEBUG: "2",
}

INSTANCE_CONFIG_DEFAULTS: dict[str, str] = {
    CFG_PATH: "//...",
    CFG_WORKFLOW: "true",
    CFG_STRICT: "true",
    CFG_TIMEOUT: "30",
    CFG_IGNORE_ERRORS: "false",
}

SettingValue = Union[str, bool]


def parse_setting_value(raw: str | None) -> SettingValue:
    """Normalize one raw setting value.

    Args:
        raw: The value as stored by the host (may be None).

    Returns:
        True/False for the literals "true"/"false", otherwise the trimmed
        string ("" for blank values).
    """
    value = (raw or "").strip()
    if value == "true":
        return True
    if value == "false":
        return False
    return value


def merge_settings(
    global_settings: Mapping[str, str | None],
    instance_settings: Mapping[str, str | None],
) -> dict[str, SettingValue]:
    """Layer instance settings over global settings.

    Returns:
        A new dict of parsed values; instance keys win on collision.
    """
    merged: dict[str, SettingValue] = {}
    for source in (global_settings, instance_settings):
        for key, raw in source.items():
            merged[key] = parse_setting_value(raw)
    return merged


def _text(settings: Mapping[str, SettingValue], key: str) -> str | None:
    value = settings.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _flag(settings: Mapping[str, SettingValue], key: str) -> bool | None:
    value = settings.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    raise ConfigurationError(f"'{key}' should be true or false, got [{value}]", key=key)


def _integer(settings: Mapping[str, SettingValue], key: str) -> int | None:
    value = _text(settings, key)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"'{key}' should be a whole number, got [{value}]", key=key) from None


def _split_users(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(u for u in re.split(r"[,\s]+", value) if u)


@dataclass(frozen=True)
class SwarmConfig:
    """Immutable configuration snapshot.

    A snapshot is never mutated. Re-initialization (the host's "instance
    config changed" signal) builds a new one.

    Attributes:
        url: Swarm base URL, always ending in "/" when set.
        token: Swarm API token.
        secure: Verify TLS. None means the flag was never supplied.
        cookies: Extra cookie string sent ahead of the token cookie.
        debug_level: 0-9 verbosity.
        depot_path: Event path filter.
        workflow_enabled: Run the enforced pre-check (None if unset).
        strict_enabled: Run the strict post-transfer check (None if unset).
        timeout_seconds: Per-request timeout, None for unbounded calls.
        ignore_errors: Let host operations proceed on queue failures.
        ignored_users: Users whose events bypass Swarm entirely.
        url_slash_appended: The trailing "/" was added during loading.
        secure_defaulted: Swarm-Secure was unset and defaulted to True.
        settings: The merged raw settings the snapshot was built from.
    """

    url: str | None = None
    token: str | None = None
    secure: bool | None = None
    cookies: str | None = None
    debug_level: int = DEFAULT_DEBUG_LEVEL
    depot_path: str | None = None
    workflow_enabled: bool | None = None
    strict_enabled: bool | None = None
    timeout_seconds: int | None = None
    ignore_errors: bool = False
    ignored_users: tuple[str, ...] = ()
    url_slash_appended: bool = False
    secure_defaulted: bool = False
    settings: Mapping[str, SettingValue] = field(
        default_factory=lambda: MappingProxyType({}), repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If the debug level or timeout is out of range.
        """
        if not MIN_DEBUG_LEVEL <= self.debug_level <= MAX_DEBUG_LEVEL:
            raise ConfigurationError(
                f"'{CFG_DEBUG}' must be between {MIN_DEBUG_LEVEL} and "
                f"{MAX_DEBUG_LEVEL}, got {self.debug_level}",
                key=CFG_DEBUG,
            )
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ConfigurationError(
                f"'{CFG_TIMEOUT}' must be a positive number of seconds, "
                f"got {self.timeout_seconds}",
                key=CFG_TIMEOUT,
            )

    @property
    def is_connection_configured(self) -> bool:
        return bool(self.url) and bool(self.token)

    @property
    def echo_to_client(self) -> bool:
        """Log lines are also written to the client at this debug level."""
        return self.debug_level >= CLIENT_ECHO_DEBUG_LEVEL

    @property
    def verify_tls(self) -> bool:
        """TLS verification flag handed to the HTTP client.

        An unset flag means no verification. load_config() always fills the
        flag in, so this only applies to snapshots built by hand.
        """
        return bool(self.secure) if self.secure is not None else False

    def require_connection(self) -> None:
        """Ensure the Swarm URL and token are both set.

        Raises:
            ConfigurationError: If either is missing.
        """
        if not self.is_connection_configured:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

    def is_ignored_user(self, user: str) -> bool:
        return user in self.ignored_users

    def masked_settings(self) -> dict[str, SettingValue]:
        """Merged settings with the token hidden, for logging."""
        masked = dict(self.settings)
        if masked.get(CFG_TOKEN):
            masked[CFG_TOKEN] = "****"
        return masked


def load_config(
    global_settings: Mapping[str, str | None],
    instance_settings: Mapping[str, str | None],
) -> SwarmConfig:
    """Build a configuration snapshot from the two setting layers.

    Args:
        global_settings: Server-wide settings.
        instance_settings: Settings of this relay instance (win on collision).

    Returns:
        A frozen SwarmConfig.

    Raises:
        ConfigurationError: If a boolean, integer or ranged value is malformed.
    """
    settings = merge_settings(global_settings, instance_settings)

    url = _text(settings, CFG_URL) or None
    url_slash_appended = False
    if url and not url.endswith("/"):
        url = url + "/"
        url_slash_appended = True

    secure = _flag(settings, CFG_SECURE)
    secure_defaulted = secure is None
    if secure is None:
        secure = True

    debug_level = _integer(settings, CFG_DEBUG)

    return SwarmConfig(
        url=url,
        token=_text(settings, CFG_TOKEN) or None,
        secure=secure,
        cookies=_text(settings, CFG_COOKIES) or None,
        debug_level=DEFAULT_DEBUG_LEVEL if debug_level is None else debug_level,
        depot_path=_text(settings, CFG_PATH) or None,
        workflow_enabled=_flag(settings, CFG_WORKFLOW),
        strict_enabled=_flag(settings, CFG_STRICT),
        timeout_seconds=_integer(settings, CFG_TIMEOUT),
        ignore_errors=bool(_flag(settings, CFG_IGNORE_ERRORS)),
        ignored_users=_split_users(_text(settings, CFG_IGNORED_USERS)),
        url_slash_appended=url_slash_appended,
        secure_defaulted=secure_defaulted,
        settings=MappingProxyType(settings),
    )
