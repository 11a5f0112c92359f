"""Application ports - abstract interfaces for swarm-relay.

Ports define the contracts the application layer needs from the outside
world: the Swarm HTTP API, the host's configuration storage and the
changelist description lookup.
"""

from swarm_relay.application.ports.change_description import ChangeDescriptionReader
from swarm_relay.application.ports.config_source import ConfigSource
from swarm_relay.application.ports.swarm_api import RemoteResponse, SwarmApi

__all__: list[str] = [
    "ChangeDescriptionReader",
    "ConfigSource",
    "RemoteResponse",
    "SwarmApi",
]
