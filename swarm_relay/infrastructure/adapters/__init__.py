"""Infrastructure adapters - concrete implementations of application ports."""

from swarm_relay.infrastructure.adapters.config.dotenv_source import DotenvConfigSource
from swarm_relay.infrastructure.adapters.p4.describe_reader import P4DescribeReader
from swarm_relay.infrastructure.adapters.swarm.httpx_client import HttpxSwarmClient

__all__: list[str] = [
    "DotenvConfigSource",
    "HttpxSwarmClient",
    "P4DescribeReader",
]
