"""In-memory stub implementations of the application ports.

WARNING: These stubs are for development/testing only.
"""

from swarm_relay.infrastructure.stubs.change_description_stub import (
    ChangeDescriptionReaderStub,
)
from swarm_relay.infrastructure.stubs.config_source_stub import ConfigSourceStub
from swarm_relay.infrastructure.stubs.swarm_api_stub import RecordedCall, SwarmApiStub

__all__: list[str] = [
    "ChangeDescriptionReaderStub",
    "ConfigSourceStub",
    "RecordedCall",
    "SwarmApiStub",
]
