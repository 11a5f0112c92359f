"""Configuration storage adapters."""

from swarm_relay.infrastructure.adapters.config.dotenv_source import DotenvConfigSource

__all__ = ["DotenvConfigSource"]
