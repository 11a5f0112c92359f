"""Helix Core (p4) adapters."""

from swarm_relay.infrastructure.adapters.p4.describe_reader import P4DescribeReader

__all__ = ["P4DescribeReader"]
