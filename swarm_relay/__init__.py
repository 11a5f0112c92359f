"""
swarm-relay - Helix Core event relay for Helix Swarm

Relays changelist submission, shelving and form events raised by a Helix
Core server to a Helix Swarm instance:
- Workflow checks gate submits and shelves on Swarm's verdict
- Commits, shelves and form edits are pushed onto Swarm's worker queue
- Changelists tagged #noswarm (and friends) skip Swarm entirely
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
