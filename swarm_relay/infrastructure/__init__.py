"""Infrastructure layer - adapters, stubs and observability for swarm-relay."""
