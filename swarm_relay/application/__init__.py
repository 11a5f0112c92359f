"""Application layer - ports and services orchestrating the relay."""
