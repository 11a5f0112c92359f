"""Pure domain services for swarm-relay."""

from swarm_relay.domain.services.file_args import parse_file_args
from swarm_relay.domain.services.path_normalizer import (
    NormalizedPaths,
    infer_separator,
    normalize_paths,
)

__all__: list[str] = [
    "NormalizedPaths",
    "infer_separator",
    "normalize_paths",
    "parse_file_args",
]
