"""Rewrite shelved-file paths onto one common root directory.

When files are removed from a shelf, the host reports them relative to the
client's working directory, e.g. with cwd ``/home/alice/project/src``:

    a/b/c.txt
    ../docs/c.html
    ../../Makefile

Swarm wants a single root plus root-relative paths so it can merge the
deletion into the open review. The deepest run of leading ``..`` segments
(``max_parents``, here 2) decides how far up the root moves:

    a/b/c.txt       ->  project/src/a/b/c.txt
    ../docs/c.html  ->  project/docs/c.html
    ../../Makefile  ->  project/Makefile
    cwd             ->  /home/alice

The cwd segment directly below the new root anchors every rewritten path,
and a path with fewer parents than ``max_parents`` keeps that many more cwd
segments (``max(max_parents - own parents, 1)`` in total). Depot paths
(``//depot/...``) are left alone and do not count.

Caveat: the anchor segment is added even to paths that already sit at the
deepest ``..`` level, which departs from older relay versions. Those added
nothing in that case. With cwd ``/r/s``, ``../y.c`` becomes ``s/y.c``
under root ``/r`` here, where older versions sent ``y.c``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

PARENT_SEGMENT = ".."
DEPOT_PREFIX = "//"
POSIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"


@dataclass(frozen=True)
class NormalizedPaths:
    """Normalizer output.

    Attributes:
        paths: Rewritten paths, in input order.
        cwd: The common root the relative paths now hang off.
        max_parents: How many levels the root moved up.
    """

    paths: list[str]
    cwd: str
    max_parents: int


def infer_separator(cwd: str) -> str:
    """Guess the client's path separator from its working directory.

    The server does not know the client OS. A cwd that does not start with
    "/" is taken to be a Windows path.
    """
    if cwd.startswith(POSIX_SEPARATOR):
        return POSIX_SEPARATOR
    return WINDOWS_SEPARATOR


def is_depot_path(path: str) -> bool:
    return path.startswith(DEPOT_PREFIX)


def _count_leading_parents(segments: Sequence[str]) -> int:
    count = 0
    for segment in segments:
        if segment != PARENT_SEGMENT:
            break
        count += 1
    return count


def _truncate(cwd: str, levels: int, separator: str) -> str:
    """Drop the last ``levels`` segments of cwd."""
    for _ in range(levels):
        if separator not in cwd:
            break
        cwd = cwd.rsplit(separator, 1)[0]
    return cwd


def normalize_paths(
    paths: Sequence[str], cwd: str, separator: str
) -> NormalizedPaths:
    """Rewrite client-relative paths onto a single common root.

    Args:
        paths: File paths as reported by the host.
        cwd: The client's working directory.
        separator: Path separator of the client ("/" or "\\").

    Returns:
        NormalizedPaths with the rewritten paths and the new root. When no
        path starts with "..", both are returned unchanged.
    """
    max_parents = 0
    for path in paths:
        if is_depot_path(path):
            continue
        max_parents = max(
            max_parents, _count_leading_parents(path.split(separator))
        )

    if max_parents == 0:
        return NormalizedPaths(paths=list(paths), cwd=cwd, max_parents=0)

    cwd_segments = cwd.split(separator)
    root_depth = max(len(cwd_segments) - max_parents, 0)
    rewritten: list[str] = []
    for path in paths:
        if is_depot_path(path):
            rewritten.append(path)
            continue

        segments = path.split(separator)
        num_parents = _count_leading_parents(segments)
        remainder = segments[num_parents:]
        keep = max(max_parents - num_parents, 1)
        prefix = cwd_segments[root_depth : root_depth + keep]
        rewritten.append(separator.join(prefix + remainder))

    return NormalizedPaths(
        paths=rewritten,
        cwd=_truncate(cwd, max_parents, separator),
        max_parents=max_parents,
    )
