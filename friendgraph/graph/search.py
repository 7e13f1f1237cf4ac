"""
Shortest connection search between two people using BFS.

The first time BFS discovers the destination it has used the fewest
possible hops, so the search stops right there and rebuilds the path
from the parent links.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from friendgraph.graph.store import FriendGraph

logger = logging.getLogger(__name__)


class ConnectionStatus(str, Enum):
    """Terminal states of a connection query."""

    SAME_VERTEX = "same_vertex"
    OUT_OF_RANGE = "out_of_range"
    CONNECTED = "connected"
    NOT_CONNECTED = "not_connected"


@dataclass(frozen=True)
class ConnectionResult:
    """
    Outcome of a connection query.

    Attributes:
        status: Which terminal state the query reached
        source: Person the search started from
        target: Person being searched for
        path: People from source to target inclusive (CONNECTED only)
    """

    status: ConnectionStatus
    source: int
    target: int
    path: list[int] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Whether a path between two different people exists."""
        return self.status is ConnectionStatus.CONNECTED

    @property
    def hops(self) -> int | None:
        """Number of friendships on the path, or None if not connected."""
        if not self.found:
            return None
        return len(self.path) - 1

    def friend_pairs(self) -> list[tuple[int, int]]:
        """Consecutive (a, b) friendships along the path, source side first."""
        return list(zip(self.path, self.path[1:]))


def find_connection(graph: FriendGraph, src: int, dest: int) -> ConnectionResult:
    """
    Find the shortest chain of friendships from src to dest.

    Range is checked before identity, so an invalid ID always reports
    OUT_OF_RANGE even when src == dest.

    Returns:
        ConnectionResult; never raises for bad indices
    """
    if not (graph.has_vertex(src) and graph.has_vertex(dest)):
        logger.debug(f"Connection query ({src}, {dest}) out of range")
        return ConnectionResult(ConnectionStatus.OUT_OF_RANGE, src, dest)

    src, dest = int(src), int(dest)
    if src == dest:
        return ConnectionResult(ConnectionStatus.SAME_VERTEX, src, dest)

    # BFS with parent tracking; a key in parent means visited
    queue = deque([src])
    parent: dict[int, int | None] = {src: None}

    while queue:
        current = queue.popleft()

        for neighbor in graph.iter_neighbors(current):
            if neighbor in parent:
                continue

            parent[neighbor] = current

            if neighbor == dest:
                path = _reconstruct_path(parent, dest)
                logger.debug(
                    f"Connection {src} -> {dest} found ({len(path) - 1} hops, "
                    f"{len(parent)} visited)"
                )
                return ConnectionResult(ConnectionStatus.CONNECTED, src, dest, path)

            queue.append(neighbor)

    logger.debug(f"No connection {src} -> {dest} ({len(parent)} visited)")
    return ConnectionResult(ConnectionStatus.NOT_CONNECTED, src, dest)


def _reconstruct_path(parent: dict[int, int | None], dest: int) -> list[int]:
    """Walk parent links back from dest and return the path source-first."""
    path = []
    node: int | None = dest
    while node is not None:
        path.append(node)
        node = parent[node]
    return list(reversed(path))
