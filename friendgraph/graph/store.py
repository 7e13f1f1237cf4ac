"""
Adjacency-list store for an undirected friendship graph.

Usage:
    from friendgraph.graph.store import FriendGraph

    graph = FriendGraph.create(4)
    graph.add_edge(0, 1)
    graph.neighbors_of(0)     # [1]
    graph.friend_count_of(1)  # 1
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from friendgraph.config import MAX_VERTEX_COUNT
from friendgraph.graph.errors import (
    InvalidSizeError,
    VertexNotFoundError,
    VertexOutOfRangeError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphStats:
    """
    Summary statistics of a loaded graph.

    Attributes:
        vertex_count: Number of people
        edge_count: Number of friendships (parallel edges counted)
        isolated_count: People with no friends
        max_degree: Largest friend count
        mean_degree: Average friend count
    """

    vertex_count: int
    edge_count: int
    isolated_count: int
    max_degree: int
    mean_degree: float

    def as_dict(self) -> dict:
        return {
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "isolated_count": self.isolated_count,
            "max_degree": self.max_degree,
            "mean_degree": self.mean_degree,
        }


class FriendGraph:
    """
    Undirected graph over vertices 0..vertex_count-1.

    Every edge is stored in both endpoint lists, so adjacency is always
    symmetric. Edges are never removed. Parallel edges are kept and count
    towards friend totals.

    Attributes:
        vertex_count: Number of vertices, fixed at construction
        edge_count: Number of add_edge calls that succeeded
    """

    def __init__(self, vertex_count: int) -> None:
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise InvalidSizeError(f"Vertex count must be an integer, got {vertex_count!r}")
        if vertex_count < 0:
            raise InvalidSizeError(f"Vertex count must be non-negative, got {vertex_count}")
        if vertex_count > MAX_VERTEX_COUNT:
            raise InvalidSizeError(
                f"Vertex count {vertex_count:,} exceeds the limit of {MAX_VERTEX_COUNT:,}"
            )

        self._vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        self._edges: list[tuple[int, int]] = []

    @classmethod
    def create(cls, vertex_count: int) -> FriendGraph:
        """Allocate a graph with vertex_count people and no friendships."""
        return cls(vertex_count)

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[tuple[int, int]]) -> FriendGraph:
        """Build a graph and add every (src, dest) pair in order."""
        graph = cls(vertex_count)
        for src, dest in edges:
            graph.add_edge(src, dest)
        logger.debug(f"Built {graph!r}")
        return graph

    # =========================================================================
    # Construction
    # =========================================================================

    def add_edge(self, src: int, dest: int) -> None:
        """
        Record a friendship between src and dest.

        Both endpoints are validated before the graph is touched, so a
        rejected edge leaves no half-inserted entry behind.

        Raises:
            VertexOutOfRangeError: If either endpoint is not a valid index
        """
        for vertex in (src, dest):
            if not self.has_vertex(vertex):
                raise VertexOutOfRangeError(vertex, self._vertex_count)

        src, dest = int(src), int(dest)
        self._adjacency[src].append(dest)
        self._adjacency[dest].append(src)
        self._edges.append((src, dest))

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def has_vertex(self, vertex: object) -> bool:
        """Check whether vertex is an integer index inside the graph."""
        if isinstance(vertex, bool) or not isinstance(vertex, (int, np.integer)):
            return False
        return 0 <= vertex < self._vertex_count

    def neighbors_of(self, vertex: int) -> list[int]:
        """
        Get the friends of a vertex, most recently added first.

        Raises:
            VertexNotFoundError: If vertex is not a valid index
        """
        self._require(vertex)
        return self._adjacency[vertex][::-1]

    def iter_neighbors(self, vertex: int) -> Iterator[int]:
        """Iterate neighbors in the same order as neighbors_of, without copying."""
        self._require(vertex)
        return reversed(self._adjacency[vertex])

    def friend_count_of(self, vertex: int) -> int:
        """
        Get the number of friendships incident to a vertex.

        Raises:
            VertexNotFoundError: If vertex is not a valid index
        """
        self._require(vertex)
        return len(self._adjacency[vertex])

    def edges(self) -> list[tuple[int, int]]:
        """List edges once each, in insertion order."""
        return list(self._edges)

    def _require(self, vertex: object) -> None:
        if not self.has_vertex(vertex):
            raise VertexNotFoundError(vertex, self._vertex_count)

    # =========================================================================
    # Snapshot Support
    # =========================================================================

    def to_adjacency(self) -> dict:
        """Plain-data form suitable for serialization."""
        return {
            "vertex_count": self._vertex_count,
            "edges": [list(edge) for edge in self.edges()],
        }

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def degrees(self) -> np.ndarray:
        """Friend count of every vertex as an integer array."""
        return np.fromiter(
            (len(neighbors) for neighbors in self._adjacency),
            dtype=np.int64,
            count=self._vertex_count,
        )

    def validate(self) -> dict[str, bool]:
        """Run consistency checks on the adjacency lists."""
        in_range = all(
            0 <= n < self._vertex_count
            for neighbors in self._adjacency
            for n in neighbors
        )
        symmetric = True
        if in_range:
            for src, neighbors in enumerate(self._adjacency):
                for dest in set(neighbors):
                    if neighbors.count(dest) != self._adjacency[dest].count(src):
                        symmetric = False
                        break
                if not symmetric:
                    break
        return {
            "neighbors_in_range": in_range,
            "adjacency_symmetric": symmetric,
            "degree_sum_matches_edges": int(self.degrees().sum()) == 2 * len(self._edges),
        }

    def stats(self) -> GraphStats:
        """Get statistics about the graph."""
        degrees = self.degrees()
        if degrees.size == 0:
            return GraphStats(0, len(self._edges), 0, 0, 0.0)
        return GraphStats(
            vertex_count=self._vertex_count,
            edge_count=len(self._edges),
            isolated_count=int(np.count_nonzero(degrees == 0)),
            max_degree=int(degrees.max()),
            mean_degree=float(degrees.mean()),
        )

    def __len__(self) -> int:
        return self._vertex_count

    def __contains__(self, vertex: object) -> bool:
        return self.has_vertex(vertex)

    def __repr__(self) -> str:
        return f"FriendGraph(vertices={self._vertex_count}, edges={len(self._edges)})"
