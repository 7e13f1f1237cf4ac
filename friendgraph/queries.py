"""
Query surface used by the session and the scripts.

Usage:
    from friendgraph.queries import connection, friends_of, load_graph

    graph = load_graph(4, [(0, 1), (1, 2), (2, 3)])
    friends_of(graph, 1)      # FriendList(person_id=1, count=2, neighbors=[2, 0])
    connection(graph, 0, 3)   # CONNECTED, path [0, 1, 2, 3]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from friendgraph.graph.errors import VertexOutOfRangeError
from friendgraph.graph.search import ConnectionResult, find_connection
from friendgraph.graph.store import FriendGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FriendList:
    """
    Direct friends of one person.

    Attributes:
        person_id: Person that was looked up
        count: Number of friendships (parallel edges counted)
        neighbors: Friend IDs, most recently added first
    """

    person_id: int
    count: int
    neighbors: list[int]


def load_graph(vertex_count: int, edges: Iterable[tuple[int, int]]) -> FriendGraph:
    """
    Build a graph from a vertex count and an edge list.

    Raises:
        InvalidSizeError: If vertex_count is negative or not an integer
        VertexOutOfRangeError: If any edge endpoint is outside the graph
    """
    graph = FriendGraph.create(vertex_count)
    for position, (src, dest) in enumerate(edges):
        try:
            graph.add_edge(src, dest)
        except VertexOutOfRangeError as e:
            raise VertexOutOfRangeError(
                e.vertex,
                vertex_count,
                f"Edge #{position} ({src}, {dest}): {e}",
            ) from e

    logger.info(f"Graph loaded: {graph.vertex_count:,} people, {graph.edge_count:,} friendships")
    return graph


def friends_of(graph: FriendGraph, person_id: int) -> FriendList:
    """
    Look up the direct friends of a person.

    Raises:
        VertexNotFoundError: If person_id is not in the graph
    """
    neighbors = graph.neighbors_of(person_id)
    return FriendList(person_id=person_id, count=len(neighbors), neighbors=neighbors)


def connection(graph: FriendGraph, src: int, dest: int) -> ConnectionResult:
    """Find the shortest connection between two people."""
    return find_connection(graph, src, dest)
