"""
Graph module.

Provides the friendship graph and the search run over it:
- FriendGraph: Symmetric adjacency-list store
- find_connection: BFS shortest path between two people
"""

from friendgraph.graph.errors import (
    GraphError,
    GraphFormatError,
    GraphLoadError,
    InvalidSizeError,
    VertexNotFoundError,
    VertexOutOfRangeError,
)
from friendgraph.graph.search import ConnectionResult, ConnectionStatus, find_connection
from friendgraph.graph.store import FriendGraph, GraphStats

__all__ = [
    "FriendGraph",
    "GraphStats",
    "ConnectionResult",
    "ConnectionStatus",
    "find_connection",
    "GraphError",
    "GraphFormatError",
    "GraphLoadError",
    "InvalidSizeError",
    "VertexNotFoundError",
    "VertexOutOfRangeError",
]
