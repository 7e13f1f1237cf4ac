"""
Exceptions raised by the graph store, the loader and the query layer.

Connection queries do not raise for bad indices; they report an
OUT_OF_RANGE status instead (see friendgraph.graph.search).
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all friendgraph errors."""


class InvalidSizeError(GraphError, ValueError):
    """Vertex count is negative or not an integer."""


class VertexOutOfRangeError(GraphError, IndexError):
    """A vertex index lies outside [0, vertex_count)."""

    def __init__(self, vertex: object, vertex_count: int, message: str | None = None) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            message or f"Vertex {vertex} out of range [0, {vertex_count})"
        )


class VertexNotFoundError(VertexOutOfRangeError):
    """Queried person ID does not exist in the graph."""

    def __init__(self, vertex: object, vertex_count: int) -> None:
        super().__init__(
            vertex,
            vertex_count,
            f"Person ID {vertex} does not exist in the dataset",
        )


class GraphFormatError(GraphError, ValueError):
    """Edge-list file content could not be parsed."""


class GraphLoadError(GraphError, OSError):
    """Graph file could not be read."""
