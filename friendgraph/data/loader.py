"""
Loading friendship graphs from disk.

Two formats are understood:
- Edge-list text: "<people> <friendships>" followed by one "<a> <b>"
  pair per friendship, all whitespace-separated integers.
- msgpack snapshot: {"vertex_count": n, "edges": [[a, b], ...]}, written
  by save_snapshot().

Usage:
    from friendgraph.data.loader import load_graph_file, resolve_data_path

    graph = load_graph_file(resolve_data_path("facebook.txt"))
"""

from __future__ import annotations

import logging
from pathlib import Path

import msgpack

from friendgraph.config import DATA_DIR, SNAPSHOT_SUFFIX
from friendgraph.graph.errors import GraphFormatError, GraphLoadError
from friendgraph.graph.store import FriendGraph
from friendgraph.queries import load_graph

logger = logging.getLogger(__name__)


# =============================================================================
# Path Resolution
# =============================================================================

def resolve_data_path(name: str | Path, data_dir: Path = DATA_DIR) -> Path:
    """
    Resolve a user-supplied file name.

    Absolute paths and paths that already exist are returned unchanged.
    Anything else is looked up inside the data directory.
    """
    path = Path(name)
    if path.is_absolute() or path.exists():
        return path
    return Path(data_dir) / path


# =============================================================================
# Edge-List Format
# =============================================================================

def parse_edge_list(text: str) -> tuple[int, list[tuple[int, int]]]:
    """
    Parse edge-list text into a vertex count and a list of edges.

    Endpoints are not range-checked here; load_graph() does that.

    Raises:
        GraphFormatError: If the header is missing, a token is not an
            integer, or fewer edges are present than the header declares
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise GraphFormatError("Missing header: expected '<people> <friendships>'")

    values = []
    for position, token in enumerate(tokens):
        try:
            values.append(int(token))
        except ValueError:
            raise GraphFormatError(
                f"Token #{position} is not an integer: {token!r}"
            ) from None

    vertex_count, edge_count = values[0], values[1]
    if edge_count < 0:
        raise GraphFormatError(f"Friendship count must be non-negative, got {edge_count}")

    endpoints = values[2:]
    needed = 2 * edge_count
    if len(endpoints) < needed:
        raise GraphFormatError(
            f"Header declares {edge_count} friendships but only "
            f"{len(endpoints) // 2} complete pairs were found"
        )
    if len(endpoints) > needed:
        logger.warning(
            f"Ignoring {len(endpoints) - needed} trailing values after "
            f"{edge_count} friendships"
        )

    edges = [(endpoints[i], endpoints[i + 1]) for i in range(0, needed, 2)]
    return vertex_count, edges


def read_edge_list(path: str | Path) -> tuple[int, list[tuple[int, int]]]:
    """
    Read and parse an edge-list file.

    Raises:
        GraphLoadError: If the file cannot be read
        GraphFormatError: If the content is malformed
    """
    path = Path(path)
    logger.info(f"Reading edge list from {path}...")
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise GraphLoadError(f"Could not open file {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise GraphFormatError(f"{path}: not a text edge list ({e.reason})") from e

    try:
        return parse_edge_list(text)
    except GraphFormatError as e:
        raise GraphFormatError(f"{path}: {e}") from e


# =============================================================================
# msgpack Snapshots
# =============================================================================

def save_snapshot(graph: FriendGraph, path: str | Path) -> Path:
    """Write a msgpack snapshot of the graph and return its path."""
    path = Path(path)
    logger.info(f"Saving snapshot to {path}...")
    try:
        with open(path, "wb") as f:
            msgpack.pack(graph.to_adjacency(), f)
    except OSError as e:
        raise GraphLoadError(f"Could not write file {path}: {e.strerror or e}") from e
    return path


def load_snapshot(path: str | Path) -> FriendGraph:
    """
    Load a msgpack snapshot.

    The graph is rebuilt through load_graph(), so a tampered snapshot is
    rejected the same way a bad edge list is.

    Raises:
        GraphLoadError: If the file cannot be read
        GraphFormatError: If the content is not a valid snapshot
    """
    path = Path(path)
    logger.info(f"Loading snapshot from {path}...")
    try:
        with open(path, "rb") as f:
            data = msgpack.load(f)
    except OSError as e:
        raise GraphLoadError(f"Could not open file {path}: {e.strerror or e}") from e
    except ValueError as e:
        raise GraphFormatError(f"{path}: not a valid msgpack snapshot ({e})") from e

    if not isinstance(data, dict) or "vertex_count" not in data or "edges" not in data:
        raise GraphFormatError(f"{path}: snapshot must contain 'vertex_count' and 'edges'")

    try:
        edges = [(int(src), int(dest)) for src, dest in data["edges"]]
    except (TypeError, ValueError) as e:
        raise GraphFormatError(f"{path}: malformed edge entry ({e})") from e

    return load_graph(data["vertex_count"], edges)


# =============================================================================
# Entry Point
# =============================================================================

def load_graph_file(path: str | Path) -> FriendGraph:
    """
    Load a graph from an edge-list file or a msgpack snapshot.

    Raises:
        GraphLoadError: If the file cannot be read
        GraphFormatError: If the content is malformed
        InvalidSizeError: If the vertex count is negative
        VertexOutOfRangeError: If an edge names a person outside the graph
    """
    path = Path(path)
    if path.suffix == SNAPSHOT_SUFFIX:
        return load_snapshot(path)

    vertex_count, edges = read_edge_list(path)
    return load_graph(vertex_count, edges)
