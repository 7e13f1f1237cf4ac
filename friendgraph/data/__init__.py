"""
Data loading module.

Provides readers for edge-list files and msgpack snapshots.

Usage:
    from friendgraph.data import load_graph_file, resolve_data_path

    graph = load_graph_file(resolve_data_path("sample_network.txt"))
"""

from friendgraph.data.loader import (
    load_graph_file,
    load_snapshot,
    parse_edge_list,
    read_edge_list,
    resolve_data_path,
    save_snapshot,
)

__all__ = [
    "load_graph_file",
    "load_snapshot",
    "parse_edge_list",
    "read_edge_list",
    "resolve_data_path",
    "save_snapshot",
]
