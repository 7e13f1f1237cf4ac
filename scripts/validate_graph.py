#!/usr/bin/env python3
"""
Validate a friendship graph file.

Usage:
    python scripts/validate_graph.py [FILE]

FILE defaults to the sample network in the data directory.
"""

import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from friendgraph.config import DEFAULT_GRAPH_FILE, validate_data_dir  # noqa: E402 - must be after sys.path modification
from friendgraph.data import load_graph_file, resolve_data_path  # noqa: E402
from friendgraph.graph import FriendGraph, GraphError  # noqa: E402
from friendgraph.queries import connection  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def load(path: Path) -> FriendGraph | None:
    """Load the graph and report timing."""
    print("\n=== Loading Graph ===\n")

    if not path.exists():
        print(f"✗ {path}: NOT FOUND")
        return None

    start_time = time.time()
    try:
        graph = load_graph_file(path)
    except GraphError as e:
        logger.error(f"Could not load {path}: {e}")
        print(f"✗ {e}")
        return None

    print(f"\nLoad time: {time.time() - start_time:.2f} seconds")
    return graph


def check_graph(graph: FriendGraph) -> bool:
    """Print statistics and run validation checks."""
    print("\n=== Graph Statistics ===\n")
    for key, value in graph.stats().as_dict().items():
        print(f"  {key}: {value:,}" if isinstance(value, int) else f"  {key}: {value:.2f}")

    print("\n=== Validation Checks ===\n")
    all_valid = True
    for check, passed in graph.validate().items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    return all_valid


def check_sample_queries(graph: FriendGraph) -> bool:
    """Check that connection results are consistent with the graph."""
    print("\n=== Sample Queries ===\n")

    if graph.vertex_count < 2:
        print("  ⚠ Fewer than two people, skipping")
        return True

    src, dest = 0, graph.vertex_count - 1
    result = connection(graph, src, dest)
    print(f"  {src} -> {dest}: {result.status.value}")

    if not result.found:
        return True

    print(f"  Path: {' -> '.join(str(v) for v in result.path)} ({result.hops} hops)")
    for a, b in result.friend_pairs():
        if b not in graph.neighbors_of(a):
            print(f"  ✗ {a} and {b} are not friends")
            return False
    print("  ✓ Every hop is a friendship")
    return True


def main() -> int:
    """Main validation routine."""
    print("=" * 60)
    print("friendgraph Data Validation")
    print("=" * 60)

    for name, exists in validate_data_dir().items():
        print(f"  {'✓' if exists else '⚠'} {name}")

    path = resolve_data_path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_GRAPH_FILE

    graph = load(path)
    if graph is None:
        print("\n✗ Graph could not be loaded.")
        return 1

    if not check_graph(graph):
        print("\n✗ Validation checks failed.")
        return 1

    if not check_sample_queries(graph):
        print("\n✗ Sample query checks failed.")
        return 1

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
