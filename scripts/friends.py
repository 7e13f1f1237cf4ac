#!/usr/bin/env python3
"""
friendgraph CLI - Explore friend lists and connections in a social network.

Usage:
    python scripts/friends.py                          # prompts for a file
    python scripts/friends.py sample_network.txt       # looked up in data/
    python scripts/friends.py network.txt --friends 4
    python scripts/friends.py network.txt --connect 0 7
    python scripts/friends.py network.txt --save-snapshot network.msgpack

Input format:
    <people> <friendships>
    <a> <b>
    ...

Relative file names that do not exist in the working directory are
resolved inside the data directory (FRIENDGRAPH_DATA_DIR, default ./data).
Files ending in .msgpack are read as snapshots.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from friendgraph.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL  # noqa: E402
from friendgraph.data import load_graph_file, resolve_data_path, save_snapshot  # noqa: E402
from friendgraph.graph import GraphError  # noqa: E402
from friendgraph.session import MenuSession, describe_connection, describe_friends  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Friend lists and shortest connections in a social network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Edge-list file or .msgpack snapshot (prompted for if omitted)",
    )
    parser.add_argument(
        "--friends",
        type=int,
        metavar="ID",
        help="Print the friend list of ID and exit",
    )
    parser.add_argument(
        "--connect",
        type=int,
        nargs=2,
        metavar=("SRC", "DEST"),
        help="Print the shortest connection from SRC to DEST and exit",
    )
    parser.add_argument(
        "--save-snapshot",
        type=Path,
        metavar="PATH",
        help="Write a msgpack snapshot of the loaded graph",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    name = args.file
    if name is None:
        try:
            name = input("Input file path: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return 1

    path = resolve_data_path(name)
    try:
        graph = load_graph_file(path)
    except GraphError as e:
        print(f"Error: {e}")
        print("Failed to load graph. Exiting.")
        return 1
    print("Graph loaded successfully!")

    if args.save_snapshot:
        try:
            save_snapshot(graph, args.save_snapshot)
        except GraphError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Snapshot written to {args.save_snapshot}")

    one_shot = args.friends is not None or args.connect is not None
    if args.friends is not None:
        for line in describe_friends(graph, args.friends):
            print(line)
    if args.connect is not None:
        src, dest = args.connect
        for line in describe_connection(graph, src, dest):
            print(line)
    if one_shot or args.save_snapshot:
        return 0

    try:
        MenuSession(graph).run()
    except KeyboardInterrupt:
        print("\n\nSession interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    return 0


if __name__ == "__main__":
    sys.exit(main())
