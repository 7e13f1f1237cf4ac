"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from friendgraph.graph import FriendGraph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def sample_network(data_dir: Path) -> Path:
    """Return the bundled sample network file."""
    return data_dir / "sample_network.txt"


@pytest.fixture
def line_graph() -> FriendGraph:
    """Return 0 - 1 - 2 - 3."""
    return FriendGraph.from_edges(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def split_graph() -> FriendGraph:
    """Return three people where only 0 and 1 are friends."""
    return FriendGraph.from_edges(3, [(0, 1)])


@pytest.fixture
def sample_graph() -> FriendGraph:
    """
    Return the sample network built in memory.

    Two components: 0..6 (with a short cut 2 - 6) and the triangle 7, 8, 9.
    """
    edges = [
        (0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 5),
        (5, 6), (2, 6), (7, 8), (8, 9), (7, 9),
    ]
    return FriendGraph.from_edges(10, edges)


@pytest.fixture
def write_network(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes text to a file under tmp_path."""

    def _write(text: str, name: str = "network.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
