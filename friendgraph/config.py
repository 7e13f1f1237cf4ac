"""
Configuration constants for the friendgraph project.

All paths and tunable settings are defined here. Values can be overridden
through environment variables (a local .env file is honoured).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of friendgraph/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains edge-list files and snapshots)
DATA_DIR = Path(os.environ.get("FRIENDGRAPH_DATA_DIR", PROJECT_ROOT / "data"))

# Network used by scripts when no file is given on the command line
DEFAULT_GRAPH_FILE = DATA_DIR / "sample_network.txt"

# Files with this suffix are read as msgpack snapshots instead of edge lists
SNAPSHOT_SUFFIX = ".msgpack"

# =============================================================================
# Graph Limits
# =============================================================================

# Largest vertex count a graph may declare; larger headers raise InvalidSizeError
MAX_VERTEX_COUNT = int(os.environ.get("FRIENDGRAPH_MAX_VERTICES", 10_000_000))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_dir() -> dict[str, bool]:
    """Check that the data directory and default network exist."""
    return {
        "data_dir": DATA_DIR.is_dir(),
        "default_graph_file": DEFAULT_GRAPH_FILE.exists(),
    }
