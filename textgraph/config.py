"""
Configuration constants for the text graph analysis project.

All paths, settings, and tunable parameters are defined here.
Values can be overridden through environment variables or a local .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (input corpus and exported results), relative to the
# working directory unless overridden
DATA_DIR = Path(os.environ.get("TEXTGRAPH_DATA_DIR", "file"))

# Individual data file paths
DEFAULT_INPUT_PATH = DATA_DIR / "Easy Test.txt"
GRAPH_EXPORT_PATH = DATA_DIR / "graph.txt"
RANDOM_WALK_PATH = DATA_DIR / "random_walk.txt"
SNAPSHOT_PATH = DATA_DIR / "graph.msgpack"

# =============================================================================
# PageRank Configuration
# =============================================================================

# Probability of following an out-edge instead of jumping uniformly
PAGERANK_DAMPING = 0.85

# Fixed number of rounds (no convergence check)
PAGERANK_ITERATIONS = 100

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def get_base_dir() -> Path:
    """Return the directory that input files must stay inside."""
    base = os.environ.get("TEXTGRAPH_BASE_DIR")
    return Path(base).resolve() if base else Path.cwd().resolve()

