"""
Best-effort text exports consumed by external tools.

Both formats are overwritten on every export. Write failures are logged
and reported through the return value; they never raise.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from textgraph.graph.store import DirectedGraph

logger = logging.getLogger(__name__)


def format_edge_list(graph: DirectedGraph) -> str:
    """Render one "from to weight" line per edge."""
    return "".join(f"{source} {target} {weight}\n" for source, target, weight in graph.edges())


def _write(path: Path, content: str, what: str) -> bool:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Unable to save {what} to {path}: {e}")
        return False

    logger.debug(f"Saved {what} to {path}")
    return True


def write_edge_list(graph: DirectedGraph, path: str | Path) -> bool:
    """Write the edge list to path. Returns False if the write failed."""
    return _write(Path(path), format_edge_list(graph), "graph")


def write_walk(walk: Sequence[str], path: str | Path) -> bool:
    """Write a random walk as a single space-joined line."""
    return _write(Path(path), " ".join(walk), "random walk")
