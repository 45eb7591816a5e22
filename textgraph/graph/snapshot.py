"""
msgpack snapshots of a built graph.

A snapshot stores the node list (in first-seen order) and the adjacency
map, so a graph can be reloaded without re-reading the source text.

Format:
    {"nodes": [word, ...], "edges": {source: {target: weight}}}
"""

from __future__ import annotations

import logging
from pathlib import Path

import msgpack

from textgraph.graph.store import DirectedGraph

logger = logging.getLogger(__name__)


def save_snapshot(graph: DirectedGraph, path: str | Path) -> None:
    """Write graph to path as msgpack."""
    edges: dict[str, dict[str, int]] = {}
    for source, target, weight in graph.edges():
        edges.setdefault(source, {})[target] = weight

    payload = {"nodes": list(graph), "edges": edges}
    with open(path, "wb") as f:
        msgpack.dump(payload, f)
    logger.info(f"Saved snapshot with {len(graph):,} nodes to {path}")


def load_snapshot(path: str | Path) -> DirectedGraph:
    """
    Load a graph written by save_snapshot.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the payload is not a graph snapshot
    """
    logger.info(f"Loading snapshot from {path}...")
    with open(path, "rb") as f:
        payload = msgpack.load(f)

    if (
        not isinstance(payload, dict)
        or not isinstance(payload.get("nodes"), list)
        or not isinstance(payload.get("edges"), dict)
        or not all(isinstance(s, dict) for s in payload["edges"].values())
    ):
        raise ValueError(f"{path} is not a graph snapshot")

    graph = DirectedGraph()
    for node in payload["nodes"]:
        graph.add_node(node)
    for source, successors in payload["edges"].items():
        for target, weight in successors.items():
            graph.add_edge(source, target, weight)

    logger.info(f"Loaded {len(graph):,} nodes, {graph.edge_count():,} edges")
    return graph
