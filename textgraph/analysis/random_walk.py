"""
Random walk over the word graph.

Starts at a uniformly random node and follows uniformly random out-edges
until it reaches a dead end or is about to reuse a directed edge.
"""

from __future__ import annotations

import logging
import random

from textgraph.graph.store import DirectedGraph

logger = logging.getLogger(__name__)


def random_walk(graph: DirectedGraph, rng: random.Random | None = None) -> list[str]:
    """
    Walk the graph from a random start node.

    The walk stops when the current node has no out-edges, or when the
    chosen edge (current, next) was already traversed in this walk; in the
    latter case next is not appended. Edge identity is the ordered pair,
    independent of weight.

    Args:
        graph: Graph to walk
        rng: Random source (default: a fresh SystemRandom)

    Returns:
        Visited nodes in order, or [] for an empty graph
    """
    nodes = list(graph)
    if not nodes:
        return []

    rng = rng or random.SystemRandom()
    current = rng.choice(nodes)
    walk = [current]
    traversed: set[tuple[str, str]] = set()

    while True:
        successors = list(graph.out_edges(current))
        if not successors:
            logger.debug(f"Walk stopped at dead end '{current}'")
            break

        following = rng.choice(successors)
        edge = (current, following)
        if edge in traversed:
            logger.debug(f"Walk stopped at repeated edge {current} -> {following}")
            break

        traversed.add(edge)
        walk.append(following)
        current = following

    return walk
