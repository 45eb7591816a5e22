"""
Weighted PageRank over the word graph.

Differences from textbook PageRank:
- Ranks are seeded from word frequency (each node counts 1, plus the
  weight of every edge into it) instead of a uniform 1/N.
- Exactly PAGERANK_ITERATIONS rounds are run; there is no convergence check.

Rank mass of sink nodes (no out-edges) is spread uniformly over all nodes,
so ranks always sum to 1. A node passes rank to its successors in equal
shares per distinct successor, regardless of edge weight.
"""

from __future__ import annotations

import logging

import numpy as np

from textgraph.config import PAGERANK_DAMPING, PAGERANK_ITERATIONS
from textgraph.graph.store import DirectedGraph

logger = logging.getLogger(__name__)


def page_rank_all(
    graph: DirectedGraph,
    damping: float = PAGERANK_DAMPING,
    iterations: int = PAGERANK_ITERATIONS,
) -> dict[str, float]:
    """
    Compute the rank of every node.

    Returns:
        Dict mapping node to rank (empty for an empty graph)
    """
    nodes = list(graph)
    n = len(nodes)
    if n == 0:
        return {}

    index = {node: i for i, node in enumerate(nodes)}

    sources: list[int] = []
    targets: list[int] = []
    frequency = np.ones(n, dtype=np.float64)
    for source, target, weight in graph.edges():
        sources.append(index[source])
        targets.append(index[target])
        frequency[index[target]] += weight

    src_idx = np.array(sources, dtype=np.int64)
    dst_idx = np.array(targets, dtype=np.int64)
    out_degree = np.bincount(src_idx, minlength=n).astype(np.float64)
    is_sink = out_degree == 0
    # Avoid division by zero; sinks never appear in src_idx anyway
    safe_degree = np.where(is_sink, 1.0, out_degree)

    rank = frequency / frequency.sum()
    for _ in range(iterations):
        sink_mass = rank[is_sink].sum()
        share = rank / safe_degree
        incoming = np.bincount(dst_idx, weights=share[src_idx], minlength=n)
        rank = (1 - damping) / n + damping * (incoming + sink_mass / n)

    logger.debug(f"PageRank over {n:,} nodes, total mass {rank.sum():.6f}")
    return {node: float(rank[i]) for i, node in enumerate(nodes)}


def page_rank(graph: DirectedGraph, word: str) -> float:
    """Rank of a single word, or 0.0 if it is not in the graph."""
    if word not in graph:
        logger.warning(f"PageRank: '{word}' not in graph")
        return 0.0
    return page_rank_all(graph)[word]
