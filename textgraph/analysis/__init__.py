"""
Analysis module.

Provides the read-only queries over a built word graph:
- Bridge words and bridge-word text generation
- Shortest paths (single target or all targets, with ties)
- Weighted PageRank
- Random walks
"""

from textgraph.analysis.bridge import (
    BridgeWordsResult,
    find_bridge_words,
    generate_text,
    query_bridge_words,
)
from textgraph.analysis.pagerank import page_rank, page_rank_all
from textgraph.analysis.random_walk import random_walk
from textgraph.analysis.shortest_path import (
    PathResult,
    ShortestPathReport,
    dijkstra,
    enumerate_paths,
    shortest_path,
)

__all__ = [
    "BridgeWordsResult",
    "find_bridge_words",
    "generate_text",
    "query_bridge_words",
    "page_rank",
    "page_rank_all",
    "random_walk",
    "PathResult",
    "ShortestPathReport",
    "dijkstra",
    "enumerate_paths",
    "shortest_path",
]
