"""
Graph module.

Provides the word graph and the ways to build, export and reload it:
- DirectedGraph: Weighted adjacency-list store
- build_graph_from_text / build_graph_from_file: Text-to-graph builder
- write_edge_list / write_walk: Best-effort text exports
- save_snapshot / load_snapshot: msgpack persistence
"""

from textgraph.graph.builder import (
    UnsafePathError,
    build_graph_from_file,
    build_graph_from_text,
    clean_text,
    tokenize,
)
from textgraph.graph.export import format_edge_list, write_edge_list, write_walk
from textgraph.graph.snapshot import load_snapshot, save_snapshot
from textgraph.graph.store import DirectedGraph

__all__ = [
    "DirectedGraph",
    "UnsafePathError",
    "build_graph_from_file",
    "build_graph_from_text",
    "clean_text",
    "tokenize",
    "format_edge_list",
    "write_edge_list",
    "write_walk",
    "load_snapshot",
    "save_snapshot",
]
