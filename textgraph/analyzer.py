"""
TextGraphAnalysis: one object owning a word graph and its queries.

Usage:
    from textgraph.analyzer import TextGraphAnalysis

    analysis = TextGraphAnalysis()
    analysis.build_graph("file/Easy Test.txt")
    print(analysis.bridge_words("scientist", "analyzed"))
    print(analysis.shortest_path("the", "report"))
    analysis.page_rank("the")
    analysis.random_walk()
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

from textgraph.analysis import (
    BridgeWordsResult,
    ShortestPathReport,
    generate_text,
    page_rank,
    query_bridge_words,
    random_walk,
    shortest_path,
)
from textgraph.config import GRAPH_EXPORT_PATH, RANDOM_WALK_PATH
from textgraph.graph import (
    DirectedGraph,
    build_graph_from_file,
    build_graph_from_text,
    format_edge_list,
    load_snapshot,
    save_snapshot,
    write_edge_list,
    write_walk,
)

logger = logging.getLogger(__name__)


class TextGraphAnalysis:
    """
    Builds a word graph from text and answers queries over it.

    The graph is only modified by the build methods. Every query is
    read-only and keeps no state between calls.

    Export and walk files are written best-effort: a failed write is logged
    and never changes what the method returns.
    """

    def __init__(
        self,
        graph: DirectedGraph | None = None,
        rng: random.Random | None = None,
        graph_export_path: str | Path = GRAPH_EXPORT_PATH,
        walk_export_path: str | Path = RANDOM_WALK_PATH,
    ) -> None:
        """
        Initialize the analysis.

        Args:
            graph: Existing graph to analyze (default: a new empty graph)
            rng: Random source for text generation and walks
                (default: a fresh SystemRandom per call)
            graph_export_path: Where export_graph() writes the edge list
            walk_export_path: Where random_walk() writes the walk
        """
        self._graph = graph if graph is not None else DirectedGraph()
        self._rng = rng
        self._graph_export_path = Path(graph_export_path)
        self._walk_export_path = Path(walk_export_path)

    @property
    def graph(self) -> DirectedGraph:
        return self._graph

    # =========================================================================
    # Building
    # =========================================================================

    def build_graph(
        self, source: str | Path, base_dir: str | Path | None = None
    ) -> DirectedGraph:
        """
        Add the words of a text file to the graph.

        Raises:
            UnsafePathError: If source resolves outside base_dir
            OSError: If the file cannot be read
        """
        return build_graph_from_file(source, base_dir=base_dir, graph=self._graph)

    def build_graph_from_text(self, text: str) -> DirectedGraph:
        """Add the words of raw text to the graph."""
        return build_graph_from_text(text, graph=self._graph)

    def load_snapshot(self, path: str | Path) -> DirectedGraph:
        """Replace the graph with one loaded from a msgpack snapshot."""
        self._graph = load_snapshot(path)
        return self._graph

    def save_snapshot(self, path: str | Path) -> None:
        save_snapshot(self._graph, path)

    # =========================================================================
    # Queries
    # =========================================================================

    def bridge_words(self, word1: str, word2: str) -> BridgeWordsResult:
        return query_bridge_words(self._graph, word1, word2)

    def generate_text(self, input_text: str) -> str:
        """Insert random bridge words into input_text."""
        return generate_text(self._graph, input_text, rng=self._rng)

    def shortest_path(self, word1: str, word2: str | None = None) -> ShortestPathReport:
        """All shortest paths from word1 to word2, or to every node if word2 is empty."""
        return shortest_path(self._graph, word1, word2)

    def page_rank(self, word: str) -> float:
        return page_rank(self._graph, word)

    def random_walk(self) -> str:
        """
        Run a random walk and save it to the walk export file.

        Returns:
            Space-joined walk, or "" for an empty graph
        """
        walk = random_walk(self._graph, rng=self._rng)
        if not walk:
            return ""
        write_walk(walk, self._walk_export_path)
        return " ".join(walk)

    def export_graph(self) -> str:
        """
        Write the edge list to the graph export file.

        Returns:
            The edge-list text, whether or not the write succeeded
        """
        write_edge_list(self._graph, self._graph_export_path)
        return format_edge_list(self._graph)

    def stats(self) -> dict:
        """Get statistics about the graph."""
        sinks = sum(1 for node in self._graph if not self._graph.has_out_edges(node))
        return {
            "nodes": len(self._graph),
            "edges": self._graph.edge_count(),
            "total_weight": sum(weight for _, _, weight in self._graph.edges()),
            "sinks": sinks,
        }
