"""
Directed word graph with integer edge weights.

Usage:
    from textgraph.graph.store import DirectedGraph

    graph = DirectedGraph()
    graph.add_edge("the", "scientist")
    graph.out_edges("the")   # {"scientist": 1}
"""

from __future__ import annotations

from collections.abc import Iterator


class DirectedGraph:
    """
    Adjacency-list directed graph keyed by word.

    Edge weights count how many times ``source`` was immediately followed
    by ``target``. The node set is tracked explicitly so words with no
    out-edges (the last word of a corpus, isolated tokens) are still nodes.

    The graph only grows: there are no removal operations, and accessors
    return copies so callers cannot mutate internal state.
    """

    def __init__(self) -> None:
        # dict keys double as an insertion-ordered node set
        self._nodes: dict[str, None] = {}
        self._adjacency: dict[str, dict[str, int]] = {}

    def add_node(self, node: str) -> None:
        """Add a node with no edges (no-op if already present)."""
        self._nodes.setdefault(node, None)

    def add_edge(self, source: str, target: str, count: int = 1) -> None:
        """Record count occurrences of source -> target, creating nodes as needed."""
        if count < 1:
            raise ValueError(f"Edge count must be positive, got {count}")
        self._nodes.setdefault(source, None)
        self._nodes.setdefault(target, None)
        successors = self._adjacency.setdefault(source, {})
        successors[target] = successors.get(target, 0) + count

    # =========================================================================
    # Accessors
    # =========================================================================

    def nodes(self) -> frozenset[str]:
        """Return every node, including sinks and isolated words."""
        return frozenset(self._nodes)

    def out_edges(self, node: str) -> dict[str, int]:
        """Return successor -> weight for a node, or {} if it has none."""
        return dict(self._adjacency.get(node, {}))

    def has_out_edges(self, node: str) -> bool:
        return bool(self._adjacency.get(node))

    def weight(self, source: str, target: str) -> int:
        """Weight of source -> target, or 0 if the edge does not exist."""
        return self._adjacency.get(source, {}).get(target, 0)

    def edges(self) -> Iterator[tuple[str, str, int]]:
        """Yield (source, target, weight) for every edge."""
        for source, successors in self._adjacency.items():
            for target, weight in successors.items():
                yield source, target, weight

    def edge_count(self) -> int:
        return sum(len(successors) for successors in self._adjacency.values())

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator[str]:
        """Iterate nodes in the order they were first seen."""
        return iter(list(self._nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"DirectedGraph(nodes={len(self)}, edges={self.edge_count()})"
