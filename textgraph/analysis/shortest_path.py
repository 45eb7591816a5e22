"""
Weighted shortest paths with full enumeration of ties.

Edge weights are used as distances. Every predecessor that reaches a node
at its minimal distance is kept, so all equally short paths can be listed.
"""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass, field

from textgraph.graph.builder import clean_text
from textgraph.graph.store import DirectedGraph

logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    """
    Shortest paths from a source to one target.

    Attributes:
        source: Start word
        target: End word
        distance: Total weight of each path, or None if unreachable
        paths: Every minimal path, each from source to target
    """

    source: str
    target: str
    distance: int | None = None
    paths: list[list[str]] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return self.distance is not None

    def format(self) -> str:
        if not self.reachable:
            return f'No path from "{self.source}" to "{self.target}"!'

        lines = [
            f'Shortest path(s) from "{self.source}" to "{self.target}" '
            f"(length: {self.distance}):"
        ]
        for i, path in enumerate(self.paths, 1):
            lines.append(f"Path {i}: {' -> '.join(path)}")
        return "\n".join(lines) + "\n"


@dataclass
class ShortestPathReport:
    """
    Result of a shortest-path query.

    In single-target mode ``results`` holds one entry; in all-targets mode
    it holds one entry per other node, reachable or not.

    Attributes:
        source: Normalized start word
        target: Normalized end word, or None in all-targets mode
        results: Per-target results
        missing_word: The first queried word absent from the graph, if any
    """

    source: str
    target: str | None
    results: list[PathResult] = field(default_factory=list)
    missing_word: str | None = None

    @property
    def found(self) -> bool:
        return self.missing_word is None

    def format(self) -> str:
        if self.missing_word is not None:
            return f'No "{self.missing_word}" in the graph!'

        if self.target is not None:
            return self.results[0].format()

        parts = [f'Shortest paths from "{self.source}":\n']
        for result in self.results:
            if result.reachable:
                parts.append(result.format())
            else:
                parts.append(f'No path to "{result.target}"\n')
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()


def dijkstra(
    graph: DirectedGraph, source: str
) -> tuple[dict[str, float], dict[str, list[str]]]:
    """
    Single-source shortest distances with multi-predecessor tracking.

    Returns:
        (distances, predecessors): unreachable nodes have distance math.inf;
        predecessors maps each node to every neighbor that reaches it at its
        minimal distance
    """
    distances: dict[str, float] = {node: math.inf for node in graph}
    predecessors: dict[str, list[str]] = {node: [] for node in graph}
    distances[source] = 0

    frontier: list[tuple[float, str]] = [(0, source)]
    while frontier:
        dist, node = heapq.heappop(frontier)
        if dist > distances[node]:
            continue  # stale entry

        for neighbor, weight in graph.out_edges(node).items():
            candidate = dist + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                predecessors[neighbor] = [node]
                heapq.heappush(frontier, (candidate, neighbor))
            elif candidate == distances[neighbor] and node not in predecessors[neighbor]:
                predecessors[neighbor].append(node)

    return distances, predecessors


def enumerate_paths(
    source: str, target: str, predecessors: dict[str, list[str]]
) -> list[list[str]]:
    """
    List every minimal path from source to target.

    Walks the predecessor lists backwards from target with an explicit
    stack. The number of paths is bounded only by the ties in the graph.
    """
    paths: list[list[str]] = []
    stack: list[tuple[str, list[str]]] = [(target, [target])]

    while stack:
        node, suffix = stack.pop()
        if node == source:
            paths.append(suffix)
            continue
        # Reversed so paths come out in predecessor order
        for pred in reversed(predecessors.get(node, [])):
            stack.append((pred, [pred, *suffix]))

    return paths


def _path_result(
    source: str,
    target: str,
    distances: dict[str, float],
    predecessors: dict[str, list[str]],
) -> PathResult:
    distance = distances.get(target, math.inf)
    if distance == math.inf:
        return PathResult(source=source, target=target)
    return PathResult(
        source=source,
        target=target,
        distance=int(distance),
        paths=enumerate_paths(source, target, predecessors),
    )


def shortest_path(
    graph: DirectedGraph, word1: str, word2: str | None = None
) -> ShortestPathReport:
    """
    Find all shortest paths from word1 to word2, or to every node.

    Both words are normalized like corpus text before lookup. Missing words
    and unreachable targets are reported in the returned report, not raised.

    Args:
        graph: Graph to search
        word1: Start word
        word2: End word; None or blank for all-targets mode
    """
    source = clean_text(word1)
    target = clean_text(word2) if word2 and word2.strip() else None
    report = ShortestPathReport(source=source, target=target)

    for word in (source, target):
        if word is not None and word not in graph:
            logger.warning(f"Shortest path: '{word}' not in graph")
            report.missing_word = word
            return report

    distances, predecessors = dijkstra(graph, source)

    if target is not None:
        report.results.append(_path_result(source, target, distances, predecessors))
    else:
        report.results.extend(
            _path_result(source, node, distances, predecessors)
            for node in graph
            if node != source
        )

    logger.debug(
        f"Shortest paths from '{source}': "
        f"{sum(r.reachable for r in report.results)}/{len(report.results)} reachable"
    )
    return report
