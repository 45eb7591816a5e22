"""
Unit tests for the shortest-path engine.
"""

import math

from textgraph.analysis import dijkstra, enumerate_paths, shortest_path
from textgraph.graph import build_graph_from_text


class TestDijkstra:
    """Test distances and predecessor tracking."""

    def test_distances_use_weights(self):
        """a->c costs 1 directly, a->b->c costs 4."""
        graph = build_graph_from_text("a b c a b c a c")
        distances, predecessors = dijkstra(graph, "a")
        assert distances["b"] == 2
        assert distances["c"] == 1
        assert predecessors["c"] == ["a"]

    def test_ties_keep_every_predecessor(self, tied_graph):
        distances, predecessors = dijkstra(tied_graph, "a")
        assert distances["d"] == 2
        assert sorted(predecessors["d"]) == ["b", "c"]

    def test_unreachable_is_infinite(self):
        graph = build_graph_from_text("a b")
        distances, predecessors = dijkstra(graph, "b")
        assert distances["a"] == math.inf
        assert predecessors["a"] == []


class TestEnumeratePaths:
    """Test path reconstruction."""

    def test_all_tied_paths(self, tied_graph):
        _, predecessors = dijkstra(tied_graph, "a")
        paths = enumerate_paths("a", "d", predecessors)
        assert sorted(paths) == [["a", "b", "d"], ["a", "c", "d"]]

    def test_multiplying_ties(self):
        """Two tied diamonds in a row give four paths."""
        graph = build_graph_from_text("s a m s b m x m c t m d t")
        _, predecessors = dijkstra(graph, "s")
        paths = enumerate_paths("s", "t", predecessors)
        assert len(paths) == 4
        assert all(p[0] == "s" and p[2] == "m" and p[-1] == "t" for p in paths)

    def test_source_equals_target(self):
        assert enumerate_paths("a", "a", {"a": []}) == [["a"]]


class TestShortestPath:
    """Test the shortest-path query."""

    def test_single_target(self):
        graph = build_graph_from_text("a b c a b c a c")
        report = shortest_path(graph, "a", "c")
        assert report.found
        [result] = report.results
        assert result.distance == 1
        assert result.paths == [["a", "c"]]

    def test_single_target_format(self, tied_graph):
        report = shortest_path(tied_graph, "a", "d")
        text = str(report)
        assert text.startswith('Shortest path(s) from "a" to "d" (length: 2):\n')
        assert "a -> b -> d" in text
        assert "a -> c -> d" in text
        assert "Path 1: " in text and "Path 2: " in text

    def test_unknown_source(self, tied_graph):
        report = shortest_path(tied_graph, "zebra", "a")
        assert report.found is False
        assert report.missing_word == "zebra"
        assert str(report) == 'No "zebra" in the graph!'

    def test_unknown_target(self, tied_graph):
        report = shortest_path(tied_graph, "a", "zebra")
        assert str(report) == 'No "zebra" in the graph!'

    def test_no_path(self):
        graph = build_graph_from_text("a b")
        report = shortest_path(graph, "b", "a")
        assert report.found
        assert report.results[0].reachable is False
        assert str(report) == 'No path from "b" to "a"!'

    def test_inputs_are_normalized(self, corpus_graph):
        report = shortest_path(corpus_graph, "The!", "  Report ")
        assert report.source == "the"
        assert report.target == "report"
        assert report.results[0].paths == [["the", "report"]]

    def test_all_targets(self, tied_graph):
        report = shortest_path(tied_graph, "a")
        assert report.target is None
        by_target = {r.target: r for r in report.results}
        assert set(by_target) == {"b", "c", "d"}
        assert by_target["b"].distance == 1
        assert by_target["c"].distance == 1
        assert len(by_target["d"].paths) == 2

    def test_blank_target_means_all_targets(self, tied_graph):
        report = shortest_path(tied_graph, "a", "   ")
        assert report.target is None
        assert len(report.results) == 3

    def test_all_targets_reports_unreachable_individually(self):
        graph = build_graph_from_text("a b c")
        report = shortest_path(graph, "b")
        text = str(report)
        assert text.startswith('Shortest paths from "b":\n')
        assert 'No path to "a"\n' in text
        assert 'Shortest path(s) from "b" to "c" (length: 1):' in text

    def test_self_loop_does_not_affect_distances(self):
        graph = build_graph_from_text("a a b")
        report = shortest_path(graph, "a", "b")
        assert report.results[0].paths == [["a", "b"]]
        assert report.results[0].distance == 1
