"""
Unit tests for the DirectedGraph store.
"""

import pytest

from textgraph.graph import DirectedGraph


class TestAddEdge:
    """Test edge and node insertion."""

    def test_new_edge_has_weight_one(self):
        """First occurrence of an edge should have weight 1."""
        graph = DirectedGraph()
        graph.add_edge("a", "b")
        assert graph.out_edges("a") == {"b": 1}

    def test_repeated_edge_accumulates(self):
        """Each occurrence should increment the weight."""
        graph = DirectedGraph()
        graph.add_edge("a", "b")
        graph.add_edge("a", "b")
        graph.add_edge("a", "b", count=3)
        assert graph.weight("a", "b") == 5

    def test_endpoints_become_nodes(self):
        """Both endpoints should be added to the node set."""
        graph = DirectedGraph()
        graph.add_edge("a", "b")
        assert graph.nodes() == {"a", "b"}

    def test_non_positive_count_rejected(self):
        """Edge weights must stay positive."""
        graph = DirectedGraph()
        with pytest.raises(ValueError):
            graph.add_edge("a", "b", count=0)
        assert len(graph) == 0

    def test_isolated_node(self):
        """add_node should create a node with no edges."""
        graph = DirectedGraph()
        graph.add_node("alone")
        assert "alone" in graph
        assert graph.out_edges("alone") == {}
        assert graph.edge_count() == 0


class TestAccessors:
    """Test read accessors."""

    def test_unknown_node_out_edges_empty(self):
        """Querying an unknown node should not be an error."""
        graph = DirectedGraph()
        assert graph.out_edges("missing") == {}
        assert graph.weight("missing", "other") == 0

    def test_out_edges_is_a_copy(self):
        """Mutating the returned mapping should not touch the graph."""
        graph = DirectedGraph()
        graph.add_edge("a", "b")
        edges = graph.out_edges("a")
        edges["c"] = 10
        edges["b"] = 99
        assert graph.out_edges("a") == {"b": 1}

    def test_nodes_is_immutable(self):
        """nodes() should return a frozen copy."""
        graph = DirectedGraph()
        graph.add_edge("a", "b")
        assert isinstance(graph.nodes(), frozenset)

    def test_iteration_in_first_seen_order(self):
        """Iteration should follow first appearance."""
        graph = DirectedGraph()
        graph.add_edge("c", "a")
        graph.add_node("b")
        graph.add_edge("a", "c")
        assert list(graph) == ["c", "a", "b"]

    def test_edges_and_counts(self):
        """edges() should yield every (source, target, weight)."""
        graph = DirectedGraph()
        graph.add_edge("a", "b")
        graph.add_edge("a", "b")
        graph.add_edge("b", "a")
        assert sorted(graph.edges()) == [("a", "b", 2), ("b", "a", 1)]
        assert graph.edge_count() == 2
        assert len(graph) == 2

    def test_has_out_edges(self):
        graph = DirectedGraph()
        graph.add_edge("a", "b")
        assert graph.has_out_edges("a") is True
        assert graph.has_out_edges("b") is False
