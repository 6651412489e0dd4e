"""Tests for classify.py module."""

from depflow.layout.classify import EdgeType, classify_edge, classify_edges
from depflow.layout.rank import compute_ranks


class TestClassifyEdges:
    """Tests for classify_edges function."""

    def test_tree_edge(self, simple_chain):
        """Tree edges connect adjacent ranks."""
        node_ids, pairs = simple_chain
        _, node_to_rank, _ = compute_ranks(node_ids, pairs)
        classified = classify_edges(pairs, node_to_rank)

        assert ("A", "B") in classified[EdgeType.TREE]
        assert ("B", "C") in classified[EdgeType.TREE]

    def test_back_edge(self, back_edge_graph):
        """Back edges point to a lower rank."""
        node_ids, pairs = back_edge_graph
        _, node_to_rank, back_edges = compute_ranks(node_ids, pairs)
        classified = classify_edges(pairs, node_to_rank)

        # C->A is a back edge (rank 2 -> rank 0)
        assert classified[EdgeType.BACK] == [("C", "A")]
        assert set(classified[EdgeType.BACK]) == back_edges

    def test_forward_skip_edge(self, forward_skip_graph):
        """A -> C skips rank 1 because C is ranked by the longer path."""
        node_ids, pairs = forward_skip_graph
        _, node_to_rank, _ = compute_ranks(node_ids, pairs)
        classified = classify_edges(pairs, node_to_rank)

        assert classified[EdgeType.FORWARD_SKIP] == [("A", "C")]

    def test_same_level_edge(self):
        """Same-level edges only arise from manual ranks or self-loops."""
        classified = classify_edges([("B", "C"), ("A", "A")], {"A": 0, "B": 1, "C": 1})
        assert classified[EdgeType.SAME_LEVEL] == [("B", "C"), ("A", "A")]

    def test_unranked_endpoints_skipped(self):
        """Edges with an endpoint missing from the ranks are left out."""
        classified = classify_edges([("A", "ghost")], {"A": 0})
        assert all(edges == [] for edges in classified.values())

    def test_every_edge_classified_once(self, complex_graph):
        """Each ranked edge lands in exactly one bucket."""
        node_ids, pairs = complex_graph
        _, node_to_rank, _ = compute_ranks(node_ids, pairs)
        classified = classify_edges(pairs, node_to_rank)

        assert sum(len(edges) for edges in classified.values()) == len(pairs)


class TestClassifyEdge:
    """Tests for classify_edge function."""

    def test_rank_deltas(self):
        """Each rank delta maps to one edge type."""
        assert classify_edge(0, 1) is EdgeType.TREE
        assert classify_edge(0, 3) is EdgeType.FORWARD_SKIP
        assert classify_edge(2, 2) is EdgeType.SAME_LEVEL
        assert classify_edge(2, 0) is EdgeType.BACK
