"""Tests for graph construction and the networkx adapter."""

import random

import networkx as nx
import pytest

from graph_source import (Edge, NetworkxGraphSource, from_weighted_edges, random_vertex,
                          random_weighted_graph, round_to_digits, sample_graph)


class TestEdge:

    def test_other_endpoint(self):
        edge = Edge("A", "B", 1.5)
        assert edge.other("A") == "B"
        assert edge.other("B") == "A"
        assert edge.endpoints == frozenset({"A", "B"})

    def test_other_rejects_foreign_vertex(self):
        with pytest.raises(ValueError):
            Edge("A", "B", 1.5).other("C")

    def test_str(self):
        assert str(Edge("A", "B", 1.5)) == "(A, B, 1.5)"


class TestNetworkxGraphSource:

    def test_incident_edges_share_edge_objects(self, triangle):
        from_a = triangle.incident_edges("A")
        from_b = triangle.incident_edges("B")
        assert from_a[0] is from_b[0]
        assert from_a == [triangle.edge("A", "B"), triangle.edge("A", "C")]

    def test_edge_lookup_is_undirected(self, triangle):
        assert triangle.edge("C", "B") is triangle.edge("B", "C")

    def test_vertices_include_isolated(self):
        source = from_weighted_edges([("A", "B", 1.0)], vertices=["Z"])
        assert set(source.vertices()) == {"A", "B", "Z"}
        assert source.incident_edges("Z") == []

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            from_weighted_edges([("A", "B", -1.0)])

    def test_missing_weight(self):
        G = nx.Graph()
        G.add_edge("A", "B")
        with pytest.raises(KeyError):
            NetworkxGraphSource(G)

    def test_weights_are_floats(self):
        source = from_weighted_edges([("A", "B", 3)])
        assert isinstance(source.edge("A", "B").weight, float)


class TestRandomGraph:

    def test_round_half_up(self):
        assert round_to_digits(2.25, 1) == 2.3
        assert round_to_digits(9.96, 1) == 10.0
        assert round_to_digits(4.04, 1) == 4.0

    @pytest.mark.parametrize("seed", range(20))
    def test_ranges(self, seed):
        source = random_weighted_graph(random.Random(seed))
        n = len(source.vertices())
        assert 5 <= n <= 7

        max_edges = n * (n - 1) // 2
        assert min(2 * n, max_edges) <= len(source.edges()) <= max_edges

        for edge in source.edges():
            assert 0.0 <= edge.weight <= 10.0
            assert round(edge.weight, 1) == edge.weight

    def test_same_seed_same_graph(self):
        first = random_weighted_graph(random.Random(7))
        second = random_weighted_graph(random.Random(7))
        assert first.edges() == second.edges()

    def test_random_vertex(self):
        source = sample_graph()
        assert random_vertex(source, random.Random(3)) in source.vertices()

    def test_random_vertex_empty_graph(self):
        with pytest.raises(ValueError):
            random_vertex(NetworkxGraphSource(nx.Graph()))


class TestSampleGraph:

    def test_shape(self):
        source = sample_graph()
        assert source.vertices() == ['A', 'B', 'C', 'D', 'E', 'F', 'G']
        assert len(source.edges()) == 11
        assert source.edge("D", "E").weight == 15.0
