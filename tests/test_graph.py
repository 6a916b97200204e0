"""Tests for the RoadGraph container."""

import math

import numpy as np
import pytest

from roadgraph.graph import RoadGraph, from_edges


@pytest.fixture()
def square():
    return RoadGraph([(0, 0), (1, 0), (1, 1), (0, 1)])


# ── add_edge ─────────────────────────────────────────────────────────

class TestAddEdge:
    def test_symmetric(self, square):
        assert square.add_edge(2, 0) is True
        assert 0 in square.neighbors(2)
        assert 2 in square.neighbors(0)

    def test_idempotent(self, square):
        square.add_edge(0, 1)
        once = square.get_adjacency_list()
        assert square.add_edge(0, 1) is False
        assert square.add_edge(1, 0) is False
        assert square.get_adjacency_list() == once
        assert square.number_of_edges() == 1

    def test_self_loop_rejected(self, square):
        with pytest.raises(ValueError, match="Self-loop"):
            square.add_edge(3, 3)

    def test_out_of_range(self, square):
        with pytest.raises(ValueError, match="out of range"):
            square.add_edge(0, 4)
        with pytest.raises(ValueError, match="out of range"):
            square.add_edge(-1, 2)

    def test_frozen_graph_rejects_edges(self, square):
        square.freeze()
        assert square.frozen
        with pytest.raises(RuntimeError, match="frozen"):
            square.add_edge(0, 1)


# ── Read interfaces ──────────────────────────────────────────────────

class TestReadInterfaces:
    def test_vertices_are_planar(self, square):
        verts = square.get_vertices()
        assert verts[2] == (1.0, 0.0, 1.0)
        assert all(v[1] == 0.0 for v in verts)

    def test_adjacency_is_index_aligned(self, square):
        square.add_edge(0, 1)
        square.add_edge(1, 2)
        adj = square.get_adjacency_list()
        assert len(adj) == 4
        assert adj[1] == frozenset({0, 2})
        assert adj[3] == frozenset()

    def test_positions_read_only(self, square):
        with pytest.raises(ValueError):
            square.positions[0, 0] = 5.0

    def test_edges_canonical_and_sorted(self):
        g = from_edges([(0, 0)] * 4, [(3, 1), (2, 0), (1, 0)])
        assert g.edges() == [(0, 1), (0, 2), (1, 3)]

    def test_duplicate_positions_give_zero_length(self):
        g = from_edges([(2.5, 2.5), (2.5, 2.5)], [(0, 1)])
        assert g.edge_length(0, 1) == 0.0


# ── Position input ───────────────────────────────────────────────────

class TestPositions:
    def test_vertices_round_trip(self):
        g = RoadGraph([(0, 0), (1, 2), (-3.5, 4), (7, -1)])
        rebuilt = RoadGraph(g.get_vertices())
        assert len(rebuilt) == 4
        assert rebuilt.get_vertices() == g.get_vertices()
        assert rebuilt.positions.shape == (4, 2)

    def test_xyz_drops_height(self):
        g = RoadGraph([(1.0, 9.0, 2.0), (3.0, -4.0, 5.0)])
        assert g.coords == [[1.0, 2.0], [3.0, 5.0]]

    def test_empty(self):
        assert len(RoadGraph([])) == 0

    @pytest.mark.parametrize("positions", [
        [(1, 2, 3, 4)],
        [1.0, 2.0],
        np.zeros((2, 2, 2)),
    ])
    def test_bad_shape_rejected(self, positions):
        with pytest.raises(ValueError, match="shape"):
            RoadGraph(positions)


# ── networkx conversion ──────────────────────────────────────────────

class TestNetworkx:
    def test_weights_are_euclidean(self):
        g = from_edges([(0, 0), (3, 4), (3, 0)], [(0, 1), (1, 2)])
        G = g.to_networkx()
        assert G.number_of_nodes() == 3
        assert G[0][1]["weight"] == pytest.approx(5.0)
        assert G[1][2]["weight"] == pytest.approx(4.0)
        assert G.nodes[1]["pos"] == (3.0, 4.0)

    def test_component_count(self):
        g = from_edges(np.zeros((5, 2)), [(0, 1), (2, 3)])
        assert g.component_count() == 3

    def test_total_length(self):
        g = from_edges([(0, 0), (1, 0), (1, 1)], [(0, 1), (1, 2), (0, 2)])
        assert g.total_length() == pytest.approx(2 + math.sqrt(2))
        assert g.total_length([(0, 1)]) == pytest.approx(1.0)
