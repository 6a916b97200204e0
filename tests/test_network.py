"""Tests for the RoadNetwork facade."""

import pytest

from roadgraph.config import GenerationConfig, GraphStats
from roadgraph.engine import RoadNetwork
from roadgraph.graph import from_edges


@pytest.fixture()
def config():
    return GenerationConfig(node_count=300, map_size=50.0, cell_size=12.0, seed=42)


@pytest.fixture()
def network(config):
    net = RoadNetwork(config)
    net.generate()
    return net


class TestRoadNetwork:
    def test_queries_before_generate_raise(self, config):
        net = RoadNetwork(config)
        assert not net.generated
        with pytest.raises(RuntimeError, match="No graph generated"):
            net.get_vertices()
        with pytest.raises(RuntimeError, match="No graph generated"):
            net.find_shortest_path(0, 1)

    def test_generate_once(self, network):
        with pytest.raises(RuntimeError, match="already generated"):
            network.generate()

    def test_read_interfaces(self, network):
        verts = network.get_vertices()
        adj = network.get_adjacency_list()
        assert len(verts) == len(adj) == 300
        assert all(v[1] == 0.0 for v in verts)
        for i, nbrs in enumerate(adj):
            assert all(i in adj[j] for j in nbrs)

    def test_interfaces_are_stable(self, network):
        assert network.get_vertices() == network.get_vertices()
        assert network.get_adjacency_list() == network.get_adjacency_list()

    def test_graph_is_immutable_after_generation(self, network):
        a, b = 0, next(i for i in range(1, 300) if not network.graph.has_edge(0, i))
        with pytest.raises(RuntimeError, match="frozen"):
            network.graph.add_edge(a, b)

    def test_route(self, network):
        result = network.route(0, 0)
        assert result.path == [0]
        assert result.length == 0.0
        assert result.found

    def test_route_length_matches_path(self, network):
        nbr = next(iter(network.graph.neighbors(5)))
        result = network.route(5, nbr)
        assert result.found
        assert result.length <= network.graph.edge_length(5, nbr) + 1e-9

    def test_out_of_range_query(self, network):
        with pytest.raises(ValueError, match="out of range"):
            network.find_shortest_path(0, 300)

    def test_nearest_node(self, network):
        x, _, z = network.get_vertices()[17]
        assert network.nearest_node((x, z)) == 17
        nearest = network.nearest_nodes((x, 0.0, z), k=5)
        assert nearest[0] == 17
        assert len(nearest) == 5

    def test_reuses_generator_index(self, network):
        assert network.graph.spatial_index is not None
        assert network.index is network.graph.spatial_index

    def test_from_graph_builds_index(self):
        g = from_edges([(0, 0), (1, 0)], [(0, 1)])
        net = RoadNetwork.from_graph(g, cell_size=2.0, map_size=10.0)
        assert net.index.cell_size == 2.0
        assert net.nearest_node((0.9, 0.1)) == 1

    def test_unknown_generator(self):
        net = RoadNetwork(GenerationConfig(generator="nope", node_count=10))
        with pytest.raises(ValueError, match="Unknown generator"):
            net.generate()

    def test_proximity_generator(self):
        net = RoadNetwork(GenerationConfig(generator="proximity", node_count=100, map_size=30.0, seed=1))
        graph = net.generate()
        assert graph.metadata["generator"] == "proximity"


class TestStats:
    def test_stats(self, network):
        stats = network.stats()
        assert isinstance(stats, GraphStats)
        assert stats.node_count == 300
        assert stats.edge_count == stats.mst_edge_count + stats.augmented_edge_count
        assert stats.mst_edge_count == 300 - stats.components
        assert stats.min_degree <= stats.mean_degree <= stats.max_degree
        assert stats.generation_seconds > 0

    def test_from_graph(self):
        g = from_edges([(0, 0), (1, 0), (5, 5)], [(0, 1)])
        net = RoadNetwork.from_graph(g, cell_size=2.0, map_size=10.0)
        assert net.find_shortest_path(0, 2) == []
        assert net.find_shortest_path(1, 0) == [1, 0]
        stats = net.stats()
        assert stats.components == 2
        assert stats.generator == "custom"
        assert stats.edge_count == stats.mst_edge_count + stats.augmented_edge_count

    def test_from_graph_without_bounds_leaves_degree_checks_unset(self):
        g = from_edges([(0, 0), (1, 0), (5, 5)], [(0, 1)])
        stats = RoadNetwork.from_graph(g, cell_size=2.0, map_size=10.0).stats()
        assert stats.nodes_over_cap is None
        assert stats.nodes_below_min is None

    def test_from_graph_with_bounds(self):
        star = from_edges([(0, 0), (1, 0), (0, 1), (-1, 0)], [(0, 1), (0, 2), (0, 3)])
        stats = RoadNetwork.from_graph(star, cell_size=2.0, map_size=10.0, min_degree=1, max_degree=2).stats()
        assert stats.nodes_over_cap == 1
        assert stats.nodes_below_min == 0

    def test_from_graph_needs_both_bounds(self):
        g = from_edges([(0, 0), (1, 0)], [(0, 1)])
        with pytest.raises(ValueError, match="together"):
            RoadNetwork.from_graph(g, min_degree=1)

    def test_generated_stats_count_degree_bounds(self, network):
        stats = network.stats()
        degrees = [network.graph.degree(i) for i in range(300)]
        assert stats.nodes_over_cap == sum(1 for d in degrees if d > 5)
        assert stats.nodes_below_min == sum(1 for d in degrees if d < 2)

    def test_proximity_stats_add_up(self):
        net = RoadNetwork(GenerationConfig(generator="proximity", node_count=100, map_size=30.0, seed=1))
        net.generate()
        stats = net.stats()
        assert stats.mst_edge_count == 0
        assert stats.augmented_edge_count == stats.edge_count
