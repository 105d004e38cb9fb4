"""Tests for shortest-path trees with bottleneck tracking."""

from __future__ import annotations

import math

import numpy as np
import pytest

from network_analysis import InvalidVertexError, Medium, Topology
from network_analysis.algorithms import ShortestPath, ShortestPathTree


class TestScenarioSquare:
    """The four-site cycle from the project README."""

    def test_path_through_lower_latency_side(self, square_topology):
        route = square_topology.shortest_path(0, 2)
        assert route.exists
        assert route.vertices == [0, 1, 2]
        assert route.distance == pytest.approx(2.0)
        assert route.bottleneck_bandwidth == 500
        assert [str(link) for link in route.links] == ["0 <-> 1", "1 <-> 2"]

    def test_reverse_direction(self, square_topology):
        route = square_topology.shortest_path(2, 0)
        assert route.vertices == [2, 1, 0]
        assert route.distance == pytest.approx(2.0)
        assert route.bottleneck_bandwidth == 500

    def test_single_hop(self, square_topology):
        route = square_topology.shortest_path(0, 3)
        assert route.vertices == [0, 3]
        assert route.num_hops == 1
        assert route.bottleneck_bandwidth == 300


class TestDegenerateQueries:
    """Tests for self-queries, unreachable targets and bad vertices."""

    def test_same_vertex(self, square_topology):
        route = square_topology.shortest_path(1, 1)
        assert route.exists
        assert route.links == []
        assert route.distance == 0.0
        assert math.isinf(route.bottleneck_bandwidth)
        assert route.vertices == [1]

    def test_unreachable_target(self, split_topology):
        route = split_topology.shortest_path(0, 4)
        assert not route.exists
        assert route.links == []
        assert math.isinf(route.distance)
        assert route.vertices == []
        assert not split_topology.path_exists(0, 4)

    def test_invalid_vertex(self, square_topology):
        with pytest.raises(InvalidVertexError) as exc:
            square_topology.shortest_path(0, 4)
        assert exc.value.vertex == 4
        assert exc.value.vertex_count == 4

    def test_negative_vertex(self, square_topology):
        with pytest.raises(InvalidVertexError):
            square_topology.shortest_path(-1, 0)

    def test_invalid_vertex_is_value_error(self, square_topology):
        with pytest.raises(ValueError):
            square_topology.shortest_path(7, 0)

    def test_isolated_vertex_topology(self):
        topo = Topology(1)
        route = topo.shortest_path(0, 0)
        assert route.exists
        assert route.distance == 0.0


class TestRelaxation:
    """Tests for path and bottleneck bookkeeping during relaxation."""

    def test_longer_hop_count_wins_on_latency(self):
        """A three-hop path beats a direct but slow link."""
        topo = Topology.from_links(
            4,
            [
                (0, 3, Medium.COPPER, 10_000, 230),  # weight 10
                (0, 1, Medium.FIBER, 400, 20),  # weight 1
                (1, 2, Medium.FIBER, 900, 20),
                (2, 3, Medium.FIBER, 250, 20),
            ],
        )
        route = topo.shortest_path(0, 3)
        assert route.vertices == [0, 1, 2, 3]
        assert route.distance == pytest.approx(3.0)
        assert route.bottleneck_bandwidth == 250

    def test_path_replaced_when_better_route_found(self):
        """Vertex 2 is first reached directly, then via 1; the old path is discarded."""
        topo = Topology.from_links(
            3,
            [
                (0, 2, Medium.FIBER, 50, 100),  # weight 5, discovered first
                (0, 1, Medium.FIBER, 700, 20),  # weight 1
                (1, 2, Medium.FIBER, 600, 20),  # weight 1
            ],
        )
        route = topo.shortest_path(0, 2)
        assert route.vertices == [0, 1, 2]
        assert route.bottleneck_bandwidth == 600
        assert len(route.links) == 2

    def test_parallel_links_choose_lighter(self):
        topo = Topology.from_links(
            2,
            [
                (0, 1, Medium.COPPER, 100, 46),  # weight 2
                (0, 1, Medium.FIBER, 10, 20),  # weight 1
            ],
        )
        route = topo.shortest_path(0, 1)
        assert route.distance == pytest.approx(1.0)
        assert route.bottleneck_bandwidth == 10
        assert route.links[0].medium is Medium.FIBER

    def test_self_loop_ignored(self):
        topo = Topology.from_links(
            2,
            [
                (0, 0, Medium.COPPER, 1, 23),
                (0, 1, Medium.COPPER, 100, 23),
            ],
        )
        route = topo.shortest_path(0, 1)
        assert route.vertices == [0, 1]
        assert route.bottleneck_bandwidth == 100

    def test_equal_latency_tie_follows_insertion_order(self):
        """Two equal-latency routes: the one relaxed first is kept."""
        topo = Topology.from_links(
            4,
            [
                (0, 1, Medium.FIBER, 100, 20),
                (0, 2, Medium.FIBER, 200, 20),
                (1, 3, Medium.FIBER, 100, 20),
                (2, 3, Medium.FIBER, 200, 20),
            ],
        )
        route = topo.shortest_path(0, 3)
        assert route.distance == pytest.approx(2.0)
        assert route.vertices == [0, 1, 3]

        # Same links, other order: the route through 2 is found first.
        reordered = Topology.from_links(
            4,
            [
                (0, 2, Medium.FIBER, 200, 20),
                (0, 1, Medium.FIBER, 100, 20),
                (2, 3, Medium.FIBER, 200, 20),
                (1, 3, Medium.FIBER, 100, 20),
            ],
        )
        assert reordered.shortest_path(0, 3).vertices == [0, 2, 3]


class TestShortestPathTree:
    """Tests for the per-source tree accessors."""

    def test_tree_accessors(self, square_topology):
        tree = ShortestPathTree(square_topology, 0)
        assert tree.source == 0
        assert tree.dist_to(0) == 0.0
        assert tree.dist_to(1) == pytest.approx(1.0)
        assert tree.dist_to(3) == pytest.approx(2.0)
        assert tree.edge_to(0) is None
        assert str(tree.edge_to(2)) == "1 <-> 2"
        assert tree.has_path_to(2)

    def test_paths_are_contiguous_chains(self, complete_topology):
        tree = ShortestPathTree(complete_topology, 0)
        for v in complete_topology.vertices():
            path = tree.path_to(v)
            if v == 0:
                assert path == []
                continue
            assert path[0].touches(0)
            assert path[-1].touches(v)
            for a, b in zip(path, path[1:]):
                assert {a.source, a.target} & {b.source, b.target}
            assert tree.bottleneck(v) == min(link.bandwidth for link in path)
            assert tree.dist_to(v) == pytest.approx(sum(link.weight for link in path))

    def test_unreached_vertex_state(self, split_topology):
        tree = ShortestPathTree(split_topology, 3)
        assert not tree.has_path_to(0)
        assert tree.edge_to(0) is None
        assert tree.path_to(0) == []
        assert math.isinf(tree.bottleneck(0))

    def test_tree_rejects_bad_vertex(self, square_topology):
        tree = ShortestPathTree(square_topology, 0)
        with pytest.raises(InvalidVertexError):
            tree.dist_to(10)
        with pytest.raises(InvalidVertexError):
            ShortestPathTree(square_topology, 10)

    def test_numpy_integer_vertices(self, square_topology):
        tree = ShortestPathTree(square_topology, np.int64(0))
        assert tree.source == 0
        assert type(tree.source) is int
        assert tree.dist_to(np.int64(2)) == pytest.approx(2.0)
        assert str(tree.edge_to(np.int32(2))) == "1 <-> 2"
        assert tree.result(np.int64(0)).exists

    @pytest.mark.parametrize("vertex", [True, False, 1.0, "1", None])
    def test_tree_rejects_non_integer_vertex(self, square_topology, vertex):
        tree = ShortestPathTree(square_topology, 0)
        with pytest.raises(InvalidVertexError, match="is not an integer vertex id"):
            tree.dist_to(vertex)

    def test_tree_rejects_negative_vertex(self, square_topology):
        tree = ShortestPathTree(square_topology, 0)
        for accessor in (tree.dist_to, tree.edge_to, tree.bottleneck, tree.path_to):
            with pytest.raises(InvalidVertexError):
                accessor(-1)


class TestShortestPathResult:
    """Tests for the ShortestPath dataclass."""

    def test_summary(self, square_topology):
        summary = square_topology.shortest_path(0, 2).get_summary()
        assert summary["vertices"] == [0, 1, 2]
        assert summary["num_hops"] == 2
        assert summary["bottleneck_bandwidth"] == 500

    def test_defaults_describe_missing_path(self):
        route = ShortestPath(source=0, target=1, exists=False)
        assert route.num_hops == 0
        assert math.isinf(route.distance)
        assert math.isinf(route.bottleneck_bandwidth)
