import pytest

from mcflow.graph.residual import Arc, ResidualGraph


def _graph(num_nodes: int) -> ResidualGraph:
    graph = ResidualGraph()
    for _ in range(num_nodes):
        graph.add_node()
    return graph


class TestResidualGraph:
    def test_add_node_returns_dense_indices(self):
        graph = ResidualGraph()
        assert [graph.add_node() for _ in range(3)] == [0, 1, 2]
        assert graph.num_nodes == 3
        assert graph.num_edges == 0

    def test_add_arc_pair_layout(self):
        graph = _graph(2)
        edge = graph.add_arc_pair(0, 1, 7, 3)

        assert edge == 0
        assert len(graph.arcs) == 2
        assert graph.arcs[0] == Arc(0, 1, 7, 3, 0)
        assert graph.arcs[1] == Arc(1, 0, 0, -3, 0)

    def test_pair_is_xor_one(self):
        graph = _graph(3)
        graph.add_arc_pair(0, 1, 1, 1)
        graph.add_arc_pair(1, 2, 1, 1)
        assert [ResidualGraph.pair(i) for i in range(4)] == [1, 0, 3, 2]
        assert ResidualGraph.is_forward(2)
        assert not ResidualGraph.is_forward(3)

    def test_adjacency_holds_forward_and_reverse_arcs(self):
        graph = _graph(3)
        graph.add_arc_pair(0, 1, 1, 1)
        graph.add_arc_pair(1, 2, 1, 1)

        assert graph.out_arcs(0) == [0]
        assert graph.out_arcs(1) == [1, 2]
        assert graph.out_arcs(2) == [3]

    def test_parallel_edges_are_distinct(self):
        graph = _graph(2)
        assert graph.add_arc_pair(0, 1, 3, 5) == 0
        assert graph.add_arc_pair(0, 1, 2, 1) == 1
        assert graph.num_edges == 2
        assert graph.out_arcs(0) == [0, 2]

    def test_add_arc_pair_unknown_node(self):
        graph = _graph(1)
        with pytest.raises(IndexError):
            graph.add_arc_pair(0, 1, 1, 1)

    def test_push_keeps_pair_antisymmetric(self):
        graph = _graph(2)
        graph.add_arc_pair(0, 1, 10, 2)

        graph.push(0, 4)
        fwd, rev = graph.arcs
        assert fwd.flow == 4 and rev.flow == -4
        assert fwd.residual == 6
        assert rev.residual == 4

        # Cancelling through the reverse arc
        graph.push(1, 3)
        assert fwd.flow == 1 and rev.flow == -1
        assert fwd.residual == 9

    def test_edge_flows_and_reset(self):
        graph = _graph(3)
        graph.add_arc_pair(0, 1, 5, 1)
        graph.add_arc_pair(1, 2, 5, 1)
        graph.push(0, 2)
        graph.push(2, 1)

        assert graph.edge_flows() == (2, 1)
        assert [edge for edge, _ in graph.forward_arcs()] == [0, 1]

        graph.reset_flow()
        assert graph.edge_flows() == (0, 0)
        assert all(arc.flow == 0 for arc in graph.arcs)

    def test_repr(self):
        graph = _graph(2)
        graph.add_arc_pair(0, 1, 1, 1)
        assert repr(graph) == "ResidualGraph(nodes=2, edges=1)"
