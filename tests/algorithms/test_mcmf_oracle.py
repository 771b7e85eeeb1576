"""Cross-check min-cost max-flow results against NetworkX."""

import random

import networkx as nx
import pytest

from mcflow.builder import GraphBuilder


def _random_digraph(seed: int, num_nodes: int, num_edges: int) -> nx.DiGraph:
    rng = random.Random(seed)
    G = nx.DiGraph()
    G.add_nodes_from(range(num_nodes))
    while G.number_of_edges() < num_edges:
        u, v = rng.sample(range(num_nodes), 2)
        if not G.has_edge(u, v):
            G.add_edge(u, v, capacity=rng.randint(0, 20), weight=rng.randint(0, 50))
    return G


def _solve(G: nx.DiGraph, source, sink):
    builder = GraphBuilder()
    for node in G.nodes():
        builder.add_node(str(node))
    for u, v, data in G.edges(data=True):
        builder.add_edge(str(u), str(v), data["capacity"], data["weight"])
    return builder.solve(str(source), str(sink))


def _residual_digraph(solution) -> nx.DiGraph:
    R = nx.DiGraph()
    for edge in solution.edge_flows:
        arcs = [(edge.src, edge.dst, edge.capacity - edge.flow, edge.cost),
                (edge.dst, edge.src, edge.flow, -edge.cost)]
        for u, v, residual, cost in arcs:
            if residual <= 0:
                continue
            if R.has_edge(u, v):
                R[u][v]["weight"] = min(R[u][v]["weight"], cost)
            else:
                R.add_edge(u, v, weight=cost)
    return R


@pytest.mark.parametrize("seed", range(12))
def test_matches_networkx(seed):
    G = _random_digraph(seed, num_nodes=8, num_edges=20)
    source, sink = 0, 7

    solution = _solve(G, source, sink)

    expected_flow = nx.maximum_flow_value(G, source, sink)
    flow_dict = nx.max_flow_min_cost(G, source, sink)
    expected_cost = nx.cost_of_flow(G, flow_dict)

    assert solution.max_flow == expected_flow
    assert solution.total_cost == expected_cost
    assert sum(p.flow for p in solution.paths) == solution.max_flow
    assert sum(p.cost for p in solution.paths) == solution.total_cost


@pytest.mark.parametrize("seed", range(6))
def test_no_negative_cycle_in_final_residual(seed):
    G = _random_digraph(100 + seed, num_nodes=10, num_edges=30)
    solution = _solve(G, 0, 9)

    assert not nx.negative_edge_cycle(_residual_digraph(solution))


def test_example_graph_matches_networkx():
    G = nx.DiGraph()
    G.add_edge("a", "b", capacity=10, weight=200)
    G.add_edge("b", "c", capacity=20, weight=0)
    G.add_edge("c", "e", capacity=15, weight=0)
    G.add_edge("a", "d", capacity=2, weight=100)
    G.add_edge("d", "e", capacity=3, weight=0)

    solution = _solve(G, "a", "e")
    flow_dict = nx.max_flow_min_cost(G, "a", "e")

    assert solution.max_flow == 12
    assert solution.total_cost == nx.cost_of_flow(G, flow_dict) == 2200
