"""Shortest-path searches over the residual graph.

Both searches only traverse arcs whose residual capacity exceeds a tolerance
and return ``(dist, pred)`` lists indexed by node, where ``pred[v]`` is the
position of the arc used to reach ``v`` (``None`` for the source and for
unreached nodes).

``bellman_ford`` handles negative arc costs and is used once to seed node
potentials. ``dijkstra`` runs on reduced costs
``cost(u, v) + potential[u] - potential[v]``, which are non-negative on every
residual arc once potentials come from a previous exact search.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Optional, Sequence, Tuple

from mcflow.algorithms.base import INF, Cost
from mcflow.exceptions import NegativeCycleError
from mcflow.graph.residual import ResidualGraph

DistPred = Tuple[List[Cost], List[Optional[int]]]


def bellman_ford(graph: ResidualGraph, src_node: int, tolerance: float) -> DistPred:
    """Round-based Bellman-Ford from ``src_node`` using original arc costs.

    Stops early once a full round relaxes nothing.

    Args:
        graph: Residual graph to search.
        src_node: Start node index.
        tolerance: Arcs with residual capacity at or below this are skipped.

    Returns:
        ``(dist, pred)`` as described in the module docstring.

    Raises:
        NegativeCycleError: If relaxation still succeeds in round ``|V|``,
            i.e. a negative-cost cycle of positive residual capacity is
            reachable from ``src_node``.
    """
    num_nodes = graph.num_nodes
    arcs = graph.arcs
    dist: List[Cost] = [INF] * num_nodes
    pred: List[Optional[int]] = [None] * num_nodes
    dist[src_node] = 0

    for _ in range(num_nodes):
        updated = False
        for pos, arc in enumerate(arcs):
            du = dist[arc.src]
            if du == INF or arc.capacity - arc.flow <= tolerance:
                continue
            new_dist = du + arc.cost
            if new_dist < dist[arc.dst]:
                dist[arc.dst] = new_dist
                pred[arc.dst] = pos
                updated = True
        if not updated:
            return dist, pred

    raise NegativeCycleError(
        f"Negative-cost cycle reachable from node index {src_node}; "
        f"Bellman-Ford did not converge in {num_nodes} rounds."
    )


def dijkstra(
    graph: ResidualGraph,
    src_node: int,
    potential: Sequence[Cost],
    tolerance: float,
) -> DistPred:
    """Dijkstra from ``src_node`` over reduced arc costs.

    Reduced costs slightly below zero (floating point drift in the
    potentials) are clamped to zero.

    Args:
        graph: Residual graph to search.
        src_node: Start node index.
        potential: Node potentials from the previous search.
        tolerance: Arcs with residual capacity at or below this are skipped.

    Returns:
        ``(dist, pred)`` where ``dist`` holds reduced-cost distances.
    """
    arcs = graph.arcs
    dist: List[Cost] = [INF] * graph.num_nodes
    pred: List[Optional[int]] = [None] * graph.num_nodes
    dist[src_node] = 0
    min_pq: List[Tuple[Cost, int]] = [(0, src_node)]

    while min_pq:
        current, node = heappop(min_pq)
        if current > dist[node]:
            continue
        pot_u = potential[node]
        for pos in graph.out_arcs(node):
            arc = arcs[pos]
            if arc.capacity - arc.flow <= tolerance:
                continue
            reduced = arc.cost + pot_u - potential[arc.dst]
            if reduced < 0:
                reduced = 0
            new_dist = current + reduced
            if new_dist < dist[arc.dst]:
                dist[arc.dst] = new_dist
                pred[arc.dst] = pos
                heappush(min_pq, (new_dist, arc.dst))

    return dist, pred


def resolve_path(
    graph: ResidualGraph, pred: Sequence[Optional[int]], src_node: int, dst_node: int
) -> List[int]:
    """Walk predecessor arcs back from ``dst_node`` and return arc positions.

    Returns:
        Arc positions ordered from ``src_node`` to ``dst_node``; empty if
        ``dst_node`` was not reached or equals ``src_node``.
    """
    path: List[int] = []
    node = dst_node
    while node != src_node:
        pos = pred[node]
        if pos is None:
            return []
        path.append(pos)
        node = graph.arcs[pos].src
    path.reverse()
    return path
