"""Decomposition of a solved flow into simple source-to-sink paths.

Works on a private copy of the forward-arc flows, so the residual graph is
left untouched and repeated calls give identical results. Tracing always
follows the lowest-insertion-order edge that still carries flow.

If a trace returns to a node it already visited, the flow-carrying cycle is
cancelled by subtracting its bottleneck from every cycle edge and tracing
resumes from the revisited node. In a minimum-cost flow such cycles have zero
cost, so cancelling them changes neither the flow value nor the total cost.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from mcflow.algorithms.base import Capacity, Cost
from mcflow.graph.registry import NodeRegistry
from mcflow.graph.residual import ResidualGraph
from mcflow.logging import get_logger
from mcflow.types.dto import Path

_logger = get_logger(__name__)


def decompose_flow(
    graph: ResidualGraph,
    registry: NodeRegistry,
    src_node: int,
    dst_node: int,
    tolerance: float,
) -> Tuple[Path, ...]:
    """Split the flow held in ``graph`` into paths from ``src_node`` to ``dst_node``.

    Args:
        graph: Residual graph after the engine has run.
        registry: Registry used to turn node indices into labels.
        src_node: Source node index.
        dst_node: Sink node index.
        tolerance: Flow at or below this value is treated as zero.

    Returns:
        Paths in extraction order. Their flows sum to the source outflow.
    """
    if src_node == dst_node:
        return ()

    remaining: List[Capacity] = list(graph.edge_flows())
    # Outgoing forward edges per node, in insertion order
    out_edges: List[List[int]] = [
        [pos // 2 for pos in graph.out_arcs(node) if graph.is_forward(pos)]
        for node in range(graph.num_nodes)
    ]
    cursor = [0] * graph.num_nodes

    def next_edge(node: int) -> int:
        edges = out_edges[node]
        idx = cursor[node]
        while idx < len(edges) and remaining[edges[idx]] <= tolerance:
            idx += 1
        cursor[node] = idx
        return edges[idx] if idx < len(edges) else -1

    paths: List[Path] = []
    while True:
        trace_nodes: List[int] = [src_node]
        trace_edges: List[int] = []
        position: Dict[int, int] = {src_node: 0}
        node = src_node

        while node != dst_node:
            edge = next_edge(node)
            if edge < 0:
                break
            head = graph.arcs[2 * edge].dst
            trace_edges.append(edge)
            if head in position:
                start = position[head]
                _cancel_cycle(
                    remaining, trace_edges[start:], registry, trace_nodes[start]
                )
                for dropped in trace_nodes[start + 1 :]:
                    del position[dropped]
                del trace_nodes[start + 1 :]
                del trace_edges[start:]
                node = head
                continue
            position[head] = len(trace_nodes)
            trace_nodes.append(head)
            node = head

        if node == dst_node:
            paths.append(
                _extract_path(graph, registry, remaining, trace_nodes, trace_edges)
            )
            continue
        if node == src_node:
            break

        # Flow enters ``node`` but does not leave it; drop the stranded edge
        stranded = trace_edges[-1]
        _logger.debug(
            "Dropping stranded flow %s on edge %d into '%s'",
            remaining[stranded],
            stranded,
            registry.label_of(node),
        )
        remaining[stranded] = 0

    return tuple(paths)


def _extract_path(
    graph: ResidualGraph,
    registry: NodeRegistry,
    remaining: List[Capacity],
    trace_nodes: List[int],
    trace_edges: List[int],
) -> Path:
    amount = min(remaining[edge] for edge in trace_edges)
    unit_cost: Cost = 0
    for edge in trace_edges:
        remaining[edge] -= amount
        unit_cost += graph.arcs[2 * edge].cost
    return Path(
        nodes=tuple(registry.label_of(n) for n in trace_nodes),
        flow=amount,
        unit_cost=unit_cost,
    )


def _cancel_cycle(
    remaining: List[Capacity],
    cycle_edges: List[int],
    registry: NodeRegistry,
    anchor: int,
) -> None:
    amount = min(remaining[edge] for edge in cycle_edges)
    for edge in cycle_edges:
        remaining[edge] -= amount
    _logger.debug(
        "Cancelled flow cycle through '%s': %d edges, amount=%s",
        registry.label_of(anchor),
        len(cycle_edges),
        amount,
    )
