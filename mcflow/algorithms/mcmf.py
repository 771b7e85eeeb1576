"""Minimum-cost maximum flow via successive shortest augmenting paths.

The first search is a Bellman-Ford pass, since arc costs may be negative. Its
distances seed Johnson potentials, after which every search is a Dijkstra run
on non-negative reduced costs. Each iteration pushes the bottleneck residual
capacity along the cheapest remaining source-to-sink path, so the flow is of
minimum cost for its value at every step.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional

from mcflow.algorithms.base import INF, Capacity, Cost, EngineState
from mcflow.algorithms.spf import bellman_ford, dijkstra, resolve_path
from mcflow.config import DEFAULT_CONFIG, SolverConfig
from mcflow.exceptions import (
    GraphStateError,
    IterationLimitError,
    TimeBudgetExceededError,
)
from mcflow.graph.residual import ResidualGraph
from mcflow.logging import get_logger

_logger = get_logger(__name__)


@dataclass(frozen=True)
class EngineResult:
    """Aggregate outcome of one engine run.

    Attributes:
        max_flow: Total flow pushed from source to sink.
        total_cost: Sum over augmentations of amount times path cost.
        iterations: Number of augmentations performed.
        state: Terminal engine state.
    """

    max_flow: Capacity
    total_cost: Cost
    iterations: int
    state: EngineState


class MinCostMaxFlow:
    """Successive-shortest-path solver bound to one residual graph.

    The engine moves ``READY -> SOLVING -> SOLVED | SOLVED_INFEASIBLE`` and
    completes at most one run. A failed run clears the partial flow and
    returns to ``READY``. Flow is written into the arcs of ``graph``.
    """

    def __init__(
        self, graph: ResidualGraph, config: Optional[SolverConfig] = None
    ) -> None:
        self.graph = graph
        self.config = config or DEFAULT_CONFIG
        self.state = EngineState.READY

    def run(
        self, src_node: int, dst_node: int, flow_limit: Optional[Capacity] = None
    ) -> EngineResult:
        """Push minimum-cost flow from ``src_node`` to ``dst_node``.

        Args:
            src_node: Source node index.
            dst_node: Sink node index.
            flow_limit: Optional cap on the total flow pushed.

        Returns:
            EngineResult with the final flow value and cost.

        Raises:
            GraphStateError: If the engine has already run.
            ValueError: If ``flow_limit`` is negative or NaN.
            NegativeCycleError: If a negative-cost cycle is reachable from the source.
            IterationLimitError: If the iteration bound is exceeded.
            TimeBudgetExceededError: If the time budget is exceeded.
        """
        if self.state != EngineState.READY:
            raise GraphStateError(
                f"Engine cannot run in state {self.state.name}; it solves only once."
            )
        # Written so that NaN is rejected too
        if flow_limit is not None and not flow_limit >= 0:
            raise ValueError(f"flow_limit must be non-negative, got {flow_limit}")

        self.state = EngineState.SOLVING
        try:
            result = self._run(src_node, dst_node, flow_limit)
        except Exception:
            # Partial flow is meaningless once the run has failed
            self.graph.reset_flow()
            self.state = EngineState.READY
            raise
        self.state = result.state
        return result

    def _run(
        self, src_node: int, dst_node: int, flow_limit: Optional[Capacity]
    ) -> EngineResult:
        graph = self.graph
        arcs = graph.arcs
        tol = self.config.tolerance

        if src_node == dst_node:
            return EngineResult(0, 0, 0, EngineState.SOLVED_INFEASIBLE)

        limit = self._iteration_limit(src_node)
        budget = self.config.time_budget
        started = time.perf_counter()

        potential: List[Cost] = [0] * graph.num_nodes
        dist, pred = bellman_ford(graph, src_node, tol)
        sink_reachable = dist[dst_node] != INF

        max_flow: Capacity = 0
        total_cost: Cost = 0
        iterations = 0

        while dist[dst_node] != INF:
            for node, d in enumerate(dist):
                if d != INF:
                    potential[node] += d

            remaining = None if flow_limit is None else flow_limit - max_flow
            if remaining is not None and remaining <= tol:
                break
            if iterations >= limit:
                raise IterationLimitError(limit)
            if budget is not None:
                elapsed = time.perf_counter() - started
                if elapsed > budget:
                    raise TimeBudgetExceededError(budget, elapsed)

            path = resolve_path(graph, pred, src_node, dst_node)
            bottleneck = min(arcs[pos].residual for pos in path)
            if remaining is not None and remaining < bottleneck:
                bottleneck = remaining

            path_cost: Cost = 0
            for pos in path:
                graph.push(pos, bottleneck)
                path_cost += arcs[pos].cost

            max_flow += bottleneck
            total_cost += bottleneck * path_cost
            iterations += 1
            _logger.debug(
                "Augmentation %d: %d arcs, amount=%s, unit cost=%s",
                iterations,
                len(path),
                bottleneck,
                path_cost,
            )

            dist, pred = dijkstra(graph, src_node, potential, tol)

        state = (
            EngineState.SOLVED if sink_reachable else EngineState.SOLVED_INFEASIBLE
        )
        _logger.debug(
            "MCMF finished in state %s: flow=%s, cost=%s, iterations=%d",
            state.name,
            max_flow,
            total_cost,
            iterations,
        )
        return EngineResult(max_flow, total_cost, iterations, state)

    def _iteration_limit(self, src_node: int) -> int:
        graph = self.graph
        source_capacity: Capacity = 0
        min_capacity: Capacity = INF
        for _, arc in graph.forward_arcs():
            if arc.src == src_node:
                source_capacity += arc.capacity
            if 0 < arc.capacity < min_capacity:
                min_capacity = arc.capacity
        if min_capacity == INF:
            min_capacity = 0
        return self.config.derive_iteration_limit(
            source_capacity, min_capacity, graph.num_edges
        )


def calc_min_cost_max_flow(
    graph: ResidualGraph,
    src_node: int,
    dst_node: int,
    *,
    flow_limit: Optional[Capacity] = None,
    config: Optional[SolverConfig] = None,
) -> EngineResult:
    """Run :class:`MinCostMaxFlow` once on ``graph`` and return its result."""
    return MinCostMaxFlow(graph, config).run(src_node, dst_node, flow_limit)
