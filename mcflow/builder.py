"""Graph builder: the public entry point for solving min-cost max-flow.

Example:
    >>> from mcflow import new_builder
    >>> builder = new_builder()
    >>> builder.add_edge("a", "b", 10, 200)
    0
    >>> builder.add_edge("a", "d", 2, 100)
    1
    >>> builder.add_edge("b", "e", 20, 0)
    2
    >>> builder.add_edge("d", "e", 3, 0)
    3
    >>> solution = builder.solve("a", "e")
    >>> solution.max_flow, solution.total_cost
    (12, 2200)
"""

from __future__ import annotations

import math
import threading
from numbers import Real
from typing import Optional, Tuple

from mcflow.algorithms.base import Capacity, Cost, EngineState
from mcflow.algorithms.decompose import decompose_flow
from mcflow.algorithms.mcmf import MinCostMaxFlow
from mcflow.config import DEFAULT_CONFIG, SolverConfig
from mcflow.exceptions import (
    GraphStateError,
    InvalidCapacityError,
    InvalidCostError,
    NegativeCycleError,
    SolverBudgetError,
)
from mcflow.graph.registry import NodeRegistry
from mcflow.graph.residual import ResidualGraph
from mcflow.logging import get_logger
from mcflow.types.dto import EdgeFlow, Solution

LOGGER = get_logger(__name__)


class GraphBuilder:
    """Collects edges, then solves min-cost max-flow exactly once.

    Labels are interned on first use by :meth:`add_edge`. Every call adds a
    distinct edge, including parallel edges between the same labels.

    The builder is ``READY`` until :meth:`solve` is called. While solving it
    holds an internal lock and rejects mutation from other threads; afterwards
    it is terminal and rejects both :meth:`add_edge` and :meth:`solve`.

    Attributes:
        config: Solver tolerances and budgets.
    """

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._registry = NodeRegistry()
        self._graph = ResidualGraph()
        self._lock = threading.Lock()
        self._state = EngineState.READY

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def num_nodes(self) -> int:
        return len(self._registry)

    @property
    def num_edges(self) -> int:
        return self._graph.num_edges

    def nodes(self) -> Tuple[str, ...]:
        """Node labels in first-seen order."""
        return self._registry.labels()

    def add_node(self, label: str) -> int:
        """Register a node label without adding edges; return its index."""
        if not self._lock.acquire(blocking=False):
            raise GraphStateError("Cannot add nodes while the graph is being solved.")
        try:
            self._ensure_ready("add nodes")
            return self._intern(label)
        finally:
            self._lock.release()

    def add_edge(self, src: str, dst: str, capacity: Capacity, cost: Cost) -> int:
        """Add a directed edge ``src -> dst``.

        Args:
            src: Tail node label.
            dst: Head node label.
            capacity: Non-negative finite capacity.
            cost: Finite per-unit cost; may be negative as long as no
                negative-cost cycle of positive capacity results.

        Returns:
            Index of the new edge in insertion order.

        Raises:
            InvalidCapacityError: If capacity is negative, NaN or infinite, or
                positive but not above ``config.tolerance``.
            InvalidCostError: If cost is NaN or infinite.
            GraphStateError: If the builder is solving or already solved.
        """
        if (
            not isinstance(capacity, Real)
            or not math.isfinite(capacity)
            or capacity < 0
        ):
            raise InvalidCapacityError(
                f"Edge '{src}' -> '{dst}' has invalid capacity {capacity!r}; "
                "expected a finite number >= 0."
            )
        if 0 < capacity <= self.config.tolerance:
            raise InvalidCapacityError(
                f"Edge '{src}' -> '{dst}' has capacity {capacity!r} at or below the "
                f"solver tolerance {self.config.tolerance!r}; use 0 or lower the "
                "tolerance."
            )
        if not isinstance(cost, Real) or not math.isfinite(cost):
            raise InvalidCostError(
                f"Edge '{src}' -> '{dst}' has invalid cost {cost!r}; "
                "expected a finite number."
            )
        if not self._lock.acquire(blocking=False):
            raise GraphStateError("Cannot add edges while the graph is being solved.")
        try:
            self._ensure_ready("add edges")
            u = self._intern(src)
            v = self._intern(dst)
            return self._graph.add_arc_pair(u, v, capacity, cost)
        finally:
            self._lock.release()

    def solve(
        self, source: str, sink: str, flow_limit: Optional[Capacity] = None
    ) -> Solution:
        """Compute the minimum-cost maximum flow from ``source`` to ``sink``.

        A source and sink that exist but are not connected yield a zero-flow
        solution rather than an error.

        Args:
            source: Source node label.
            sink: Sink node label.
            flow_limit: Optional cap on the flow value; the cheapest flow of
                that value is returned.

        Returns:
            Solution with flow value, cost, path decomposition and edge flows.

        Raises:
            UnreachableNodeError: If ``source`` or ``sink`` was never added.
            NegativeCycleError: If a negative-cost cycle is reachable from ``source``.
            SolverBudgetError: If the iteration or time budget is exhausted.
            GraphStateError: If the builder is solving or already solved.
        """
        if not self._lock.acquire(blocking=False):
            raise GraphStateError("The graph is already being solved.")
        try:
            self._ensure_ready("solve")
            src_node = self._registry.index_of(source)
            dst_node = self._registry.index_of(sink)

            self._state = EngineState.SOLVING
            LOGGER.debug(
                "Solving MCMF '%s' -> '%s' on %d nodes, %d edges",
                source,
                sink,
                self.num_nodes,
                self.num_edges,
            )
            engine = MinCostMaxFlow(self._graph, self.config)
            try:
                result = engine.run(src_node, dst_node, flow_limit)
                paths = decompose_flow(
                    self._graph,
                    self._registry,
                    src_node,
                    dst_node,
                    self.config.tolerance,
                )
                solution = Solution(
                    max_flow=result.max_flow,
                    total_cost=result.total_cost,
                    paths=paths,
                    edge_flows=self._edge_flows(),
                    iterations=result.iterations,
                    state=result.state,
                )
            except (NegativeCycleError, SolverBudgetError) as exc:
                self._state = EngineState.READY
                LOGGER.warning("MCMF '%s' -> '%s' failed: %s", source, sink, exc)
                raise
            except Exception:
                # Flow left by a completed engine run must not leak into a retry
                self._graph.reset_flow()
                self._state = EngineState.READY
                raise

            self._state = result.state
            LOGGER.debug(
                "Solved MCMF '%s' -> '%s': flow=%s cost=%s paths=%d",
                source,
                sink,
                solution.max_flow,
                solution.total_cost,
                len(paths),
            )
            return solution
        finally:
            self._lock.release()

    def _intern(self, label: str) -> int:
        before = len(self._registry)
        index = self._registry.intern(label)
        if index == before:
            self._graph.add_node()
        return index

    def _ensure_ready(self, action: str) -> None:
        if self._state != EngineState.READY:
            raise GraphStateError(
                f"Cannot {action}: builder is in state {self._state.name}."
            )

    def _edge_flows(self) -> Tuple[EdgeFlow, ...]:
        label_of = self._registry.label_of
        return tuple(
            EdgeFlow(
                index=index,
                src=label_of(arc.src),
                dst=label_of(arc.dst),
                capacity=arc.capacity,
                cost=arc.cost,
                flow=arc.flow,
            )
            for index, arc in self._graph.forward_arcs()
        )

    def __repr__(self) -> str:
        return (
            f"GraphBuilder(nodes={self.num_nodes}, edges={self.num_edges}, "
            f"state={self._state.name})"
        )


def new_builder(config: Optional[SolverConfig] = None) -> GraphBuilder:
    """Return an empty :class:`GraphBuilder`."""
    return GraphBuilder(config)
