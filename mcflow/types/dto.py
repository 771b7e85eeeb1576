"""Immutable result containers returned by the solver.

None of these objects hold references into the residual graph; they can be
kept after the builder and its graph are discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple

from mcflow.algorithms.base import Capacity, Cost, EngineState


@dataclass(frozen=True)
class Path:
    """A simple source-to-sink path carrying part of the flow.

    Attributes:
        nodes: Node labels from source to sink, no label repeated.
        flow: Amount of flow assigned to this path.
        unit_cost: Sum of the original edge costs along the path.
    """

    nodes: Tuple[str, ...]
    flow: Capacity
    unit_cost: Cost = 0

    @property
    def cost(self) -> Cost:
        """Cost of the flow on this path (``flow * unit_cost``)."""
        return self.flow * self.unit_cost

    @property
    def src(self) -> str:
        return self.nodes[0]

    @property
    def dst(self) -> str:
        return self.nodes[-1]

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": list(self.nodes),
            "flow": self.flow,
            "unit_cost": self.unit_cost,
            "cost": self.cost,
        }


@dataclass(frozen=True)
class EdgeFlow:
    """Final flow on one user edge.

    Attributes:
        index: Edge index in insertion order.
        src: Tail node label.
        dst: Head node label.
        capacity: Edge capacity.
        cost: Per-unit edge cost.
        flow: Flow assigned by the solver.
    """

    index: int
    src: str
    dst: str
    capacity: Capacity
    cost: Cost
    flow: Capacity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "src": self.src,
            "dst": self.dst,
            "capacity": self.capacity,
            "cost": self.cost,
            "flow": self.flow,
        }


@dataclass(frozen=True)
class Solution:
    """Result of a min-cost max-flow solve.

    Attributes:
        max_flow: Maximum flow value (equals the sum of path flows).
        total_cost: Minimum cost of that flow (equals the sum of path costs).
        paths: Flow decomposition in extraction order.
        edge_flows: Final flow per user edge in insertion order.
        iterations: Number of augmenting iterations the engine performed.
        state: Terminal engine state.
    """

    max_flow: Capacity
    total_cost: Cost
    paths: Tuple[Path, ...] = ()
    edge_flows: Tuple[EdgeFlow, ...] = field(default=(), repr=False)
    iterations: int = 0
    state: EngineState = EngineState.SOLVED

    @property
    def is_feasible(self) -> bool:
        """False when no positive-capacity path joins source and sink."""
        return self.state != EngineState.SOLVED_INFEASIBLE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_flow": self.max_flow,
            "total_cost": self.total_cost,
            "state": self.state.name,
            "iterations": self.iterations,
            "paths": [path.to_dict() for path in self.paths],
            "edge_flows": [edge.to_dict() for edge in self.edge_flows],
        }
