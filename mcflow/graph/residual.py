"""Residual graph with paired forward/reverse arcs.

Each user edge is stored as two arcs in one flat list: the forward arc at an
even position ``i`` and its reverse at ``i ^ 1``. The reverse arc has zero
capacity and negated cost, and its flow is always the negated forward flow, so
its residual capacity equals the flow that can still be cancelled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from mcflow.algorithms.base import Capacity, Cost


@dataclass
class Arc:
    """A directed arc of the residual graph.

    Attributes:
        src: Tail node index.
        dst: Head node index.
        capacity: Upper bound on flow (0 for reverse arcs).
        cost: Per-unit cost (negated original cost for reverse arcs).
        flow: Current flow; negative on reverse arcs.
    """

    src: int
    dst: int
    capacity: Capacity
    cost: Cost
    flow: Capacity = 0

    @property
    def residual(self) -> Capacity:
        return self.capacity - self.flow


class ResidualGraph:
    """Arc store plus per-node adjacency over arc positions."""

    def __init__(self) -> None:
        self.arcs: List[Arc] = []
        self._adj: List[List[int]] = []

    @property
    def num_nodes(self) -> int:
        return len(self._adj)

    @property
    def num_edges(self) -> int:
        return len(self.arcs) // 2

    def add_node(self) -> int:
        """Append a node with no arcs and return its index."""
        self._adj.append([])
        return len(self._adj) - 1

    def add_arc_pair(self, src: int, dst: int, capacity: Capacity, cost: Cost) -> int:
        """Append a forward arc and its reverse pair.

        Args:
            src: Tail node index of the forward arc.
            dst: Head node index of the forward arc.
            capacity: Forward capacity.
            cost: Forward per-unit cost.

        Returns:
            The edge index (forward arc position divided by two).

        Raises:
            IndexError: If either node index has not been added.
        """
        if not (0 <= src < len(self._adj) and 0 <= dst < len(self._adj)):
            raise IndexError(f"Arc endpoints ({src}, {dst}) are not graph nodes.")
        pos = len(self.arcs)
        self.arcs.append(Arc(src, dst, capacity, cost))
        self.arcs.append(Arc(dst, src, 0, -cost))
        self._adj[src].append(pos)
        self._adj[dst].append(pos + 1)
        return pos // 2

    @staticmethod
    def pair(arc_index: int) -> int:
        """Position of the paired arc."""
        return arc_index ^ 1

    @staticmethod
    def is_forward(arc_index: int) -> bool:
        return arc_index & 1 == 0

    def out_arcs(self, node: int) -> List[int]:
        """Positions of all arcs leaving ``node``, forward and reverse."""
        return self._adj[node]

    def push(self, arc_index: int, amount: Capacity) -> None:
        """Send ``amount`` along an arc, updating its pair in the same step."""
        self.arcs[arc_index].flow += amount
        self.arcs[arc_index ^ 1].flow -= amount

    def forward_arcs(self) -> Iterator[Tuple[int, Arc]]:
        """Yield ``(edge_index, arc)`` for every forward arc in insertion order."""
        for pos in range(0, len(self.arcs), 2):
            yield pos // 2, self.arcs[pos]

    def edge_flows(self) -> Tuple[Capacity, ...]:
        """Forward flow of every user edge in insertion order."""
        return tuple(arc.flow for _, arc in self.forward_arcs())

    def reset_flow(self) -> None:
        for arc in self.arcs:
            arc.flow = 0

    def __repr__(self) -> str:
        return f"ResidualGraph(nodes={self.num_nodes}, edges={self.num_edges})"
