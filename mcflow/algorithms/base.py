from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Per-unit cost of moving flow along an arc.
Cost = Union[int, float]

#: Capacity or flow amount.
Capacity = Union[int, float]

#: Distance assigned to nodes not reached by a shortest-path search.
INF = float("inf")


class EngineState(IntEnum):
    """
    Lifecycle of a min-cost max-flow computation.
    """

    #: Edges may still be added.
    READY = 1
    #: A solve is in progress; the graph must not be mutated.
    SOLVING = 2
    #: Terminal; the residual graph holds the final flow.
    SOLVED = 3
    #: Terminal; no positive-capacity path joins source and sink.
    SOLVED_INFEASIBLE = 4
