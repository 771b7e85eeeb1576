"""mcflow: minimum-cost maximum flow with path decomposition.

Build a directed graph edge by edge, solve once, and read back the maximum
flow, its minimum cost, and the flow split into simple source-to-sink paths.

Primary API:
    new_builder() - Create an empty GraphBuilder
    GraphBuilder - Collects edges and solves min-cost max-flow
    Solution, Path, EdgeFlow - Immutable results
    SolverConfig - Tolerance and iteration/time budgets
    from_networkx() - Build a GraphBuilder from a NetworkX digraph

Example:
    from mcflow import new_builder

    builder = new_builder()
    builder.add_edge("a", "b", 10, 200)
    builder.add_edge("b", "c", 20, 0)
    builder.add_edge("c", "e", 15, 0)
    builder.add_edge("a", "d", 2, 100)
    builder.add_edge("d", "e", 3, 0)

    solution = builder.solve("a", "e")
    solution.max_flow      # 12
    solution.total_cost    # 2200
    for path in solution.paths:
        print(" -> ".join(path.nodes), path.flow)
"""

from __future__ import annotations

from mcflow import logging
from mcflow._version import __version__
from mcflow.algorithms.base import EngineState
from mcflow.builder import GraphBuilder, new_builder
from mcflow.config import DEFAULT_CONFIG, SolverConfig
from mcflow.exceptions import (
    GraphStateError,
    InvalidCapacityError,
    InvalidCostError,
    IterationLimitError,
    McflowError,
    NegativeCycleError,
    SolverBudgetError,
    TimeBudgetExceededError,
    UnknownIndexError,
    UnreachableNodeError,
)
from mcflow.lib.nx import from_networkx, solution_to_networkx
from mcflow.types.dto import EdgeFlow, Path, Solution

__all__ = [
    # Version
    "__version__",
    # Builder (primary API)
    "new_builder",
    "GraphBuilder",
    # Results
    "Solution",
    "Path",
    "EdgeFlow",
    "EngineState",
    # Configuration
    "SolverConfig",
    "DEFAULT_CONFIG",
    # Errors
    "McflowError",
    "UnreachableNodeError",
    "UnknownIndexError",
    "InvalidCapacityError",
    "InvalidCostError",
    "NegativeCycleError",
    "GraphStateError",
    "SolverBudgetError",
    "IterationLimitError",
    "TimeBudgetExceededError",
    # Library integrations (NetworkX)
    "from_networkx",
    "solution_to_networkx",
    # Utilities
    "logging",
]
