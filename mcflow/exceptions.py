"""Exception hierarchy for mcflow.

Every error derives from :class:`McflowError` and from the builtin exception
that best describes it, so callers may catch either.
"""

from __future__ import annotations

from typing import Hashable


class McflowError(Exception):
    """Base class for all mcflow errors."""


class UnreachableNodeError(McflowError, KeyError):
    """A source or sink label was never introduced by any edge."""

    def __init__(self, label: Hashable) -> None:
        super().__init__(label)
        self.label = label

    def __str__(self) -> str:
        return f"Node '{self.label}' is not in the graph."


class UnknownIndexError(McflowError, IndexError):
    """A node index was never allocated by the registry."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Node index {index} was never allocated.")
        self.index = index


class InvalidCapacityError(McflowError, ValueError):
    """Edge capacity is negative or not a finite number."""


class InvalidCostError(McflowError, ValueError):
    """Edge cost is not a finite number."""


class NegativeCycleError(McflowError, ValueError):
    """A negative-cost cycle with positive residual capacity is reachable."""


class GraphStateError(McflowError, RuntimeError):
    """The builder was used outside of its allowed lifecycle state."""


class SolverBudgetError(McflowError, RuntimeError):
    """The solver ran out of its iteration or time budget."""


class IterationLimitError(SolverBudgetError):
    """Augmenting-path iterations exceeded the configured bound."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Solver exceeded the iteration limit of {limit}.")
        self.limit = limit


class TimeBudgetExceededError(SolverBudgetError):
    """Solving took longer than the configured time budget."""

    def __init__(self, budget: float, elapsed: float) -> None:
        super().__init__(
            f"Solver exceeded its time budget of {budget:.3f}s "
            f"(elapsed {elapsed:.3f}s)."
        )
        self.budget = budget
        self.elapsed = elapsed
