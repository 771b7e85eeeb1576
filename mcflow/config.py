"""Configuration classes for mcflow solvers."""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SolverConfig:
    """Numeric tolerances and budgets for the min-cost max-flow solver."""

    # Residual capacity / flow below this value is treated as zero
    tolerance: float = 2**-12

    # Hard cap on augmenting iterations; None derives one per solve
    max_iterations: Optional[int] = None

    # Wall-clock budget in seconds; None means unlimited
    time_budget: Optional[float] = None

    # Extra iterations granted on top of the derived bound
    iteration_slack: int = 16

    def __post_init__(self) -> None:
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be at least 1, got {self.max_iterations}"
            )
        if self.time_budget is not None and not self.time_budget > 0:
            raise ValueError(f"time_budget must be positive, got {self.time_budget}")

    def derive_iteration_limit(
        self, source_capacity: float, min_capacity: float, num_edges: int
    ) -> int:
        """Bound the number of augmentations for one solve.

        With integral capacities every augmentation moves at least one unit,
        so ``source_capacity / min_capacity`` already bounds the loop. The
        edge count factor covers fractional bottlenecks.

        Args:
            source_capacity: Total capacity of edges leaving the source.
            min_capacity: Smallest positive edge capacity in the graph.
            num_edges: Number of user edges.

        Returns:
            The configured ``max_iterations`` if set, otherwise the derived bound.
        """
        if self.max_iterations is not None:
            return self.max_iterations
        if source_capacity <= 0 or min_capacity <= 0:
            return self.iteration_slack
        units = math.ceil(source_capacity / min_capacity)
        return units * max(num_edges, 1) + self.iteration_slack


# Default configuration instance
DEFAULT_CONFIG = SolverConfig()
