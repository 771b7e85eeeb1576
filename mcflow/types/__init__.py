"""Result types exposed by mcflow."""

from mcflow.types.dto import EdgeFlow, Path, Solution

__all__ = ["EdgeFlow", "Path", "Solution"]
