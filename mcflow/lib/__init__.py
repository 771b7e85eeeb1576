"""Integrations with external graph libraries."""

from mcflow.lib.nx import from_networkx, solution_to_networkx

__all__ = [
    "from_networkx",
    "solution_to_networkx",
]
