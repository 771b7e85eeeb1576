"""Graph storage: node registry and residual arc store."""

from mcflow.graph.registry import NodeRegistry
from mcflow.graph.residual import Arc, ResidualGraph

__all__ = ["Arc", "NodeRegistry", "ResidualGraph"]
