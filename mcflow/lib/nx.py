"""NetworkX graph conversion utilities.

Build a :class:`~mcflow.builder.GraphBuilder` from a directed NetworkX graph,
and turn a :class:`~mcflow.types.dto.Solution` back into a NetworkX graph
annotated with per-edge flow.

Example:
    >>> import networkx as nx
    >>> from mcflow.lib.nx import from_networkx, solution_to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", capacity=4, cost=1)
    >>> G.add_edge("B", "C", capacity=3, cost=2)
    >>>
    >>> solution = from_networkx(G).solve("A", "C")
    >>> solution.max_flow, solution.total_cost
    (3, 9)
    >>> flow_graph = solution_to_networkx(solution)
    >>> flow_graph.edges["A", "B", 0]["flow"]
    3
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any, Optional, Union

from mcflow.builder import GraphBuilder
from mcflow.config import SolverConfig
from mcflow.types.dto import Solution

if TYPE_CHECKING:
    import networkx as nx

    NxDiGraph = Union[nx.DiGraph, nx.MultiDiGraph]
else:
    NxDiGraph = Any


def from_networkx(
    G: NxDiGraph,
    *,
    capacity_attr: str = "capacity",
    cost_attr: str = "cost",
    default_capacity: float = 1.0,
    default_cost: float = 0.0,
    config: Optional[SolverConfig] = None,
) -> GraphBuilder:
    """Create a builder holding every edge of a directed NetworkX graph.

    Node labels are converted with ``str`` and interned in sorted order, so
    isolated nodes are known to the builder and indices are deterministic.
    Edges are then added in NetworkX iteration order; parallel edges of a
    MultiDiGraph stay separate.

    Args:
        G: NetworkX DiGraph or MultiDiGraph.
        capacity_attr: Edge attribute holding capacity (default: "capacity").
        cost_attr: Edge attribute holding per-unit cost (default: "cost").
        default_capacity: Capacity when the attribute is missing.
        default_cost: Cost when the attribute is missing.
        config: Solver configuration passed to the builder.

    Returns:
        A ``READY`` GraphBuilder.

    Raises:
        TypeError: If ``G`` is not a directed NetworkX graph.
        ValueError: If two nodes stringify to the same label, e.g. ``1`` and
            ``"1"``.
        InvalidCapacityError: If an edge capacity is negative or not finite.
        InvalidCostError: If an edge cost is not finite.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph)):
        raise TypeError(
            f"Expected a directed NetworkX graph (DiGraph or MultiDiGraph), "
            f"got {type(G).__name__}"
        )

    names = Counter(str(node) for node in G.nodes())
    if len(names) < G.number_of_nodes():
        clashes = sorted(name for name, count in names.items() if count > 1)
        raise ValueError(
            f"Distinct NetworkX nodes share the same string label: {clashes}"
        )

    builder = GraphBuilder(config)
    for name in sorted(names):
        builder.add_node(name)

    for u, v, data in G.edges(data=True):
        builder.add_edge(
            str(u),
            str(v),
            data.get(capacity_attr, default_capacity),
            data.get(cost_attr, default_cost),
        )
    return builder


def solution_to_networkx(
    solution: Solution,
    *,
    capacity_attr: str = "capacity",
    cost_attr: str = "cost",
    flow_attr: str = "flow",
) -> "nx.MultiDiGraph":
    """Convert a solution's per-edge flows into a NetworkX MultiDiGraph.

    Each user edge becomes one graph edge keyed by its position among the
    parallel edges between the same labels.

    Args:
        solution: Solution returned by :meth:`GraphBuilder.solve`.
        capacity_attr: Attribute name for capacity (default: "capacity").
        cost_attr: Attribute name for cost (default: "cost").
        flow_attr: Attribute name for flow (default: "flow").

    Returns:
        nx.MultiDiGraph with one edge per user edge.
    """
    import networkx as nx

    G = nx.MultiDiGraph()
    for edge in solution.edge_flows:
        G.add_edge(
            edge.src,
            edge.dst,
            **{
                capacity_attr: edge.capacity,
                cost_attr: edge.cost,
                flow_attr: edge.flow,
            },
        )
    return G
