"""Shared graph fixtures.

Each fixture returns a fresh ``READY`` builder; a builder solves only once.
"""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

import pytest

from mcflow.builder import GraphBuilder
from mcflow.graph.registry import NodeRegistry
from mcflow.graph.residual import ResidualGraph

EdgeSpec = Tuple[str, str, float, float]


def _builder(edges: Iterable[EdgeSpec]) -> GraphBuilder:
    builder = GraphBuilder()
    for src, dst, capacity, cost in edges:
        builder.add_edge(src, dst, capacity, cost)
    return builder


@pytest.fixture
def build() -> Callable[[Iterable[EdgeSpec]], GraphBuilder]:
    """Factory turning ``(src, dst, capacity, cost)`` tuples into a builder."""
    return _builder


@pytest.fixture
def residual_factory() -> Callable[
    [Iterable[EdgeSpec]], Tuple[NodeRegistry, ResidualGraph]
]:
    """Factory returning a registry and residual graph holding the given edges."""

    def make(edges: Iterable[EdgeSpec]) -> Tuple[NodeRegistry, ResidualGraph]:
        registry = NodeRegistry()
        graph = ResidualGraph()

        def intern(label: str) -> int:
            if label not in registry:
                graph.add_node()
            return registry.intern(label)

        for src, dst, capacity, cost in edges:
            graph.add_arc_pair(intern(src), intern(dst), capacity, cost)
        return registry, graph

    return make


@pytest.fixture
def single_edge() -> GraphBuilder:
    #     [5, 2]
    #  a ────────► b
    return _builder([("a", "b", 5, 2)])


@pytest.fixture
def example_graph() -> GraphBuilder:
    # [capacity, cost]
    #
    #     [10,200]      [20,0]      [15,0]
    #  a ─────────► b ─────────► c ─────────► e
    #  │                                      ▲
    #  │  [2,100]          [3,0]              │
    #  └─────────► d ─────────────────────────┘
    return _builder(
        [
            ("a", "b", 10, 200),
            ("b", "c", 20, 0),
            ("c", "e", 15, 0),
            ("a", "d", 2, 100),
            ("d", "e", 3, 0),
        ]
    )


@pytest.fixture
def disconnected() -> GraphBuilder:
    # a and b are known labels with no path between them
    #  x ──► a      b ──► y
    return _builder([("x", "a", 4, 1), ("b", "y", 4, 1)])


@pytest.fixture
def parallel_edges() -> GraphBuilder:
    #      [3, 5]
    #   ┌─────────┐
    #  a           ► b
    #   └─────────┘
    #      [2, 1]
    return _builder([("a", "b", 3, 5), ("a", "b", 2, 1)])


@pytest.fixture
def negative_costs() -> GraphBuilder:
    #     [5,-3]       [5,2]
    #  a ───────► b ───────► c
    #  │                     ▲
    #  └─────────────────────┘
    #          [5,1]
    return _builder([("a", "b", 5, -3), ("b", "c", 5, 2), ("a", "c", 5, 1)])


@pytest.fixture
def negative_cycle() -> GraphBuilder:
    #     [1,-5]
    #  a ───────► b ───────► c
    #  ▲          │  [1,0]
    #  └──────────┘
    #     [1,1]
    return _builder([("a", "b", 1, -5), ("b", "a", 1, 1), ("b", "c", 1, 0)])


@pytest.fixture
def reroute_graph() -> GraphBuilder:
    # Classic case where the second augmentation cancels flow on b -> c.
    #
    #        [1,1]        [1,1]
    #   s ───────► b ───────► t
    #   │          │          ▲
    #   │ [1,1]    │ [1,0]    │ [1,1]
    #   ▼          ▼          │
    #   a ───────► c ─────────┘
    #       [1,5]
    return _builder(
        [
            ("s", "b", 1, 1),
            ("b", "c", 1, 0),
            ("c", "t", 1, 1),
            ("s", "a", 1, 1),
            ("a", "c", 1, 5),
            ("b", "t", 1, 1),
        ]
    )
