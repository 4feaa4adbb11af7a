"""Shared fixtures for the wayfinder tests."""

from __future__ import annotations

import pytest

from wayfinder.domain.models import Edge, Vertex
from wayfinder.graph.model import Graph


def _connect(graph: Graph, first_id: int, second_id: int) -> None:
    """Add both directed edges between two existing vertices."""
    first = graph.get_vertex_by_id(first_id)
    second = graph.get_vertex_by_id(second_id)
    graph.add_edge(Edge.between(first, second))
    graph.add_edge(Edge.between(second, first))


@pytest.fixture
def connect():
    """Return a helper that joins two vertices of a graph in both directions."""
    return _connect


@pytest.fixture
def square_graph() -> Graph:
    """A 100x100 square 0-1-2-3 with a long detour through 4.

        0 ---- 1
        |      |
        3 ---- 2       4 (connected to 0 and 2 only, far away)
    """
    graph = Graph()
    for vertex in (
        Vertex(0, 0, 0),
        Vertex(1, 100, 0),
        Vertex(2, 100, 100),
        Vertex(3, 0, 100),
        Vertex(4, 500, 500),
    ):
        graph.add_vertex(vertex)
    for first, second in ((0, 1), (1, 2), (2, 3), (3, 0), (0, 4), (4, 2)):
        _connect(graph, first, second)
    graph.add_label("Entrance", graph.get_vertex_by_id(0))
    graph.add_label("Library", graph.get_vertex_by_id(2))
    return graph


@pytest.fixture
def data_texts() -> dict[str, str]:
    return {
        "vertices": "ID,X,Y\n0,0,0\n1,3,4\n2,3,0\n5,10,10\n",
        "edges": "0,1\n1,2\n",
        "labels": "LABEL,ID\nENTRANCE,5\nDesk,1\n",
    }
