"""Tests for the in-memory Graph."""

import pytest

from wayfinder.domain.models import Edge, Path, Vertex
from wayfinder.graph.model import Graph


def test_add_vertex_and_lookup_by_id():
    graph = Graph()
    vertex = Vertex(7, 1, 2)
    graph.add_vertex(vertex)

    assert graph.get_vertex_by_id(7) is vertex
    assert graph.get_vertex_by_id(8) is None
    assert 7 in graph
    assert len(graph) == 1


def test_negative_ids_are_ordinary_vertices():
    graph = Graph()
    graph.add_vertex(Vertex(-1, 0, 0))
    graph.add_vertex(Vertex(-2, 640, 480))

    assert graph.get_vertex_by_id(-2).x == 640
    assert graph.get_bounds() == (640, 480)


def test_duplicate_id_overwrites_but_bounds_never_shrink():
    graph = Graph()
    graph.add_vertex(Vertex(0, 0, 0))
    graph.add_vertex(Vertex(1, 2, 2))
    graph.add_vertex(Vertex(1, 1, 1))

    assert graph.get_vertex_by_id(1).x == 1
    assert len(graph) == 2
    assert graph.get_bounds() == (2, 2)


def test_bounds_grow_componentwise():
    graph = Graph()
    graph.add_vertex(Vertex(0, 10, 1))
    graph.add_vertex(Vertex(1, 3, 30))

    assert graph.get_bounds() == (10, 30)


def test_add_edge_keeps_insertion_order_and_duplicates():
    graph = Graph()
    a, b, c = Vertex(0, 0, 0), Vertex(1, 10, 0), Vertex(2, 1, 0)
    for vertex in (a, b, c):
        graph.add_vertex(vertex)
    graph.add_edge(Edge.between(a, b))
    graph.add_edge(Edge.between(a, c))
    graph.add_edge(Edge.between(a, b))

    assert [edge.to_id for edge in graph.edges_from(0)] == [1, 2, 1]
    assert graph.edges_from(1) == ()
    assert len(list(graph.edges())) == 3


def test_edge_length_is_euclidean():
    edge = Edge.between(Vertex(0, 0, 0), Vertex(1, 3, 4))

    assert edge.length == pytest.approx(5.0)
    assert str(edge) == "Edge 0 => 1"


def test_labels_are_case_insensitive_and_ordered():
    graph = Graph()
    vertex = Vertex(5, 0, 0)
    graph.add_vertex(vertex)
    graph.add_label("Entrance", vertex)
    graph.add_label("front door", vertex)

    assert graph.get_vertex_by_label("ENTRANCE") is vertex
    assert graph.get_vertex_by_label("Front Door") is vertex
    assert graph.get_vertex_by_label("exit") is None
    assert graph.get_all_labels() == ["ENTRANCE", "FRONT DOOR"]
    assert vertex.labels == {"ENTRANCE", "FRONT DOOR"}


def test_relabeling_moves_label_to_new_vertex():
    graph = Graph()
    first, second = Vertex(1, 0, 0), Vertex(2, 1, 1)
    graph.add_vertex(first)
    graph.add_vertex(second)
    graph.add_label("desk", first)
    graph.add_label("DESK", second)

    assert graph.get_vertex_by_label("desk") is second
    assert graph.get_all_labels() == ["DESK"]
    assert first.labels == set()
    assert second.labels == {"DESK"}


def test_describe_lists_every_part_of_the_graph(square_graph):
    square_graph.set_image("floor1.png")
    text = square_graph.describe()

    assert text.startswith("GRAPH:")
    assert "    floor1.png" in text
    assert "    #1(100, 0)" in text
    assert "    Edge 0 => 1" in text
    assert "    ENTRANCE => #0(0, 0)" in text
    assert text.endswith("END OF GRAPH")


def test_describe_without_image():
    assert "no image set" in Graph().describe()


def test_path_requires_vertices_and_matching_edges():
    with pytest.raises(ValueError):
        Path(vertices=())
    with pytest.raises(ValueError):
        Path(vertices=(Vertex(0, 0, 0), Vertex(1, 1, 1)))


def test_path_from_vertices_derives_edges_and_length():
    path = Path.from_vertices([Vertex(0, 0, 0), Vertex(1, 3, 4), Vertex(2, 3, 0)])

    assert path.vertex_ids == (0, 1, 2)
    assert path.length == pytest.approx(9.0)
    assert path.start.id == 0
    assert path.end.id == 2
    assert str(path) == "PATH: #0(0, 0) => #1(3, 4) => #2(3, 0)"
