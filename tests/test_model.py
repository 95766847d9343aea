import pytest

from graphedit.model import GraphType, Vertex, copy_adjacency


def test_vertices_are_equal_by_name():
    assert Vertex("Paris") == Vertex("Paris")
    assert hash(Vertex("Paris")) == hash(Vertex("Paris"))
    assert Vertex("Paris") != Vertex("paris")
    assert len({Vertex("A"), Vertex("A"), Vertex("B")}) == 2


def test_vertex_is_not_equal_to_its_name():
    assert Vertex("A") != "A"


def test_vertex_name_is_read_only():
    vertex = Vertex("A")
    with pytest.raises(AttributeError):
        vertex.name = "B"  # type: ignore
    assert str(vertex) == "A"
    assert repr(vertex) == "Vertex('A')"


def test_graph_type_parse():
    assert GraphType.parse("DIRECTED") is GraphType.DIRECTED
    assert GraphType.parse("UNDIRECTED") is GraphType.UNDIRECTED
    with pytest.raises(KeyError):
        GraphType.parse("directed")


def test_copy_adjacency_copies_both_levels():
    a, b = Vertex("A"), Vertex("B")
    original = {a: {b: 1}, b: {}}
    copy = copy_adjacency(original)
    copy[a][a] = 2
    copy[b][a] = 3
    assert original == {a: {b: 1}, b: {}}
