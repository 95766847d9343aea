import random

import pytest

from graphedit.graph import UnweightedGraph, WeightedGraph
from graphedit.model import GraphType, Vertex

A = Vertex("A")
B = Vertex("B")
C = Vertex("C")


def with_vertices(graph, *vertices):
    for vertex in vertices:
        graph = graph.add_vertex(vertex)
    return graph


@pytest.fixture
def undirected():
    """Undirected unweighted path A - B - C."""
    graph = with_vertices(UnweightedGraph(GraphType.UNDIRECTED), A, B, C)
    return graph.add_edge(A, B).add_edge(B, C)


@pytest.fixture
def directed():
    """Directed unweighted graph A -> B -> C -> A."""
    graph = with_vertices(UnweightedGraph(GraphType.DIRECTED), A, B, C)
    return graph.add_edge(A, B).add_edge(B, C).add_edge(C, A)


@pytest.fixture
def weighted():
    """Undirected weighted graph with A - B (3) and B - C (7)."""
    graph = with_vertices(WeightedGraph(GraphType.UNDIRECTED), A, B, C)
    return graph.add_edge(A, B, 3).add_edge(B, C, 7)


@pytest.fixture
def names_file(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("name\nOslo\nRiga\nBern\n")
    return path


@pytest.fixture
def rng():
    return random.Random(1234)
