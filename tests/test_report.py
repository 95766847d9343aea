from graphedit.graph import WeightedGraph
from graphedit.model import GraphType, Vertex
from graphedit.report import Reporter, sorted_degrees

A = Vertex("A")
B = Vertex("B")
C = Vertex("C")


def test_sorted_degrees_keeps_order_for_ties():
    assert sorted_degrees({A: 1, B: 2, C: 1}) == [(B, 2), (A, 1), (C, 1)]


def test_degrees(undirected):
    assert Reporter().degrees(undirected) == (
        "Vertices degrees:\n" "B: 2.\n" "A: 1.\n" "C: 1.\n"
    )


def test_hinges():
    graph = WeightedGraph(GraphType.DIRECTED).add_vertex(A).add_vertex(B)
    reporter = Reporter()
    assert reporter.hinges(graph) == "Vertices with hinges: []\n"
    graph = graph.add_edge(A, A, 1).add_edge(B, B, 2)
    assert reporter.hinges(graph) == "Vertices with hinges: [A, B]\n"


def test_summary(weighted):
    assert Reporter().summary(weighted) == (
        "WeightedGraph (UNDIRECTED): 3 vertices, 4 stored edges.\n"
    )
