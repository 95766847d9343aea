"""Weighted and unweighted graphs.

Graphs are immutable. Every edit returns a new graph that owns a fresh copy of
the adjacency mapping, so holding on to an old graph is always safe.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import (
    ClassVar,
    Dict,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
)

from graphedit import serial
from graphedit.errors import (
    EdgeAlreadyExists,
    EdgeNotFound,
    InvalidInput,
    InvalidVertex,
    VertexAlreadyExists,
    VertexNotFound,
)
from graphedit.model import Adjacency, GraphType, Vertex, copy_adjacency

P = TypeVar("P")
G = TypeVar("G", bound="Graph")


class Graph(ABC, Generic[P]):

    """A graph whose edges carry payloads of type P.

    The graph type (directed or undirected) is fixed at construction. For
    undirected graphs, every edge is stored in both directions with the same
    payload. Subclasses choose the payload and provide add_edge.
    """

    weighted: ClassVar[bool]

    def __init__(
        self,
        type: GraphType = GraphType.UNDIRECTED,
        adjacency: Optional[Mapping[Vertex, Mapping[Vertex, P]]] = None,
    ):
        self.type = type
        self._adjacency: Adjacency[P] = copy_adjacency(adjacency or {})

    @classmethod
    def _adopt(cls: Type[G], type: GraphType, adjacency: Adjacency) -> G:
        """Create a graph that takes ownership of adjacency without copying."""
        graph = cls.__new__(cls)
        graph.type = type
        graph._adjacency = adjacency
        return graph

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(type={self.type.name}, N={len(self._adjacency)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.type is other.type
            and self._adjacency == other._adjacency
        )

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._adjacency)

    @property
    def adjacency(self) -> Adjacency[P]:
        """Return a copy of the adjacency mapping."""
        return copy_adjacency(self._adjacency)

    def vertices(self) -> List[Vertex]:
        return list(self._adjacency)

    def neighbors(self, vertex: Vertex) -> Dict[Vertex, P]:
        """Return a copy of the outgoing edges of vertex."""
        self._check_vertex(vertex)
        return dict(self._adjacency[vertex])

    def has_edge(self, source: Vertex, destination: Vertex) -> bool:
        return destination in self._adjacency.get(source, {})

    def _check_vertex(self, vertex: Vertex):
        if vertex not in self._adjacency:
            raise VertexNotFound(f'Vertex "{vertex}" not found in graph.')

    def _check_endpoints(self, source: Vertex, destination: Vertex):
        source_missing = source not in self._adjacency
        destination_missing = destination not in self._adjacency
        if source_missing and destination_missing:
            raise VertexNotFound(
                f'Vertices "{source}" and "{destination}" are not found in graph.'
            )
        if source_missing:
            raise VertexNotFound(f'Vertex "{source}" is not found in graph.')
        if destination_missing:
            raise VertexNotFound(f'Vertex "{destination}" is not found in graph.')

    def add_vertex(self: G, vertex: Vertex) -> G:
        """Return a new graph with vertex added and no edges."""
        if vertex in self._adjacency:
            raise VertexAlreadyExists(
                f'Cannot add vertex "{vertex}", already exists in graph.'
            )
        result = copy_adjacency(self._adjacency)
        result[vertex] = {}
        logging.debug("added vertex %s", vertex)
        return self._adopt(self.type, result)

    def remove_vertex(self: G, vertex: Vertex) -> G:
        """Return a new graph without vertex.

        For undirected graphs, edges to vertex are removed too. For directed
        graphs, edges pointing at vertex from other vertices are left in place.
        """
        self._check_vertex(vertex)
        result = copy_adjacency(self._adjacency)
        del result[vertex]
        if self.type is GraphType.UNDIRECTED:
            for neighbors in result.values():
                neighbors.pop(vertex, None)
        logging.debug("removed vertex %s", vertex)
        return self._adopt(self.type, result)

    def _add_edge(self: G, source: Vertex, destination: Vertex, payload: P) -> G:
        self._check_endpoints(source, destination)
        if destination in self._adjacency[source]:
            raise EdgeAlreadyExists(f"Edge ({source}, {destination}) already exists.")
        result = copy_adjacency(self._adjacency)
        result[source][destination] = payload
        if self.type is GraphType.UNDIRECTED:
            result[destination][source] = payload
        logging.debug("added edge (%s, %s)", source, destination)
        return self._adopt(self.type, result)

    def remove_edge(self: G, source: Vertex, destination: Vertex) -> G:
        """Return a new graph without the edge from source to destination.

        For undirected graphs, the mirrored edge is removed too.
        """
        self._check_endpoints(source, destination)
        if source == destination:
            raise InvalidInput(
                f'Vertices "{source}" and "{destination}" are identical.'
            )
        if destination not in self._adjacency[source]:
            raise EdgeNotFound(f"Edge ({source}, {destination}) not found.")
        undirected = self.type is GraphType.UNDIRECTED
        if undirected and source not in self._adjacency[destination]:
            raise EdgeNotFound(f"Edge ({destination}, {source}) not found.")
        result = copy_adjacency(self._adjacency)
        del result[source][destination]
        if undirected:
            del result[destination][source]
        logging.debug("removed edge (%s, %s)", source, destination)
        return self._adopt(self.type, result)

    @classmethod
    def read_from_file(cls: Type[G], path: serial.PathLike) -> G:
        """Load a graph of this variant from a graph file.

        Raises InvalidFile if the file declares the other weighting.
        """
        _, graph_type, adjacency = serial.read(path, expect_weighted=cls.weighted)
        return cls._adopt(graph_type, adjacency)

    def print_to_file(self, path: serial.PathLike):
        """Save the graph to path, overwriting it."""
        serial.write(path, self._adjacency, self.type, self.weighted)

    def get_degrees(self) -> Dict[Vertex, int]:
        """Return the number of outgoing edges of each vertex."""
        return {vertex: len(edges) for vertex, edges in self._adjacency.items()}

    def get_hinge_vertices(self) -> List[Vertex]:
        """Return the vertices of a directed graph that have an edge to themselves.

        Undirected graphs have no hinge vertices in this sense, even when they
        have self-loops.
        """
        if self.type is not GraphType.DIRECTED:
            return []
        return [v for v, edges in self._adjacency.items() if v in edges]


class UnweightedGraph(Graph[None]):

    """A graph whose edges carry no payload."""

    weighted = False

    def add_edge(self, source: Vertex, destination: Vertex) -> UnweightedGraph:
        """Return a new graph with an edge from source to destination.

        For undirected graphs, the edge is also added in the other direction.
        """
        return self._add_edge(source, destination, None)


class WeightedGraph(Graph[int]):

    """A graph whose edges carry integer weights."""

    weighted = True

    def add_vertex(self, vertex: Vertex) -> WeightedGraph:
        if not vertex.name:
            raise InvalidVertex("Vertex must have a name.")
        return super().add_vertex(vertex)

    def add_edge(
        self, source: Vertex, destination: Vertex, weight: int
    ) -> WeightedGraph:
        """Return a new graph with a weighted edge from source to destination.

        For undirected graphs, the edge is also added in the other direction
        with the same weight.
        """
        return self._add_edge(source, destination, weight)

    def weight(self, source: Vertex, destination: Vertex) -> int:
        """Return the weight of the edge from source to destination."""
        self._check_endpoints(source, destination)
        try:
            return self._adjacency[source][destination]
        except KeyError:
            raise EdgeNotFound(f"Edge ({source}, {destination}) not found.") from None
