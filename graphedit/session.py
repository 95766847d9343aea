"""The graph currently being edited."""

from __future__ import annotations

import enum
import logging
import random
from pathlib import Path
from typing import Dict, List, Optional, Type, Union, cast

from graphedit import generate, serial
from graphedit.errors import InvalidInput, NoGraph
from graphedit.graph import UnweightedGraph, WeightedGraph
from graphedit.model import GraphType, Vertex

AnyGraph = Union[UnweightedGraph, WeightedGraph]


class Variant(enum.Enum):
    """Which kind of payload a graph's edges carry."""

    UNWEIGHTED = "unweighted"
    WEIGHTED = "weighted"

    @property
    def graph_class(self) -> Type[AnyGraph]:
        return WeightedGraph if self is Variant.WEIGHTED else UnweightedGraph

    @staticmethod
    def of(graph: AnyGraph) -> Variant:
        return Variant.WEIGHTED if graph.weighted else Variant.UNWEIGHTED


def load_graph(path: serial.PathLike) -> AnyGraph:
    """Load a graph file as whichever variant its header declares."""
    weighted, _ = serial.peek(path)
    variant = Variant.WEIGHTED if weighted else Variant.UNWEIGHTED
    return variant.graph_class.read_from_file(path)


class Session:

    """Holds exactly one current graph and replaces it on every edit.

    Vertex names arrive as plain strings. Every method either replaces the
    current graph or leaves it untouched and raises a GraphError.
    """

    def __init__(self, names: Optional[Union[str, Path]] = None):
        self.names = names
        self._graph: Optional[AnyGraph] = None

    def __repr__(self) -> str:
        return f"Session(graph={self._graph!r})"

    @property
    def has_graph(self) -> bool:
        return self._graph is not None

    @property
    def graph(self) -> AnyGraph:
        if self._graph is None:
            raise NoGraph("No graph has been created or loaded.")
        return self._graph

    @property
    def variant(self) -> Variant:
        return Variant.of(self.graph)

    def _replace(self, graph: AnyGraph) -> AnyGraph:
        logging.debug("current graph is now %r", graph)
        self._graph = graph
        return graph

    def create(self, variant: Variant, graph_type: GraphType) -> AnyGraph:
        """Start a new empty graph."""
        return self._replace(variant.graph_class(graph_type))

    def load(self, path: serial.PathLike) -> AnyGraph:
        return self._replace(load_graph(path))

    def save(self, path: serial.PathLike):
        self.graph.print_to_file(path)

    def generate(
        self,
        count: int,
        variant: Variant,
        graph_type: GraphType,
        min_weight: Optional[int] = None,
        max_weight: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> AnyGraph:
        """Replace the current graph with a random complete graph."""
        if variant is Variant.UNWEIGHTED:
            graph: AnyGraph = generate.generate_unweighted(
                count, graph_type, self.names, rng
            )
        else:
            if min_weight is None or max_weight is None:
                raise InvalidInput("Weighted graphs need a minimum and maximum weight.")
            graph = generate.generate_weighted(
                count, min_weight, max_weight, graph_type, self.names, rng
            )
        return self._replace(graph)

    def add_vertex(self, name: str) -> AnyGraph:
        return self._replace(self.graph.add_vertex(Vertex(name)))

    def remove_vertex(self, name: str) -> AnyGraph:
        return self._replace(self.graph.remove_vertex(Vertex(name)))

    def add_edge(
        self, source: str, destination: str, weight: Optional[int] = None
    ) -> AnyGraph:
        """Add an edge, with a weight if and only if the graph is weighted."""
        edge = (Vertex(source), Vertex(destination))
        if self.variant is Variant.WEIGHTED:
            if weight is None:
                raise InvalidInput("Weighted edges need a weight.")
            weighted = cast(WeightedGraph, self.graph)
            return self._replace(weighted.add_edge(*edge, weight))
        if weight is not None:
            raise InvalidInput("Unweighted edges cannot have a weight.")
        unweighted = cast(UnweightedGraph, self.graph)
        return self._replace(unweighted.add_edge(*edge))

    def remove_edge(self, source: str, destination: str) -> AnyGraph:
        return self._replace(
            self.graph.remove_edge(Vertex(source), Vertex(destination))
        )

    def degrees(self) -> Dict[Vertex, int]:
        return self.graph.get_degrees()

    def hinge_vertices(self) -> List[Vertex]:
        return self.graph.get_hinge_vertices()
