"""Vertices and graph types."""

from __future__ import annotations

import enum
from typing import Dict, Mapping, TypeVar

P = TypeVar("P")


class Vertex:

    """A named vertex.

    Vertices are identified by name alone (exact, case-sensitive), so any
    number of equal Vertex objects can exist at once.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Vertex({self._name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)


class GraphType(enum.Enum):
    """Whether edges have a direction."""

    DIRECTED = enum.auto()
    UNDIRECTED = enum.auto()

    @staticmethod
    def parse(s: str) -> GraphType:
        return GraphType[s]


# Outgoing edges of one vertex, keyed by neighbor.
Neighbors = Dict[Vertex, P]

# The whole graph: every vertex mapped to its outgoing edges.
Adjacency = Dict[Vertex, Dict[Vertex, P]]


def copy_adjacency(
    adjacency: Mapping[Vertex, Mapping[Vertex, P]]
) -> Adjacency[P]:
    """Copy both levels of an adjacency mapping."""
    return {vertex: dict(neighbors) for vertex, neighbors in adjacency.items()}
