"""Text format for saved graphs.

A graph file looks like this:

    WEIGHTED, UNDIRECTED
    Paris: [Lyon(4), Nice(9)]
    Lyon: [Paris(4)]
    Nice: [Paris(9)]
    Brest: []

The first line declares the weighting and the graph type. Each following line
lists one vertex and its outgoing edges. Unweighted files omit the
parenthesized weights.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional, TextIO, Tuple, Union

from graphedit.errors import FileUnavailable, InvalidFile, InvalidInput
from graphedit.model import Adjacency, GraphType, Neighbors, Vertex

WEIGHTED = "WEIGHTED"
UNWEIGHTED = "UNWEIGHTED"
SEPARATOR = ", "
SUFFIX = ".txt"
ENCODING = "utf-8"

# Base-10 integer, as written by dump.
WEIGHT_RE = re.compile(r"[+-]?[0-9]+")

PathLike = Union[str, Path]


def check_path(path: PathLike) -> Path:
    """Return path as a Path, raising InvalidInput unless it ends in .txt."""
    path = Path(path)
    if path.suffix != SUFFIX:
        raise InvalidInput(f'File name "{path}" must end in "{SUFFIX}".')
    return path


@contextmanager
def open_graph_file(path: PathLike, mode: str = "r") -> Iterator[TextIO]:
    """Open a graph file.

    Open failures become FileUnavailable and undecodable contents InvalidFile.
    """
    path = check_path(path)
    try:
        f = open(path, mode, encoding=ENCODING)
    except FileNotFoundError as ex:
        raise FileUnavailable(f'File "{path}" does not exist.') from ex
    except OSError as ex:
        raise FileUnavailable(f'Cannot open file "{path}": {ex.strerror}.') from ex
    with f:
        try:
            yield f
        except UnicodeDecodeError as ex:
            raise InvalidFile(f'File "{path}" is not valid {ENCODING}.') from ex


def format_header(weighted: bool, graph_type: GraphType) -> str:
    weighting = WEIGHTED if weighted else UNWEIGHTED
    return f"{weighting}{SEPARATOR}{graph_type.name}"


def parse_header(line: str) -> Tuple[bool, GraphType]:
    """Parse the first line of a graph file into (weighted, graph type)."""
    parts = line.strip().split(SEPARATOR)
    if len(parts) != 2 or parts[0] not in (WEIGHTED, UNWEIGHTED):
        raise InvalidFile(f"Invalid graph header {line.strip()!r}.")
    try:
        graph_type = GraphType.parse(parts[1])
    except KeyError:
        raise InvalidFile(f"Invalid graph type {parts[1]!r}.") from None
    return parts[0] == WEIGHTED, graph_type


def format_entry(neighbor: Vertex, payload: Optional[int], weighted: bool) -> str:
    if weighted:
        return f"{neighbor}({payload})"
    return str(neighbor)


def dump(
    adjacency: Mapping[Vertex, Mapping[Vertex, Optional[int]]],
    graph_type: GraphType,
    weighted: bool,
    out: TextIO,
):
    """Write a graph to out."""
    print(format_header(weighted, graph_type), file=out)
    for vertex, neighbors in adjacency.items():
        entries = SEPARATOR.join(
            format_entry(n, p, weighted) for n, p in neighbors.items()
        )
        print(f"{vertex}: [{entries}]", file=out)


def parse_entry(entry: str, weighted: bool) -> Tuple[Vertex, Optional[int]]:
    """Parse one neighbor entry such as "Lyon" or "Lyon(4)"."""
    if not weighted:
        return Vertex(entry), None
    start = entry.rfind("(")
    end = entry.rfind(")")
    if start == -1 or end < start:
        raise InvalidFile(f"Missing weight in {entry!r}.")
    token = entry[start + 1 : end]
    if not WEIGHT_RE.fullmatch(token):
        raise InvalidFile(f"Invalid weight {token!r} in {entry!r}.")
    return Vertex(entry[:start]), int(token)


def parse_line(line: str, weighted: bool) -> Tuple[Vertex, Neighbors]:
    """Parse a vertex line into the vertex and its (neighbor, payload) map."""
    name, colon, rest = line.partition(":")
    rest = rest.strip()
    if not colon or not rest.startswith("[") or not rest.endswith("]"):
        raise InvalidFile(f"Invalid vertex line {line.strip()!r}.")
    body = rest[1:-1]
    neighbors: Neighbors = {}
    if body:
        for entry in body.split(SEPARATOR):
            neighbor, payload = parse_entry(entry, weighted)
            neighbors[neighbor] = payload
    return Vertex(name), neighbors


def parse(
    lines: Iterable[str], expect_weighted: Optional[bool] = None
) -> Tuple[bool, GraphType, Adjacency]:
    """Parse the lines of a graph file.

    If expect_weighted is given, raises InvalidFile when the header declares
    the other weighting. Vertices that only appear as neighbors are added with
    no outgoing edges of their own. Undirected edges are mirrored.
    """
    it = iter(lines)
    header = next(it, None)
    if header is None or not header.strip():
        raise InvalidFile("Graph file is empty.")
    weighted, graph_type = parse_header(header)
    if expect_weighted is not None and weighted != expect_weighted:
        actual = "weighted" if weighted else "unweighted"
        expected = "weighted" if expect_weighted else "unweighted"
        raise InvalidFile(f"Graph type is {actual}, but expected {expected}.")
    adjacency: Adjacency = {}
    for line in it:
        if not line.strip():
            continue
        source, neighbors = parse_line(line.rstrip("\n"), weighted)
        adjacency.setdefault(source, {})
        for destination, payload in neighbors.items():
            adjacency.setdefault(destination, {})
            adjacency[source][destination] = payload
            if graph_type is GraphType.UNDIRECTED:
                adjacency[destination][source] = payload
    logging.debug(
        "parsed %s graph with %d vertices",
        format_header(weighted, graph_type),
        len(adjacency),
    )
    return weighted, graph_type, adjacency


def read(
    path: PathLike, expect_weighted: Optional[bool] = None
) -> Tuple[bool, GraphType, Adjacency]:
    """Read a graph file. See parse."""
    logging.info("reading graph from %s", path)
    with open_graph_file(path) as f:
        return parse(f, expect_weighted)


def peek(path: PathLike) -> Tuple[bool, GraphType]:
    """Read only the header of a graph file."""
    with open_graph_file(path) as f:
        header = f.readline()
    if not header.strip():
        raise InvalidFile("Graph file is empty.")
    return parse_header(header)


def write(
    path: PathLike,
    adjacency: Mapping[Vertex, Mapping[Vertex, Optional[int]]],
    graph_type: GraphType,
    weighted: bool,
):
    """Write a graph file, replacing any existing contents."""
    logging.info("writing graph to %s", path)
    with open_graph_file(path, "w") as f:
        dump(adjacency, graph_type, weighted, f)
