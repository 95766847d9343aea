"""Random complete graphs over sampled vertex names."""

import logging
import random
from importlib import resources
from pathlib import Path
from typing import List, Optional, Union

from graphedit import templates
from graphedit.errors import FileUnavailable, InvalidFile, InvalidInput
from graphedit.graph import UnweightedGraph, WeightedGraph
from graphedit.model import Adjacency, GraphType, Vertex
from graphedit.serial import ENCODING

DEFAULT_NAMES = "cities.txt"


def read_names(path: Optional[Union[str, Path]] = None) -> List[str]:
    """Read a name list, skipping its header line.

    Uses the packaged city list if path is None.
    """
    try:
        if path is None:
            resource = resources.files(templates).joinpath(DEFAULT_NAMES)
            text = resource.read_text(encoding=ENCODING)
        else:
            with open(path, encoding=ENCODING) as f:
                text = f.read()
    except FileNotFoundError as ex:
        raise FileUnavailable(f'File "{path}" does not exist.') from ex
    except OSError as ex:
        raise FileUnavailable(f'Cannot open file "{path}": {ex.strerror}.') from ex
    except UnicodeDecodeError as ex:
        raise InvalidFile(f'File "{path}" is not valid {ENCODING}.') from ex
    names = [line.strip() for line in text.splitlines()[1:]]
    names = [name for name in names if name]
    if not names:
        raise InvalidFile(f"No names found in {path or DEFAULT_NAMES}.")
    return names


def sample_vertices(
    count: int, names: List[str], rng: random.Random
) -> List[Vertex]:
    """Draw count vertices uniformly from names, with replacement.

    Duplicate draws are kept, so the list may hold equal vertices.
    """
    if count < 0:
        raise InvalidInput(f"Vertex count must not be negative, got {count}.")
    return [Vertex(rng.choice(names)) for _ in range(count)]


def generate_unweighted(
    count: int,
    type: GraphType,
    names: Optional[Union[str, Path]] = None,
    rng: Optional[random.Random] = None,
) -> UnweightedGraph:
    """Generate a complete unweighted graph, self-loops included.

    The graph has at most count vertices: repeated names collapse into one.
    """
    rng = rng or random.Random()
    vertices = sample_vertices(count, read_names(names), rng)
    adjacency: Adjacency[None] = {v: {} for v in vertices}
    for source in adjacency:
        for destination in adjacency:
            adjacency[source][destination] = None
    logging.info("generated unweighted graph with %d vertices", len(adjacency))
    return UnweightedGraph(type, adjacency)


def generate_weighted(
    count: int,
    min_weight: int,
    max_weight: int,
    type: GraphType,
    names: Optional[Union[str, Path]] = None,
    rng: Optional[random.Random] = None,
) -> WeightedGraph:
    """Generate a complete weighted graph, self-loops included.

    Weights are drawn uniformly from [min_weight, max_weight]. Undirected
    graphs draw one weight per pair of vertices; directed graphs draw one per
    direction.
    """
    if min_weight > max_weight:
        raise InvalidInput(
            f"Minimum weight {min_weight} is greater than maximum weight {max_weight}."
        )
    rng = rng or random.Random()
    vertices = sample_vertices(count, read_names(names), rng)
    adjacency: Adjacency[int] = {v: {} for v in vertices}
    for source in adjacency:
        for destination in adjacency:
            if type is GraphType.UNDIRECTED and source in adjacency[destination]:
                adjacency[source][destination] = adjacency[destination][source]
            else:
                adjacency[source][destination] = rng.randint(min_weight, max_weight)
    logging.info("generated weighted graph with %d vertices", len(adjacency))
    return WeightedGraph(type, adjacency)
