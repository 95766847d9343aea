"""Text reports about graphs."""

from typing import Dict, List, Tuple

from jinja2 import Environment, PackageLoader

from graphedit.graph import Graph
from graphedit.model import Vertex


def sorted_degrees(degrees: Dict[Vertex, int]) -> List[Tuple[Vertex, int]]:
    """Sort degrees from highest to lowest, keeping graph order for ties."""
    return sorted(degrees.items(), key=lambda item: item[1], reverse=True)


class Reporter:

    """Renders graphs and analysis results using the packaged templates."""

    def __init__(self):
        self.env = Environment(
            loader=PackageLoader("graphedit", "templates"),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.summary_template = self.env.get_template("summary.txt.jinja")
        self.degrees_template = self.env.get_template("degrees.txt.jinja")
        self.hinges_template = self.env.get_template("hinges.txt.jinja")

    def summary(self, graph: Graph) -> str:
        edges = sum(len(graph.neighbors(v)) for v in graph)
        return self.summary_template.render(
            kind=graph.__class__.__name__,
            type=graph.type.name,
            vertices=len(graph),
            edges=edges,
        )

    def degrees(self, graph: Graph) -> str:
        return self.degrees_template.render(
            degrees=sorted_degrees(graph.get_degrees())
        )

    def hinges(self, graph: Graph) -> str:
        return self.hinges_template.render(hinges=graph.get_hinge_vertices())
