"""Interactive menu for editing a graph."""

import logging
import sys
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from graphedit.errors import GraphError
from graphedit.model import GraphType
from graphedit.report import Reporter
from graphedit.serial import SUFFIX
from graphedit.session import Session, Variant

INVALID = "Invalid input, try again."

# Menu entries for picking one of the four kinds of graph.
KINDS: List[Tuple[str, Variant, GraphType]] = [
    ("Weighted, directed.", Variant.WEIGHTED, GraphType.DIRECTED),
    ("Weighted, undirected.", Variant.WEIGHTED, GraphType.UNDIRECTED),
    ("Unweighted, directed.", Variant.UNWEIGHTED, GraphType.DIRECTED),
    ("Unweighted, undirected.", Variant.UNWEIGHTED, GraphType.UNDIRECTED),
]


class Shell:

    """Read-eval-print loop over a Session.

    The shell only deals with text: it prompts for names, file names, and
    numbers, passes them to the session, and prints the results. Errors from
    the session are printed and the user is asked again. The loop ends when
    the user exits from the main menu or input runs out.
    """

    def __init__(
        self,
        session: Session,
        reporter: Optional[Reporter] = None,
        stdin: TextIO = sys.stdin,
        stdout: TextIO = sys.stdout,
        min_weight: int = 1,
        max_weight: int = 10,
    ):
        self.session = session
        self.reporter = reporter or Reporter()
        self.stdin = stdin
        self.stdout = stdout
        self.min_weight = min_weight
        self.max_weight = max_weight

    def write(self, text: str = "", end: str = "\n"):
        print(text, end=end, file=self.stdout)

    def read(self, prompt: str) -> str:
        """Prompt for a line of input. Raises EOFError when input runs out."""
        self.write(prompt, end="")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def read_int(self, prompt: str, default: Optional[int] = None) -> int:
        """Prompt until the user enters an integer (or nothing, if default)."""
        while True:
            text = self.read(prompt).strip()
            if not text and default is not None:
                return default
            try:
                return int(text)
            except ValueError:
                self.write(INVALID)

    def read_path(self, prompt: str = f"Please enter file name (*{SUFFIX}): ") -> str:
        while True:
            path = self.read(prompt)
            if path.endswith(SUFFIX):
                return path
            self.write(INVALID)

    def choose(self, options: Sequence[str]) -> int:
        """Show a numbered menu and return the 0-based index picked."""
        for i, option in enumerate(options, 1):
            self.write(f"{i}. {option}")
        while True:
            choice = self.read(">>> ").strip()
            if choice.isdigit() and 1 <= int(choice) <= len(options):
                return int(choice) - 1
            self.write(INVALID)

    def choose_kind(self) -> Tuple[Variant, GraphType]:
        self.write("Please select the graph type:")
        _, variant, graph_type = KINDS[self.choose([k[0] for k in KINDS])]
        return variant, graph_type

    def attempt(self, action: Callable[[], object], success: str) -> bool:
        """Run action, printing success or the error it raised."""
        try:
            action()
        except GraphError as ex:
            logging.debug("%s: %s", type(ex).__name__, ex)
            self.write(str(ex))
            return False
        self.write(success)
        return True

    def run(self):
        try:
            self.main_menu()
        except EOFError:
            self.write()
            logging.info("end of input")

    def main_menu(self):
        options = [
            "Create graph.",
            "Load graph from file.",
            "Create random graph.",
            "Exit.",
        ]
        while True:
            choice = self.choose(options)
            if choice == 0:
                ok = self.create()
            elif choice == 1:
                ok = self.load()
            elif choice == 2:
                ok = self.generate()
            else:
                return
            if ok:
                self.edit_menu()

    def create(self) -> bool:
        variant, graph_type = self.choose_kind()
        return self.attempt(
            lambda: self.session.create(variant, graph_type),
            "Graph has been successfully created.",
        )

    def load(self) -> bool:
        path = self.read_path()
        return self.attempt(
            lambda: self.session.load(path), f'Graph loaded from "{path}".'
        )

    def generate(self) -> bool:
        count = self.read_int("Set vertices count: ")
        variant, graph_type = self.choose_kind()
        min_weight = max_weight = None
        if variant is Variant.WEIGHTED:
            min_weight = self.read_int(
                f"Enter minimum weight [{self.min_weight}]: ", self.min_weight
            )
            max_weight = self.read_int(
                f"Enter maximum weight [{self.max_weight}]: ", self.max_weight
            )
        return self.attempt(
            lambda: self.session.generate(
                count, variant, graph_type, min_weight, max_weight
            ),
            "Graph has been successfully created.",
        )

    def edit_menu(self):
        options = [
            "Add vertex.",
            "Remove vertex.",
            "Add edge.",
            "Remove edge.",
            "Print to file.",
            "List vertex degrees.",
            "List hinge vertices.",
            "Back.",
        ]
        actions = [
            self.add_vertex,
            self.remove_vertex,
            self.add_edge,
            self.remove_edge,
            self.save,
            self.show_degrees,
            self.show_hinges,
        ]
        while True:
            choice = self.choose(options)
            if choice == len(actions):
                return
            actions[choice]()

    def add_vertex(self):
        name = self.read("Enter vertex name: ")
        self.attempt(
            lambda: self.session.add_vertex(name), "Vertex successfully added!"
        )

    def remove_vertex(self):
        name = self.read("Enter vertex name: ")
        self.attempt(
            lambda: self.session.remove_vertex(name), "Vertex successfully removed!"
        )

    def add_edge(self):
        source = self.read("Enter source vertex name: ")
        destination = self.read("Enter destination vertex name: ")
        weight = None
        if self.session.variant is Variant.WEIGHTED:
            weight = self.read_int("Enter weight: ")
        self.attempt(
            lambda: self.session.add_edge(source, destination, weight),
            "Edge successfully added!",
        )

    def remove_edge(self):
        source = self.read("Enter source vertex name: ")
        destination = self.read("Enter destination vertex name: ")
        self.attempt(
            lambda: self.session.remove_edge(source, destination),
            "Edge successfully removed!",
        )

    def save(self):
        path = self.read_path()
        self.attempt(
            lambda: self.session.save(path), f'Graph successfully saved in "{path}".'
        )

    def show_degrees(self):
        self.write(self.reporter.degrees(self.session.graph), end="")

    def show_hinges(self):
        self.write(self.reporter.hinges(self.session.graph), end="")
