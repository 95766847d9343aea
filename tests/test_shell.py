import io

from graphedit import serial
from graphedit.model import GraphType, Vertex
from graphedit.session import Session, Variant
from graphedit.shell import INVALID, Shell


def run(lines, session=None):
    session = session or Session()
    stdout = io.StringIO()
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    shell = Shell(session, stdin=stdin, stdout=stdout)
    shell.run()
    return session, stdout.getvalue()


def test_exit_immediately():
    session, out = run(["4"])
    assert not session.has_graph
    assert "1. Create graph." in out


def test_end_of_input_exits():
    session, out = run([])
    assert not session.has_graph


def test_invalid_choice_reprompts():
    _, out = run(["9", "x", "4"])
    assert out.count(INVALID) == 2


def test_build_graph_and_list_degrees():
    session, out = run(
        [
            "1",  # create
            "4",  # unweighted, undirected
            "1", "A",
            "1", "B",
            "1", "C",
            "3", "A", "B",
            "3", "B", "C",
            "6",  # degrees
            "8",  # back
            "4",  # exit
        ]
    )
    assert session.variant is Variant.UNWEIGHTED
    assert session.graph.type is GraphType.UNDIRECTED
    assert "Vertices degrees:\nB: 2.\nA: 1.\nC: 1.\n" in out
    assert out.count("Edge successfully added!") == 2


def test_errors_are_printed_and_session_continues():
    session, out = run(
        [
            "1", "1",  # weighted, directed
            "1", "",  # empty name
            "1", "A",
            "1", "A",  # duplicate
            "3", "A", "A", "five", "5",
            "4", "A", "A",  # identical endpoints
            "7",
            "8", "4",
        ]
    )
    assert "Vertex must have a name." in out
    assert 'Cannot add vertex "A", already exists in graph.' in out
    assert INVALID in out
    assert "are identical" in out
    assert "Vertices with hinges: [A]" in out
    assert session.graph.get_hinge_vertices() == [Vertex("A")]


def test_save_and_load(tmp_path):
    path = tmp_path / "g.txt"
    run(["1", "2", "1", "X", "5", "not-a-text-file", str(path), "8", "4"])
    assert path.read_text() == "WEIGHTED, UNDIRECTED\nX: []\n"

    session, out = run(["2", str(path), "8", "4"])
    assert session.variant is Variant.WEIGHTED
    assert list(session.graph) == [Vertex("X")]


def test_load_missing_file(tmp_path):
    session, out = run(["2", str(tmp_path / "missing.txt"), "4"])
    assert "does not exist" in out
    assert not session.has_graph


def test_random_graph(names_file):
    session, out = run(["3", "4", "2", "", "3", "8", "4"], Session(names_file))
    assert "Graph has been successfully created." in out
    for neighbors in session.graph.adjacency.values():
        assert set(neighbors.values()) <= {1, 2, 3}


# Create an unweighted undirected graph holding A, then go back to the main menu.
WITH_A = ["1", "4", "1", "A", "8"]


def assert_still_holds_a(session):
    assert session.variant is Variant.UNWEIGHTED
    assert session.graph.adjacency == {Vertex("A"): {}}


def test_load_malformed_header_keeps_graph(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("WEIGHTED; DIRECTED\nA: []\n")
    session, out = run(WITH_A + ["2", str(path), "4"])
    assert "Invalid graph header" in out
    assert_still_holds_a(session)


def test_load_undecodable_file_keeps_graph(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\n")
    session, out = run(WITH_A + ["2", str(path), "4"])
    assert "is not valid utf-8" in out
    assert_still_holds_a(session)


def test_load_unreadable_file_keeps_graph(tmp_path, monkeypatch):
    path = tmp_path / "locked.txt"
    path.write_text("UNWEIGHTED, DIRECTED\nB: []\n")

    def deny(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(serial, "open", deny, raising=False)
    session, out = run(WITH_A + ["2", str(path), "4"])
    assert f'Cannot open file "{path}": Permission denied.' in out
    assert_still_holds_a(session)


def test_save_to_directory_keeps_editing(tmp_path):
    path = tmp_path / "dir.txt"
    path.mkdir()
    session, out = run(["1", "4", "1", "A", "5", str(path), "1", "B", "8", "4"])
    assert "Cannot open file" in out
    assert "Graph successfully saved" not in out
    assert session.graph.vertices() == [Vertex("A"), Vertex("B")]


def test_random_with_undecodable_names_keeps_graph(tmp_path):
    names = tmp_path / "names.txt"
    names.write_bytes(b"name\n\xff\n")
    session, out = run(WITH_A + ["3", "2", "4", "4"], Session(names))
    assert "is not valid utf-8" in out
    assert_still_holds_a(session)
