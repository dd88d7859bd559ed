import io
import textwrap

from campuspaths.io import PathfinderScriptDriver


def run_script(script: str) -> list[str]:
    output = io.StringIO()
    driver = PathfinderScriptDriver(io.StringIO(textwrap.dedent(script)), output)
    driver.run()
    return output.getvalue().splitlines()


def test_build_and_list_graph():
    lines = run_script(
        """\
        # simple graph
        CreateGraph g
        AddNode g b
        AddNode g a
        AddEdge g a b 2
        AddEdge g a a 1.5

        ListNodes g
        ListChildren g a
        ListChildren g b
        """
    )

    assert lines == [
        "# simple graph",
        "created graph g",
        "added node b to g",
        "added node a to g",
        "added edge 2.000 from a to b in g",
        "added edge 1.500 from a to a in g",
        "",
        "g contains: a b",
        "the children of a in g are: a(1.500) b(2.000)",
        "the children of b in g are:",
    ]


def test_find_path():
    lines = run_script(
        """\
        CreateGraph g
        AddNode g A
        AddNode g B
        AddNode g C
        AddEdge g A B 1
        AddEdge g B C 2
        AddEdge g A C 5
        FindPath g A C
        """
    )

    assert lines[-4:] == [
        "path from A to C:",
        "A to B with weight 1.000",
        "B to C with weight 2.000",
        "total cost: 3.000",
    ]


def test_find_path_to_self_and_no_path():
    lines = run_script(
        """\
        CreateGraph g
        AddNode g A
        AddNode g Z
        FindPath g A A
        FindPath g A Z
        """
    )

    assert lines[-4:] == [
        "path from A to A:",
        "total cost: 0.000",
        "path from A to Z:",
        "no path found",
    ]


def test_zero_cost_path_is_printed():
    lines = run_script(
        """\
        CreateGraph g
        AddNode g A
        AddNode g B
        AddEdge g A B 0
        FindPath g A B
        """
    )

    assert lines[-3:] == [
        "path from A to B:",
        "A to B with weight 0.000",
        "total cost: 0.000",
    ]


def test_find_path_reports_each_unknown_node():
    lines = run_script(
        """\
        CreateGraph g
        AddNode g A
        FindPath g X Y
        FindPath g A Y
        """
    )

    assert lines[-3:] == ["unknown: X", "unknown: Y", "unknown: Y"]


def test_find_path_reports_repeated_unknown_node_once():
    lines = run_script(
        """\
        CreateGraph g
        FindPath g Q Q
        """
    )

    assert lines == ["created graph g", "unknown: Q"]


def test_errors_are_reported_and_script_continues():
    lines = run_script(
        """\
        CreateGraph g
        AddNode g
        AddEdge g A B 1
        ListNodes missing
        Frobnicate g
        AddNode g A
        """
    )

    assert lines[1].startswith("Exception while running command: AddNode g: Bad arguments to AddNode")
    assert lines[2].startswith("Exception while running command: AddEdge g A B 1: Node not in graph")
    assert lines[3] == "Exception while running command: ListNodes missing: No graph named missing"
    assert lines[4] == "Unrecognized command: Frobnicate"
    assert lines[5] == "added node A to g"
