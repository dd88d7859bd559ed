import pytest

from campuspaths.domain.errors import NodeNotFoundError
from campuspaths.graph.store import Edge, Graph


def make_graph() -> Graph[str, float]:
    graph: Graph[str, float] = Graph()
    for node in ("A", "B", "C"):
        graph.add_node(node)
    graph.add_edge("A", "B", 1.0)
    graph.add_edge("A", "B", 2.0)
    graph.add_edge("B", "C", 3.0)
    return graph


def test_new_graph_is_empty():
    graph: Graph[str, float] = Graph()

    assert graph.is_empty()
    assert graph.size() == 0
    assert len(graph) == 0
    assert graph.nodes() == frozenset()


def test_add_node_is_idempotent():
    graph: Graph[str, float] = Graph()
    graph.add_node("A")
    graph.add_node("A")

    assert graph.size() == 1
    assert not graph.is_empty()
    assert graph.contains_node("A")
    assert "A" in graph
    assert not graph.contains_node("B")


def test_add_edge_is_idempotent():
    graph = make_graph()
    before = graph.children_of("A")

    graph.add_edge("A", "B", 1.0)

    assert graph.children_of("A") == before
    assert graph.size() == 3


def test_parallel_edges_with_distinct_labels():
    graph = make_graph()

    assert graph.children_of("A") == frozenset({Edge("B", 1.0), Edge("B", 2.0)})
    assert graph.contains_edge("A", "B", 1.0)
    assert graph.contains_edge("A", "B", 2.0)
    assert not graph.contains_edge("A", "B", 5.0)
    assert not graph.contains_edge("B", "A", 1.0)


def test_self_loop_is_allowed():
    graph = make_graph()
    graph.add_edge("C", "C", 0.5)

    assert graph.children_of("C") == frozenset({Edge("C", 0.5)})


def test_children_of_node_without_edges_is_empty():
    graph = make_graph()

    assert graph.children_of("C") == frozenset()


@pytest.mark.parametrize("parent, child", [("X", "A"), ("A", "X"), ("X", "Y")])
def test_add_edge_requires_both_nodes(parent, child):
    graph = make_graph()

    with pytest.raises(NodeNotFoundError):
        graph.add_edge(parent, child, 1.0)

    assert graph.size() == 3


@pytest.mark.parametrize("parent, child", [("X", "A"), ("A", "X")])
def test_contains_edge_requires_both_nodes(parent, child):
    graph = make_graph()

    with pytest.raises(NodeNotFoundError) as excinfo:
        graph.contains_edge(parent, child, 1.0)

    assert excinfo.value.node == "X"


def test_children_of_unknown_node_raises():
    graph = make_graph()

    with pytest.raises(NodeNotFoundError, match="'Z'"):
        graph.children_of("Z")


def test_children_of_returns_a_snapshot():
    graph = make_graph()
    children = graph.children_of("B")

    graph.add_edge("B", "A", 4.0)

    assert children == frozenset({Edge("C", 3.0)})
    assert len(graph.children_of("B")) == 2


def test_edges_lists_every_parent_and_edge():
    graph = make_graph()

    assert set(graph.edges()) == {
        ("A", Edge("B", 1.0)),
        ("A", Edge("B", 2.0)),
        ("B", Edge("C", 3.0)),
    }


def test_iteration_and_nodes():
    graph = make_graph()

    assert set(graph) == {"A", "B", "C"}
    assert graph.nodes() == frozenset({"A", "B", "C"})
    assert repr(graph) == "Graph(nodes=3, edges=3)"


def test_generic_node_and_label_types():
    graph: Graph[int, str] = Graph()
    graph.add_node(1)
    graph.add_node(2)
    graph.add_edge(1, 2, "one-two")

    assert graph.contains_edge(1, 2, "one-two")
    assert [edge.label for edge in graph.children_of(1)] == ["one-two"]
