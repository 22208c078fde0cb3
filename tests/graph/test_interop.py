"""Tests for string rendering, summaries and NetworkX interop."""

import networkx as nx
import pytest

from idgraph import UNSET, AutoEdgeId, DuplicateEdgeError, Graph, GraphConfig


def test_str_lists_nodes_and_edges() -> None:
    graph = Graph(graph_id="demo")
    graph.add_node("a", 1)
    graph.add_node("b")
    graph.add_edge(None, "a", "b")

    text = str(graph)

    assert "'demo'" in text
    assert "'a' = 1" in text
    assert "'a' -> 'b'" in text


def test_str_truncates_long_listings() -> None:
    graph = Graph(config=GraphConfig(repr_max_items=2))
    for node_id in range(5):
        graph.add_node(node_id)

    assert "... (3 more)" in str(graph)


def test_repr_is_single_line() -> None:
    graph = Graph(graph_id="demo")
    graph.add_node(1)

    assert repr(graph) == "<Graph id='demo' order=1 size=0>"


def test_summary_counts() -> None:
    graph = Graph()
    graph.add_node(1)
    graph.add_node(2)
    graph.add_edge("e", 1, 2)

    assert graph.summary() == {
        "graph_id": "default",
        "order": 2,
        "size": 1,
        "sources": 1,
        "sinks": 1,
    }


def test_to_networkx_is_detached_copy() -> None:
    graph = Graph()
    graph.add_node(1, "one")
    graph.add_node(2)
    graph.add_edge("e", 1, 2, 0.5)
    graph.add_edge("f", 1, 2)

    nx_graph = graph.to_networkx()
    nx_graph.remove_node(1)

    assert graph.order() == 2
    assert graph.size() == 2

    fresh = graph.to_networkx()
    assert fresh.nodes[1] == {"value": "one"}
    assert fresh.nodes[2] == {}
    assert fresh.get_edge_data(1, 2, "e") == {"value": 0.5}
    assert fresh.get_edge_data(1, 2, "f") == {}


def test_networkx_round_trip_preserves_graph() -> None:
    graph = Graph(graph_id="rt")
    graph.add_node("a", [1])
    graph.add_node("b")
    graph.add_edge("ab", "a", "b", {"w": 2})
    graph.add_edge(None, "b", "b")
    graph.graph_value = "meta"

    restored = Graph.from_networkx(graph.to_networkx())

    assert restored == graph
    assert restored.graph_id == "rt"
    assert restored.graph_value == "meta"


def test_from_simple_digraph_generates_ids() -> None:
    nx_graph = nx.DiGraph()
    nx_graph.add_node("x", value=1)
    nx_graph.add_edge("x", "y")

    graph = Graph.from_networkx(nx_graph)

    assert graph.node("x") == 1
    assert graph.node("y") is UNSET
    (edge_id,) = graph.edges()
    assert isinstance(edge_id, AutoEdgeId)
    assert graph.incident_nodes(edge_id) == ("x", "y")


def test_from_multigraph_with_colliding_keys() -> None:
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_edge("a", "b")
    nx_graph.add_edge("b", "c")

    with pytest.raises(DuplicateEdgeError):
        Graph.from_networkx(nx_graph)

    graph = Graph.from_networkx(nx_graph, keys_as_ids=False)
    assert graph.size() == 2


def test_iteration_yields_values_and_endpoints() -> None:
    graph = Graph()
    graph.add_node("a", 1)
    graph.add_node("b")
    graph.add_edge("ab", "a", "b", "w")

    assert list(graph.iter_nodes()) == [("a", 1), ("b", UNSET)]
    assert list(graph.iter_edges()) == [("ab", "a", "b", "w")]


def test_iteration_survives_mutation() -> None:
    graph = Graph()
    for node_id in range(3):
        graph.add_node(node_id)

    for node_id, _ in graph.iter_nodes():
        graph.del_node(node_id)

    assert graph.order() == 0
