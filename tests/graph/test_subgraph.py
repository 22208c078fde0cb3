"""Tests for subgraph extraction, copying and filtering."""

from idgraph import UNSET, AutoEdgeId, Graph, GraphConfig


def _chain() -> Graph:
    graph = Graph()
    for node_id in (1, 2, 3):
        graph.add_node(node_id, f"V{node_id}")
    graph.add_edge("a", 1, 2, "VA")
    graph.add_edge("b", 2, 3)
    return graph


def test_subgraph_keeps_requested_nodes_and_inner_edges() -> None:
    sub = _chain().subgraph([1, 2])

    assert sorted(sub.nodes()) == [1, 2]
    assert sub.edges() == ["a"]


def test_subgraph_preserves_values() -> None:
    sub = _chain().subgraph([1, 2])

    assert sub.node(1) == "V1"
    assert sub.node(2) == "V2"
    assert sub.edge("a") == "VA"


def test_subgraph_shares_value_objects() -> None:
    value = {"shared": True}
    graph = Graph()
    graph.add_node("n", value)

    sub = graph.subgraph(["n"])
    assert sub.node("n") is value


def test_subgraph_preserves_unset_values() -> None:
    graph = Graph()
    graph.add_node(1)
    graph.add_node(2)
    graph.add_edge("e", 1, 2)

    sub = graph.subgraph([1, 2])
    assert sub.node(1) is UNSET
    assert sub.edge("e") is UNSET


def test_subgraph_ignores_missing_and_repeated_ids() -> None:
    sub = _chain().subgraph([1, 1, 42, None])

    assert sub.nodes() == [1]
    assert sub.edges() == []


def test_subgraph_is_independent() -> None:
    graph = _chain()
    sub = graph.subgraph([1, 2, 3])

    sub.del_node(3)
    sub.add_edge("c", 2, 1)
    graph.del_edge("a")

    assert graph.has_node(3)
    assert not graph.has_edge("c")
    assert sub.has_edge("a")
    assert sorted(graph.edges()) == ["b"]


def test_subgraph_keeps_config_and_generator_state() -> None:
    config = GraphConfig(graph_id="parent", repr_max_items=3)
    graph = Graph(config=config)
    graph.add_node(1)
    first = graph.add_edge(None, 1, 1)

    sub = graph.subgraph([1])
    generated = sub.add_edge(None, 1, 1)

    assert sub.config is config
    assert sub.graph_id == "parent"
    assert sub.has_edge(first)
    assert generated == AutoEdgeId(1)


def test_copy_equals_original() -> None:
    graph = _chain()
    graph.graph_value = {"label": "chain"}
    clone = graph.copy()

    assert clone == graph
    assert clone is not graph
    assert clone.graph_value is graph.graph_value


def test_filter_nodes_by_value() -> None:
    graph = _chain()
    sub = graph.filter_nodes(lambda node_id, value: value != "V3")

    assert sorted(sub.nodes()) == [1, 2]
    assert sub.edges() == ["a"]
