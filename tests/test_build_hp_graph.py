import pandas as pd
import pytest

from analyze_hp.build_hp_graph import assign_ids, build_graphs, join_edges
from analyze_hp.errors import UnresolvedEndpointError
from analyze_hp.load_hp_network import load_network


def test_assign_ids_in_table_order(abc_nodes) -> None:
    nodes, label_to_id = assign_ids(abc_nodes)
    assert label_to_id == {"A": 1, "B": 2, "C": 3}
    assert nodes["id"].tolist() == [1, 2, 3]
    assert "id" not in abc_nodes.columns


def test_join_completeness(small_world_nodes, small_world_edges) -> None:
    graphs = build_graphs(*load_network(small_world_nodes, small_world_edges))
    ids = set(graphs.nodes["id"])
    assert set(graphs.edges["from"]) <= ids
    assert set(graphs.edges["to"]) <= ids
    for label, i in zip(graphs.edges["source"], graphs.edges["from"]):
        assert graphs.id_to_label[i] == label


def test_unresolved_source(abc_nodes, abc_edges) -> None:
    edges = pd.concat(
        [abc_edges, pd.DataFrame({"source": ["Voldemort"], "target": ["A"], "weight": [11]})],
        ignore_index=True,
    )
    _, label_to_id = assign_ids(abc_nodes)
    with pytest.raises(UnresolvedEndpointError) as exc:
        join_edges(edges, label_to_id)
    assert exc.value.label == "Voldemort"
    assert "Voldemort" in str(exc.value)


def test_unresolved_labels_all_reported(abc_nodes) -> None:
    edges = pd.DataFrame({"source": ["X", "A"], "target": ["B", "Y"], "weight": [11, 12]})
    _, label_to_id = assign_ids(abc_nodes)
    with pytest.raises(UnresolvedEndpointError) as exc:
        join_edges(edges, label_to_id)
    assert exc.value.labels == ["X", "Y"]


def test_views_share_nodes_and_edges(abc_nodes, abc_edges) -> None:
    graphs = build_graphs(abc_nodes, abc_edges)
    assert graphs.directed.is_directed()
    assert not graphs.undirected.is_directed()
    assert set(graphs.directed.nodes()) == set(graphs.undirected.nodes()) == {1, 2, 3}
    assert graphs.directed.number_of_edges() == graphs.undirected.number_of_edges() == 2
    assert graphs.directed.has_edge(1, 2)
    assert not graphs.directed.has_edge(2, 1)
    assert graphs.undirected.has_edge(2, 1)
    assert graphs.directed.nodes[1]["label"] == "A"


def test_isolated_node_kept(abc_nodes, abc_edges) -> None:
    nodes = pd.concat(
        [abc_nodes, pd.DataFrame({"characters": ["D"], "house": ["Ravenclaw"]})],
        ignore_index=True,
    )
    graphs = build_graphs(nodes, abc_edges)
    assert graphs.directed.number_of_nodes() == 4
    assert graphs.directed.degree(4) == 0


def test_repeated_edges_are_not_dropped(abc_nodes) -> None:
    edges = pd.DataFrame({
        "source": ["A", "B", "A"],
        "target": ["B", "A", "B"],
        "weight": [12, 13, 14],
    })
    graphs = build_graphs(abc_nodes, edges)
    assert graphs.directed.number_of_edges() == 3
    assert graphs.undirected.number_of_edges() == 3
    assert graphs.undirected.number_of_edges(1, 2) == 3


def test_assign_ids_replaces_existing_id_column(abc_nodes) -> None:
    nodes = abc_nodes.assign(id=[30, 10, 20])
    out, label_to_id = assign_ids(nodes)
    assert out["id"].tolist() == [1, 2, 3]
    assert list(out.columns).count("id") == 1
    assert label_to_id == {"A": 1, "B": 2, "C": 3}
