# -*- coding: utf-8 -*-
"""
build_hp_graph.py

Turns the node / edge tables into two graph views keyed by compact ids:
- directed:   MultiDiGraph, used for degree and weighted degree
- undirected: MultiGraph,   used for communities and eccentricity

Both views hold every loaded edge. Repeated or reversed rows stay separate
parallel edges, nothing is merged or dropped here.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

import networkx as nx
import pandas as pd

from analyze_hp.errors import UnresolvedEndpointError


@dataclass(frozen=True)
class HPGraphs:
    nodes: pd.DataFrame
    edges: pd.DataFrame
    label_to_id: Dict[str, int]
    directed: nx.MultiDiGraph
    undirected: nx.MultiGraph

    @property
    def id_to_label(self) -> Dict[int, str]:
        return {i: label for label, i in self.label_to_id.items()}


def assign_ids(nodes: pd.DataFrame) -> Tuple[pd.DataFrame, Dict[str, int]]:
    """Ids run 1..N in table order; an `id` column already in the input is replaced."""
    out = nodes.drop(columns=["id"], errors="ignore").copy()
    out.insert(0, "id", range(1, len(out) + 1))
    label_to_id = dict(zip(out["characters"], out["id"]))
    return out, {str(k): int(v) for k, v in label_to_id.items()}


def join_edges(edges: pd.DataFrame, label_to_id: Dict[str, int]) -> pd.DataFrame:
    out = edges.copy()
    missing = set()
    for col in ("source", "target"):
        missing.update(label for label in out[col] if label not in label_to_id)
    if missing:
        raise UnresolvedEndpointError(missing)

    out["from"] = out["source"].map(label_to_id).astype(int)
    out["to"] = out["target"].map(label_to_id).astype(int)
    return out


def _add_nodes(G: nx.Graph, nodes: pd.DataFrame) -> None:
    for row in nodes.itertuples(index=False):
        G.add_node(int(row.id), label=row.characters, house=row.house)


def build_directed(nodes: pd.DataFrame, joined_edges: pd.DataFrame) -> nx.MultiDiGraph:
    G = nx.MultiDiGraph()
    _add_nodes(G, nodes)
    for a, b, w in zip(joined_edges["from"], joined_edges["to"], joined_edges["weight"]):
        G.add_edge(int(a), int(b), weight=float(w))
    return G


def build_undirected(nodes: pd.DataFrame, joined_edges: pd.DataFrame) -> nx.MultiGraph:
    G = nx.MultiGraph()
    _add_nodes(G, nodes)
    for a, b, w in zip(joined_edges["from"], joined_edges["to"], joined_edges["weight"]):
        G.add_edge(int(a), int(b), weight=float(w))
    return G


def build_graphs(nodes: pd.DataFrame, edges: pd.DataFrame) -> HPGraphs:
    nodes_with_id, label_to_id = assign_ids(nodes)
    joined = join_edges(edges, label_to_id)
    return HPGraphs(
        nodes=nodes_with_id,
        edges=joined,
        label_to_id=label_to_id,
        directed=build_directed(nodes_with_id, joined),
        undirected=build_undirected(nodes_with_id, joined),
    )
