# -*- coding: utf-8 -*-
"""
hp_metrics.py

Node and graph metrics. Every algorithm comes from a library:
- degree / weighted degree / eccentricity: networkx
- Louvain communities / modularity: python-louvain

All functions are pure: they read a graph view and return a new dict.
"""

from typing import Dict, Optional

import networkx as nx
from community import community_louvain

from analyze_hp.errors import DisconnectedGraphError

LOUVAIN_SEED = 42


# ---- Degree ----

def degree(graph: nx.Graph) -> Dict[int, int]:
    """Incident edge count; on a directed view this is in + out."""
    return {n: int(d) for n, d in graph.degree()}


def weighted_degree(graph: nx.Graph, weight: Optional[str] = "weight") -> Dict[int, float]:
    """Sum of incident edge weights (strength)."""
    return {n: float(d) for n, d in graph.degree(weight=weight)}


# ---- Communities ----

def collapse_parallel_edges(graph: nx.Graph, weight: Optional[str] = "weight") -> nx.Graph:
    """Simple undirected graph whose edge weights are the summed parallel weights."""
    key = weight or "weight"
    H = nx.Graph()
    H.add_nodes_from(graph.nodes(data=True))
    for u, v, data in graph.edges(data=True):
        w = data.get(weight, 1.0) if weight else 1.0
        if H.has_edge(u, v):
            H[u][v][key] += w
        else:
            H.add_edge(u, v, **{key: w})
    return H


def community(
    graph: nx.Graph,
    weight: Optional[str] = "weight",
    resolution: float = 1.0,
    seed: Optional[int] = LOUVAIN_SEED,
) -> Dict[int, int]:
    """
    Louvain partition of the undirected view.

    Community ids are arbitrary small integers. With a fixed seed the result
    is reproducible; callers should only rely on membership.
    """
    if graph.is_directed():
        raise ValueError("Louvain community detection needs the undirected view")
    simple = collapse_parallel_edges(graph, weight=weight)
    partition = community_louvain.best_partition(
        simple,
        weight=weight or "weight",
        resolution=resolution,
        random_state=seed,
    )
    return {n: int(c) for n, c in partition.items()}


def modularity(
    graph: nx.Graph,
    partition: Dict[int, int],
    weight: Optional[str] = "weight",
) -> float:
    simple = collapse_parallel_edges(graph, weight=weight)
    if simple.number_of_edges() == 0:
        return 0.0
    return float(community_louvain.modularity(partition, simple, weight=weight or "weight"))


# ---- Distances ----

def eccentricity(graph: nx.Graph) -> Dict[int, int]:
    """
    Hop-count eccentricity on the undirected view.

    Raises DisconnectedGraphError when the graph is empty or has more than
    one connected component.
    """
    if graph.is_directed():
        graph = graph.to_undirected(as_view=True)
    if graph.number_of_nodes() == 0:
        raise DisconnectedGraphError([])
    if not nx.is_connected(graph):
        raise DisconnectedGraphError([set(c) for c in nx.connected_components(graph)])
    return {n: int(e) for n, e in nx.eccentricity(graph).items()}


def diameter(graph: nx.Graph, e: Optional[Dict[int, int]] = None) -> int:
    if e is None:
        e = eccentricity(graph)
    return max(e.values())


def radius(graph: nx.Graph, e: Optional[Dict[int, int]] = None) -> int:
    if e is None:
        e = eccentricity(graph)
    return min(e.values())


def mean_eccentricity(graph: nx.Graph, e: Optional[Dict[int, int]] = None) -> float:
    if e is None:
        e = eccentricity(graph)
    return sum(e.values()) / len(e)


def graph_summary(
    directed: nx.Graph,
    undirected: nx.Graph,
    partition: Optional[Dict[int, int]] = None,
    e: Optional[Dict[int, int]] = None,
) -> Dict[str, float]:
    if e is None:
        e = eccentricity(undirected)
    summary = {
        "nodes": directed.number_of_nodes(),
        "edges": directed.number_of_edges(),
        "diameter": diameter(undirected, e),
        "radius": radius(undirected, e),
        "mean_eccentricity": mean_eccentricity(undirected, e),
    }
    if partition is not None:
        summary["communities"] = len(set(partition.values()))
        summary["modularity"] = modularity(undirected, partition)
    return summary
