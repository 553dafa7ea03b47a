# -*- coding: utf-8 -*-
"""
analyze_hp_network.py

Character interaction network for Harry Potter book 1:
nodes (characters, house) + weighted edges (source, target, weight).

Pipeline:
  load -> build graphs -> metrics -> merge onto node table -> ranks / colours

Outputs:
- hp_network_nodes.csv  (node table + metric / rank / colour columns)
- hp_network_edges.csv  (edges with from / to ids)
- hp_network.gexf       (can be opened in Gephi)
"""

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

import networkx as nx
import pandas as pd

from analyze_hp import hp_metrics
from analyze_hp.build_hp_graph import HPGraphs, build_graphs
from analyze_hp.errors import HPNetworkError
from analyze_hp.load_hp_network import TableSource, load_network
from analyze_hp.merge_attributes import (
    DEGREE_CMAP,
    WEIGHTED_DEGREE_CMAP,
    add_community_colors,
    add_house_colors,
    add_rank_columns,
    merge_metrics,
    top_nodes,
)


@dataclass(frozen=True)
class NetworkAnalysis:
    graphs: HPGraphs
    nodes: pd.DataFrame
    summary: Dict[str, float]

    @property
    def edges(self) -> pd.DataFrame:
        return self.graphs.edges


def run_pipeline(
    nodes_source: TableSource,
    edges_source: TableSource,
    seed: Optional[int] = hp_metrics.LOUVAIN_SEED,
) -> NetworkAnalysis:
    nodes, edges = load_network(nodes_source, edges_source)
    print(f"[INFO] Loaded {len(nodes)} nodes, {len(edges)} edges")

    graphs = build_graphs(nodes, edges)
    print(
        f"[INFO] Directed view: {graphs.directed.number_of_nodes()} nodes, "
        f"{graphs.directed.number_of_edges()} edges"
    )

    print("[INFO] Computing node metrics…")
    deg = hp_metrics.degree(graphs.directed)
    wdeg = hp_metrics.weighted_degree(graphs.directed)
    partition = hp_metrics.community(graphs.undirected, seed=seed)
    ecc = hp_metrics.eccentricity(graphs.undirected)

    table = merge_metrics(graphs.nodes, {
        "degree_centrality": deg,
        "weighted_degree_centrality": wdeg,
        "community": partition,
        "eccentricity": ecc,
    })
    table = add_rank_columns(table, "degree_centrality", "degree", DEGREE_CMAP)
    table = add_rank_columns(
        table, "weighted_degree_centrality", "weighted_degree", WEIGHTED_DEGREE_CMAP
    )
    table = add_community_colors(table)
    table = add_house_colors(table)

    summary = hp_metrics.graph_summary(
        graphs.directed, graphs.undirected, partition=partition, e=ecc
    )
    return NetworkAnalysis(graphs=graphs, nodes=table, summary=summary)


def format_top(nodes: pd.DataFrame, column: str, rank_column: str, n: int) -> List[str]:
    lines = []
    for row in top_nodes(nodes, column, n).itertuples(index=False):
        d = row._asdict()
        lines.append(f"  {d[rank_column]:>3}. {d['characters']:<24} {d[column]:g}")
    return lines


def print_summary(analysis: NetworkAnalysis, top: int = 10) -> None:
    nodes = analysis.nodes
    s = analysis.summary

    print(f"\n[RESULT] Top {top} by degree:")
    print("\n".join(format_top(nodes, "degree_centrality", "degree_rank", top)))

    print(f"\n[RESULT] Top {top} by weighted degree:")
    print("\n".join(format_top(
        nodes, "weighted_degree_centrality", "weighted_degree_rank", top
    )))

    print("\n[RESULT] Graph metrics:")
    print(f"  diameter          = {s['diameter']}")
    print(f"  radius            = {s['radius']}")
    print(f"  mean eccentricity = {s['mean_eccentricity']:.4f}")
    if "communities" in s:
        print(f"  communities       = {s['communities']} (modularity {s['modularity']:.4f})")


def graph_for_export(analysis: NetworkAnalysis) -> nx.MultiDiGraph:
    G = analysis.graphs.directed.copy()
    for rec in analysis.nodes.to_dict("records"):
        attrs = {k: v for k, v in rec.items() if k != "id" and not pd.isna(v)}
        G.nodes[int(rec["id"])].update(attrs)
    return G


def export_results(analysis: NetworkAnalysis, outdir: str) -> Dict[str, str]:
    os.makedirs(outdir, exist_ok=True)
    paths = {
        "nodes": os.path.join(outdir, "hp_network_nodes.csv"),
        "edges": os.path.join(outdir, "hp_network_edges.csv"),
        "gexf": os.path.join(outdir, "hp_network.gexf"),
    }

    analysis.nodes.to_csv(paths["nodes"], index=False, encoding="utf-8-sig")
    print(f"[OK] Node table saved: {paths['nodes']}")

    analysis.edges.to_csv(paths["edges"], index=False, encoding="utf-8-sig")
    print(f"[OK] Edge table saved: {paths['edges']}")

    nx.write_gexf(graph_for_export(analysis), paths["gexf"])
    print(f"[OK] Network file saved: {paths['gexf']}")
    return paths


def main(argv: Optional[List[str]] = None) -> int:
    print("=== Harry Potter network analysis started ===")

    parser = argparse.ArgumentParser(
        description="Harry Potter book 1 character network: degree, communities, eccentricity"
    )
    parser.add_argument("--nodes", type=str, required=True, help="nodes CSV (characters, house)")
    parser.add_argument("--edges", type=str, required=True, help="edges CSV (source, target, weight)")
    parser.add_argument(
        "--outdir",
        type=str,
        default="./results",
        help="output directory (default ./results)",
    )
    args = parser.parse_args(argv)
    print(f"[ARGS] nodes={args.nodes}")
    print(f"[ARGS] edges={args.edges}")
    print(f"[ARGS] outdir={args.outdir}")

    for path in (args.nodes, args.edges):
        if not os.path.exists(path):
            print(f"[ERROR] File not found: {path}")
            return 1

    try:
        analysis = run_pipeline(args.nodes, args.edges)
    except HPNetworkError as e:
        print(f"[ERROR] {type(e).__name__}: {e}")
        return 1

    print_summary(analysis)
    export_results(analysis, args.outdir)

    print("[DONE] Analysis finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
