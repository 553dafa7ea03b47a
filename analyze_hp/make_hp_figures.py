# -*- coding: utf-8 -*-
"""
make_hp_figures.py
Reads hp_network_nodes.csv / hp_network_edges.csv and draws:
1) top-N characters by degree
2) top-N characters by weighted degree
3) the network, nodes coloured by community and sized by weighted degree
"""

import argparse
import os
import sys
from typing import Dict, List, Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import networkx as nx
import pandas as pd

from analyze_hp.merge_attributes import top_nodes


def read_results(results_dir: str):
    nodes_path = os.path.join(results_dir, "hp_network_nodes.csv")
    edges_path = os.path.join(results_dir, "hp_network_edges.csv")
    print("[INFO] Reading node and edge tables…")
    nodes = pd.read_csv(nodes_path, encoding="utf-8-sig")
    edges = pd.read_csv(edges_path, encoding="utf-8-sig")
    return nodes, edges


def scale(values: List[float], lo: float, hi: float, flat: float) -> List[float]:
    """Linear map of `values` onto [lo, hi]; `flat` when all values are equal."""
    if not values:
        return []
    v_min, v_max = min(values), max(values)
    if v_max == v_min:
        return [flat for _ in values]
    return [lo + (v - v_min) / (v_max - v_min) * (hi - lo) for v in values]


def bar_chart(
    nodes: pd.DataFrame,
    column: str,
    color_column: str,
    title: str,
    xlabel: str,
    out_path: str,
    n: int = 15,
) -> str:
    top = top_nodes(nodes, column, n).iloc[::-1]

    plt.figure(figsize=(7, max(3, 0.35 * len(top) + 1)))
    plt.barh(top["characters"], top[column], color=top[color_column])
    plt.xlabel(xlabel)
    plt.ylabel("Character")
    plt.title(title)
    plt.tight_layout()
    plt.savefig(out_path, dpi=300)
    plt.close()
    print(f"[OK] Figure saved: {out_path}")
    return out_path


def network_graph(nodes: pd.DataFrame, edges: pd.DataFrame, out_path: str) -> str:
    G = nx.Graph()
    for row in nodes.itertuples(index=False):
        G.add_node(
            int(row.id),
            label=row.characters,
            weighted_degree=float(row.weighted_degree_centrality),
            color=row.community_color,
        )
    for a, b, w in zip(edges["from"], edges["to"], edges["weight"]):
        a, b = int(a), int(b)
        if G.has_edge(a, b):
            G[a][b]["weight"] += float(w)
        else:
            G.add_edge(a, b, weight=float(w))

    print(f"[INFO] Graph: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")

    # seed keeps the layout identical between runs
    pos = nx.spring_layout(G, k=1.0, weight="weight", seed=42)

    node_sizes = scale([G.nodes[n]["weighted_degree"] for n in G.nodes()], 100, 1600, 600.0)
    edge_widths = scale([G[u][v]["weight"] for u, v in G.edges()], 0.5, 5.0, 1.5)

    plt.figure(figsize=(12, 9))
    nx.draw_networkx_edges(G, pos, width=edge_widths, alpha=0.4)
    nx.draw_networkx_nodes(
        G, pos,
        node_size=node_sizes,
        node_color=[G.nodes[n]["color"] for n in G.nodes()],
    )
    labels: Dict[int, str] = {n: G.nodes[n]["label"] for n in G.nodes()}
    nx.draw_networkx_labels(G, pos, labels=labels, font_size=8)

    plt.title("Harry Potter book 1: character network (colour = Louvain community)")
    plt.axis("off")
    plt.tight_layout()
    plt.savefig(out_path, dpi=300)
    plt.close()
    print(f"[OK] Network figure saved: {out_path}")
    return out_path


def make_figures(results_dir: str, top: int = 15) -> List[str]:
    nodes, edges = read_results(results_dir)
    return [
        bar_chart(
            nodes, "degree_centrality", "degree_color",
            f"Top {top} characters by degree", "Degree",
            os.path.join(results_dir, "hp_degree_bar.png"), n=top,
        ),
        bar_chart(
            nodes, "weighted_degree_centrality", "weighted_degree_color",
            f"Top {top} characters by weighted degree", "Weighted degree (interactions)",
            os.path.join(results_dir, "hp_weighted_degree_bar.png"), n=top,
        ),
        network_graph(nodes, edges, os.path.join(results_dir, "hp_network_graph.png")),
    ]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Static figures for the Harry Potter network")
    parser.add_argument(
        "--results",
        type=str,
        default="./results",
        help="directory written by analyze_hp_network (default ./results)",
    )
    parser.add_argument("--top", type=int, default=15, help="bars per chart (default 15)")
    args = parser.parse_args(argv)

    if not os.path.exists(os.path.join(args.results, "hp_network_nodes.csv")):
        print(f"[ERROR] No hp_network_nodes.csv in {args.results}; run analyze_hp_network first.")
        return 1

    make_figures(args.results, top=args.top)
    print("[DONE] Figures generated.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
