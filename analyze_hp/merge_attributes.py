# -*- coding: utf-8 -*-
"""
merge_attributes.py

Writes metric maps (id -> value) back onto the node table and derives the
presentation columns: ranks, palette indices and hex colours.

Ranking convention (same for every metric): competition ranking, highest
value first. Tied nodes share the best rank of the tie and the next rank is
skipped, e.g. values 9, 7, 7, 3 -> ranks 1, 2, 2, 4.
"""

import math
from typing import Dict, List, Mapping

import pandas as pd
from matplotlib import colormaps
from matplotlib.colors import to_hex

from analyze_hp.errors import UnknownNodeIdError

# ---- Palettes ----

HOUSE_COLORS: Dict[str, str] = {
    "Gryffindor": "#740001",
    "Slytherin": "#1a472a",
    "Ravenclaw": "#0e1a40",
    "Hufflepuff": "#ecb939",
    "other": "#8c8c8c",
}

DEGREE_CMAP = "Blues_r"
WEIGHTED_DEGREE_CMAP = "Oranges_r"
COMMUNITY_CMAP = "tab20"


def merge_metric(
    nodes: pd.DataFrame,
    values: Mapping,
    column: str,
    id_column: str = "id",
) -> pd.DataFrame:
    """Returns a copy of `nodes` with `column` filled from `values`."""
    known = set(nodes[id_column].tolist())
    unknown = [k for k in values if k not in known]
    if unknown:
        raise UnknownNodeIdError(unknown)

    out = nodes.copy()
    out[column] = out[id_column].map(dict(values))
    return out


def merge_metrics(
    nodes: pd.DataFrame,
    metrics: Mapping[str, Mapping],
    id_column: str = "id",
) -> pd.DataFrame:
    out = nodes
    for column, values in metrics.items():
        out = merge_metric(out, values, column, id_column=id_column)
    return out


# ---- Ranking / colours ----

def rank_metric(values: pd.Series) -> pd.Series:
    """Competition rank, 1 = highest value."""
    return values.rank(method="min", ascending=False).astype(int)


def rank_to_palette_index(rank: int, n_ranks: int, n_colors: int) -> int:
    """
    Maps rank 1..n_ranks linearly onto palette index 0..n_colors-1.

    Rank 1 always gets index 0 and rank n_ranks the last index; equal ranks
    get equal indices, so ties share a colour.
    """
    if n_colors < 1:
        raise ValueError("n_colors must be >= 1")
    if not 1 <= rank <= max(n_ranks, 1):
        raise ValueError(f"rank {rank} outside 1..{n_ranks}")
    if n_ranks <= 1 or n_colors == 1:
        return 0
    return int(math.floor((rank - 1) * (n_colors - 1) / (n_ranks - 1)))


def palette(cmap_name: str, n_colors: int) -> List[str]:
    cmap = colormaps[cmap_name]
    if n_colors == 1:
        return [to_hex(cmap(0.0))]
    # stop short of the pale end of sequential maps
    return [to_hex(cmap(0.85 * i / (n_colors - 1))) for i in range(n_colors)]


def add_rank_columns(
    nodes: pd.DataFrame,
    column: str,
    prefix: str,
    cmap_name: str = DEGREE_CMAP,
    n_colors: int = 9,
) -> pd.DataFrame:
    """Adds `<prefix>_rank` and `<prefix>_color`."""
    out = nodes.copy()
    if len(out) == 0:
        out[f"{prefix}_rank"] = pd.Series(dtype=int)
        out[f"{prefix}_color"] = pd.Series(dtype=str)
        return out

    ranks = rank_metric(out[column])
    colors = palette(cmap_name, n_colors)
    n_ranks = len(out)
    out[f"{prefix}_rank"] = ranks
    out[f"{prefix}_color"] = [
        colors[rank_to_palette_index(int(r), n_ranks, n_colors)] for r in ranks
    ]
    return out


def add_house_colors(nodes: pd.DataFrame) -> pd.DataFrame:
    out = nodes.copy()
    out["house_color"] = out["house"].map(HOUSE_COLORS).fillna(HOUSE_COLORS["other"])
    return out


def add_community_colors(nodes: pd.DataFrame, column: str = "community") -> pd.DataFrame:
    """Communities are ordered by id; the palette repeats past 20 groups."""
    out = nodes.copy()
    cmap = colormaps[COMMUNITY_CMAP]
    ids = sorted(out[column].dropna().unique().tolist())
    color_of = {c: to_hex(cmap(i % cmap.N)) for i, c in enumerate(ids)}
    out[f"{column}_color"] = out[column].map(color_of)
    return out


def top_nodes(nodes: pd.DataFrame, column: str, n: int = 10) -> pd.DataFrame:
    """Top-n rows by `column`; ties broken by character name."""
    return (
        nodes.sort_values([column, "characters"], ascending=[False, True])
        .head(n)
        .reset_index(drop=True)
    )
