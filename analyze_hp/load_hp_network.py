# -*- coding: utf-8 -*-
"""
load_hp_network.py

Reads the two precomputed input tables:
- nodes: characters, house
- edges: source, target, weight

and checks that they can be used as a graph.
"""

import os
from typing import List, Tuple, Union

import pandas as pd

from analyze_hp.errors import DuplicateNodeError, MalformedInputError

TableSource = Union[str, "os.PathLike[str]", pd.DataFrame]

NODE_COLUMNS: List[str] = ["characters", "house"]
EDGE_COLUMNS: List[str] = ["source", "target", "weight"]

# ---- Houses ----

HOUSES: List[str] = ["Gryffindor", "Slytherin", "Ravenclaw", "Hufflepuff"]
DEFAULT_HOUSE = "other"


def read_table(source: TableSource, sep: str = ",") -> pd.DataFrame:
    """Returns a copy of a DataFrame, or reads a delimited file."""
    if isinstance(source, pd.DataFrame):
        return source.copy()
    try:
        return pd.read_csv(source, sep=sep, encoding="utf-8-sig")
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise MalformedInputError(f"cannot read {source}: {e}") from e


def _require_columns(df: pd.DataFrame, required: List[str], what: str) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise MalformedInputError(
            f"{what} table is missing column(s) {missing}; found {list(df.columns)}"
        )


def _blank(series: pd.Series) -> pd.Series:
    return series.isna() | (series.astype(str).str.strip() == "")


def normalize_house(value) -> str:
    """Maps a free-text house to one of HOUSES, or DEFAULT_HOUSE."""
    if not isinstance(value, str):
        value = "" if pd.isna(value) else str(value)
    key = value.strip().lower()
    for house in HOUSES:
        if house.lower() == key:
            return house
    return DEFAULT_HOUSE


def load_nodes(source: TableSource, sep: str = ",") -> pd.DataFrame:
    df = read_table(source, sep=sep)
    df.columns = [str(c).strip() for c in df.columns]
    _require_columns(df, NODE_COLUMNS, "nodes")

    if _blank(df["characters"]).any():
        rows = df.index[_blank(df["characters"])].tolist()
        raise MalformedInputError(f"nodes table has blank 'characters' at rows {rows}")

    df["characters"] = df["characters"].astype(str).str.strip()
    dup = df["characters"][df["characters"].duplicated(keep=False)]
    if len(dup) > 0:
        raise DuplicateNodeError(dup.tolist())

    df["house"] = df["house"].map(normalize_house)
    return df.reset_index(drop=True)


def load_edges(source: TableSource, sep: str = ",") -> pd.DataFrame:
    df = read_table(source, sep=sep)
    df.columns = [str(c).strip() for c in df.columns]
    _require_columns(df, EDGE_COLUMNS, "edges")

    for col in ("source", "target"):
        if _blank(df[col]).any():
            rows = df.index[_blank(df[col])].tolist()
            raise MalformedInputError(f"edges table has blank '{col}' at rows {rows}")
        df[col] = df[col].astype(str).str.strip()

    weight = pd.to_numeric(df["weight"], errors="coerce")
    bad = weight.isna() | (weight <= 0)
    if bad.any():
        rows = df.index[bad].tolist()
        raise MalformedInputError(
            f"edges table has missing, non-numeric or non-positive 'weight' at rows {rows}"
        )
    df["weight"] = weight
    return df.reset_index(drop=True)


def load_network(
    nodes_source: TableSource,
    edges_source: TableSource,
    sep: str = ",",
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Nodes are validated before the edges file is touched."""
    nodes = load_nodes(nodes_source, sep=sep)
    edges = load_edges(edges_source, sep=sep)
    return nodes, edges
