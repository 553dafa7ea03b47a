from pathlib import Path

import pandas as pd
import pytest


@pytest.fixture
def abc_nodes() -> pd.DataFrame:
    return pd.DataFrame({
        "characters": ["A", "B", "C"],
        "house": ["Gryffindor", "Slytherin", None],
    })


@pytest.fixture
def abc_edges() -> pd.DataFrame:
    return pd.DataFrame({
        "source": ["A", "B"],
        "target": ["B", "C"],
        "weight": [12, 15],
    })


@pytest.fixture
def small_world_nodes() -> pd.DataFrame:
    return pd.DataFrame({
        "characters": ["Harry", "Ron", "Hermione", "Neville", "Draco", "Crabbe", "Goyle", "Snape"],
        "house": ["Gryffindor", "Gryffindor", "gryffindor", "Gryffindor",
                  "Slytherin", "Slytherin", "Slytherin", "Slytherin"],
    })


@pytest.fixture
def small_world_edges() -> pd.DataFrame:
    rows = [
        ("Harry", "Ron", 120), ("Harry", "Hermione", 90), ("Ron", "Hermione", 80),
        ("Neville", "Harry", 30), ("Neville", "Hermione", 20),
        ("Draco", "Crabbe", 40), ("Draco", "Goyle", 40), ("Crabbe", "Goyle", 25),
        ("Snape", "Draco", 15), ("Snape", "Harry", 35), ("Harry", "Draco", 28),
    ]
    return pd.DataFrame(rows, columns=["source", "target", "weight"])


@pytest.fixture
def write_csv(tmp_path: Path):
    def _write(name: str, df: pd.DataFrame) -> Path:
        path = tmp_path / name
        df.to_csv(path, index=False)
        return path
    return _write
