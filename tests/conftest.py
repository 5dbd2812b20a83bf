"""
Common fixtures for pytest unit and integration tests for the kayadata library.

"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest
import yaml

from kayadata.library.tables import KayaTables

FUELS = ["Coal", "Natural Gas", "Oil", "Nuclear", "Hydro", "Renewables"]


def build_kaya_data() -> pd.DataFrame:
    """Historical rows for three countries, one world and an ambiguous code."""
    rows = [
        # region, code, geography, year, P, G, E, F, G_ppp
        ["Alphaland", "AAA", "nation", 2000, 1.0, 10.0, 5.0, 100.0, 20.0],
        ["Alphaland", "AAA", "nation", 2001, 1.1, 12.0, 6.0, 108.0, 22.0],
        ["Betaland", "BBB", "nation", 2000, 2.0, 4.0, 8.0, 40.0, 6.0],
        ["Betaland", "BBB", "nation", 2001, 2.0, 5.0, 9.0, 45.0, 7.0],
        ["World", "WLD", "world", 2000, 3.0, 14.0, 13.0, 140.0, 26.0],
        ["World", "WLD", "world", 2001, 3.1, 17.0, 15.0, 153.0, 29.0],
        ["Deltaland", "DDD", "nation", 2000, 0.5, 1.0, 2.0, 10.0, 1.5],
        ["Delta Union", "DDD", "region", 2000, 0.7, 1.5, 2.5, 12.0, 2.0],
    ]
    df = pd.DataFrame(
        rows,
        columns=["region", "region_code", "geography", "year", "P", "G", "E", "F", "G_ppp"],
    )
    df["G_mer"] = df["G"]
    df["g"] = df["G"] / df["P"]
    df["e"] = df["E"] / df["G"]
    df["f"] = df["F"] / df["E"]
    df["ef"] = df["F"] / df["G"]
    return df


def build_fuel_mix() -> pd.DataFrame:
    """Fuel mix rows; Alphaland reports two years, Betaland lacks hydro data."""
    quads = {
        ("Alphaland", "AAA", "nation", 2019): [1.0, 1.0, 1.0, 1.0, 1.0, 1.0],
        ("Alphaland", "AAA", "nation", 2021): [2.0, 1.5, 1.0, 0.5, 0.6, 0.4],
        ("Betaland", "BBB", "nation", 2020): [3.0, 2.0, 2.0, 0.0, np.nan, 1.0],
        ("World", "WLD", "world", 2021): [5.0, 3.5, 3.0, 0.5, 0.6, 1.4],
    }
    rows = []
    for (region, code, geography, year), values in quads.items():
        total = np.nansum(values)
        for fuel, q in zip(FUELS, values):
            rows.append([region, code, geography, year, fuel, q, q / total])
    return pd.DataFrame(
        rows,
        columns=["region", "region_code", "geography", "year", "fuel", "quads", "frac"],
    )


def build_td_values() -> pd.DataFrame:
    """Projection knots; Betaland has a single projection year."""
    rows = [
        ["Alphaland", "AAA", "nation", 2020, 1.0, 10.0, 5.0, 100.0],
        ["Alphaland", "AAA", "nation", 2030, 2.0, 20.0, 5.0, 50.0],
        ["Alphaland", "AAA", "nation", 2040, 4.0, 20.0, 10.0, 50.0],
        ["Betaland", "BBB", "nation", 2030, 2.0, 4.0, 8.0, 40.0],
        ["World", "WLD", "world", 2020, 3.0, 14.0, 13.0, 140.0],
        ["World", "WLD", "world", 2040, 5.0, 30.0, 20.0, 100.0],
    ]
    return pd.DataFrame(
        rows,
        columns=["region", "region_code", "geography", "year", "P", "G", "E", "F"],
    )


def build_td_trends() -> pd.DataFrame:
    rows = [
        ["Alphaland", "AAA", "nation", 0.01, 0.03, 0.02, 0.015],
        ["World", "WLD", "world", 0.005, 0.025, 0.01, 0.0],
    ]
    return pd.DataFrame(
        rows, columns=["region", "region_code", "geography", "P", "G", "E", "F"]
    )


@pytest.fixture
def kaya_tables() -> KayaTables:
    """Small, hand-built tables with exactly known values."""
    return KayaTables.from_frames(
        kaya_data=build_kaya_data(),
        fuel_mix=build_fuel_mix(),
        td_values=build_td_values(),
        td_trends=build_td_trends(),
    )


@pytest.fixture
def data_sources_yaml(tmp_path: Path) -> Path:
    """Write the hand-built tables to CSV files with a config pointing at them."""
    frames = {
        "kaya_data": build_kaya_data(),
        "fuel_mix": build_fuel_mix(),
        "td_values": build_td_values(),
        "td_trends": build_td_trends(),
    }
    config = {}
    for name, df in frames.items():
        df.to_csv(tmp_path / f"{name}.csv", index=False)
        config[name] = {"path": f"{name}.csv", "description": f"test {name}"}

    config_path = tmp_path / "data_sources.yaml"
    with open(config_path, "w") as f:
        yaml.safe_dump(config, f)
    return config_path
