"""Shared fixtures: the sample game configuration and grid helpers."""

import copy
import json
from pathlib import Path
from typing import Dict, List

import pytest

from src.config import load_config
from src.engine import GameConfig, Grid, Symbol


CONFIG_PATH = Path(__file__).parent.parent / "configs" / "config.json"
DATA_DIR = Path(__file__).parent / "data"


def make_grid(symbols: Dict[str, Symbol], names: List[List[str]]) -> Grid:
    """Build a grid from a matrix of symbol names."""
    return Grid(cells=[[symbols[name] for name in row] for row in names])


@pytest.fixture(scope="session")
def config_path() -> Path:
    return CONFIG_PATH


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture(scope="session")
def raw_config() -> dict:
    with open(CONFIG_PATH) as f:
        return json.load(f)


@pytest.fixture
def config_data(raw_config) -> dict:
    """A fresh, mutable copy of the sample configuration data."""
    return copy.deepcopy(raw_config)


@pytest.fixture(scope="session")
def config() -> GameConfig:
    return load_config(CONFIG_PATH)


@pytest.fixture(scope="session")
def symbols(config) -> Dict[str, Symbol]:
    return config.symbols


@pytest.fixture
def grid_of(symbols):
    """Build a grid of sample symbols from a matrix of names."""
    def _grid(names: List[List[str]]) -> Grid:
        return make_grid(symbols, names)
    return _grid


@pytest.fixture
def write_config(tmp_path):
    """Write configuration data to a JSON file and return its path."""
    def _write(data, name: str = "config.json") -> Path:
        path = tmp_path / name
        with open(path, "w") as f:
            json.dump(data, f)
        return path
    return _write
