"""Global pytest fixtures.

Centralizes:
 - Project root path insertion (so `common`, `controllers` and `models` import)
 - Headless matplotlib backend for chart smoke tests
 - Small results grids shared by the standings tests
"""

import sys
from pathlib import Path

import matplotlib
import pandas as pd
import pytest

matplotlib.use("Agg")

# Ensure project root is on sys.path once
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

DATA_DIR = PROJECT_ROOT / "data"


def make_grid(codes, results):
    """Square grid over `codes`; `results` maps (home, away) -> score text."""
    grid = pd.DataFrame(index=list(codes), columns=list(codes), dtype=object)
    for (home, away), score in results.items():
        grid.loc[home, away] = score
    return grid


@pytest.fixture
def grid_factory():
    return make_grid


@pytest.fixture(scope="session")
def sample_grid():
    from common.utils import read_match_grid
    return read_match_grid(DATA_DIR / "results_grid.csv")


@pytest.fixture(scope="session")
def sample_meta():
    from common.utils import read_team_meta
    return read_team_meta(DATA_DIR / "teams.csv")


@pytest.fixture(scope="session")
def sample_listings():
    from common.utils import read_listings
    return read_listings(DATA_DIR / "car_listings.csv")
