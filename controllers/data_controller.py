"""
Data controller helpers that glue the dataset readers to the Streamlit pages.

This module exposes cached convenience functions used by pages:
    - `load_league()` returns the results grid and the team metadata.
    - `load_listings()` returns the car listings table.

All parsing is implemented in `common.utils`. This module only resolves the
configured file locations and caches the result with `st.cache_data`, so page
reruns do not re-read the CSV files.
"""

from typing import Dict, Tuple
import pandas as pd
import streamlit as st

from common.constants import grid_path, listings_path, teams_path
from common.utils import read_listings, read_match_grid, read_team_meta


@st.cache_data(ttl=3600, show_spinner=False)
def _load_league(grid_file: str, teams_file: str) -> Tuple[pd.DataFrame, Dict[str, str]]:
    return read_match_grid(grid_file), read_team_meta(teams_file)


@st.cache_data(ttl=3600, show_spinner=False)
def _load_listings(listings_file: str) -> pd.DataFrame:
    return read_listings(listings_file)


def load_league() -> Tuple[pd.DataFrame, Dict[str, str]]:
    # Paths are passed as strings so they take part in the cache key.
    return _load_league(str(grid_path()), str(teams_path()))


def load_listings() -> pd.DataFrame:
    return _load_listings(str(listings_path()))
