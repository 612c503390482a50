"""
Common helpers for reading the report datasets from delimited text.

This module contains plain pandas readers for the three inputs of the report:
    - the square results grid (home codes down the first column, away codes
        across the header),
    - the team metadata table (`code,name`), and
    - the car listings table.

The readers are deliberately free of Streamlit so they can be used from tests
and scripts; the cached wrappers the pages call live in
`controllers.data_controller`.
"""

# Import libraries
from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Dict, Union
import pandas as pd

from common.constants import LISTING_NUMERIC_COLUMNS

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

UNNAMED_RE = re.compile(r"^Unnamed: \d+$")


def _is_blank_label(label) -> bool:
    """NaN, blank, or pandas' placeholder for an empty header cell."""
    if pd.isna(label):
        return True
    s = str(label).strip()
    return s == "" or bool(UNNAMED_RE.match(s))


def read_match_grid(path: PathLike) -> pd.DataFrame:
    """
    Read the results grid. Every cell is kept as text (a score like "2-1"
    must not be coerced) and empty cells become NaN.
    """
    df = pd.read_csv(path, index_col=0, dtype=str, keep_default_na=False, na_values=[""])

    # Spreadsheet exports often carry unlabelled trailing rows/columns (",,").
    keep_rows = [not _is_blank_label(c) for c in df.index]
    keep_cols = [not _is_blank_label(c) for c in df.columns]
    dropped_rows, dropped_cols = keep_rows.count(False), keep_cols.count(False)
    if dropped_rows or dropped_cols:
        logger.warning("Dropped %d unlabelled rows and %d unlabelled columns from %s",
                       dropped_rows, dropped_cols, path)
        df = df.loc[keep_rows, keep_cols]

    df.index = df.index.map(lambda c: str(c).strip())
    df.columns = [str(c).strip() for c in df.columns]
    df.index.name = None
    logger.info("Loaded results grid %s with %d teams", path, len(df))
    return df


def read_team_meta(path: PathLike) -> Dict[str, str]:
    """Return {code -> display name} from a `code,name` CSV."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = {"code", "name"} - set(df.columns)
    if missing:
        raise KeyError(f"Team metadata {path} is missing columns: {sorted(missing)}")
    meta = dict(zip(df["code"].str.strip(), df["name"].str.strip()))
    logger.info("Loaded %d team names from %s", len(meta), path)
    return meta


def read_listings(path: PathLike) -> pd.DataFrame:
    """
    Read the car listings. Known numeric columns are coerced, so stray text
    such as "n/a" or "call" becomes NaN instead of breaking the checks.
    """
    df = pd.read_csv(path)
    for col in LISTING_NUMERIC_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    logger.info("Loaded %d listings (%d columns) from %s", len(df), df.shape[1], path)
    return df
