"""
Dataset balance and outlier checks for the listings table.

All helpers take a DataFrame and return a new summary DataFrame (or a copy of
the input with a flag column); the input is never modified. A column that is
not in the frame raises `KeyError` from pandas.
"""

#Import libraries
from __future__ import annotations
import logging
from typing import Iterable, Tuple
import numpy as np
import pandas as pd

from common.constants import MISSING_LABEL, OUTLIER_K

logger = logging.getLogger(__name__)


def _numeric(series: pd.Series) -> pd.Series:
    return pd.to_numeric(series, errors="coerce").dropna()


# ---------- Balance ----------
def category_balance(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """
    Count and share of each category in `column`.
    Missing values are reported under MISSING_LABEL. Sorted by count desc,
    then value, so equal counts have a stable order.
    """
    values = df[column].astype("object").where(df[column].notna(), MISSING_LABEL).astype(str)
    counts = values.value_counts().rename_axis("value").reset_index(name="count")
    total = int(counts["count"].sum())
    counts["share"] = counts["count"] / total if total else 0.0
    return counts.sort_values(["count", "value"], ascending=[False, True], kind="mergesort").reset_index(drop=True)


def imbalance_ratio(balance: pd.DataFrame) -> float:
    """Largest class count divided by the smallest (1.0 is perfectly balanced)."""
    if balance.empty:
        return float("nan")
    return float(balance["count"].max() / balance["count"].min())


# ---------- Outliers ----------
def iqr_bounds(series: pd.Series, k: float = OUTLIER_K) -> Tuple[float, float]:
    """Tukey fences (Q1 - k*IQR, Q3 + k*IQR) over the numeric values."""
    s = _numeric(series)
    if s.empty:
        return float("nan"), float("nan")
    q1, q3 = s.quantile(0.25), s.quantile(0.75)
    iqr = q3 - q1
    return float(q1 - k * iqr), float(q3 + k * iqr)


def flag_iqr_outliers(df: pd.DataFrame, column: str, k: float = OUTLIER_K) -> pd.DataFrame:
    """Return a copy of `df` with a boolean `<column>_outlier` column."""
    out = df.copy()
    lo, hi = iqr_bounds(df[column], k=k)
    vals = pd.to_numeric(out[column], errors="coerce")
    out[f"{column}_outlier"] = ((vals < lo) | (vals > hi)).fillna(False).astype(bool)
    return out


def outlier_report(df: pd.DataFrame, columns: Iterable[str], k: float = OUTLIER_K) -> pd.DataFrame:
    """
    One row per numeric column: outlier count/percentage, fences and range.
    Columns with fewer than two numeric values are skipped.
    """
    rows = []
    for col in columns:
        s = _numeric(df[col])
        if len(s) < 2:
            logger.debug("Skipping outlier check for %r: %d numeric values", col, len(s))
            continue
        lo, hi = iqr_bounds(s, k=k)
        out = s[(s < lo) | (s > hi)]
        rows.append({
            "column": col,
            "outlier_count": int(out.shape[0]),
            "outlier_pct": round(float(out.shape[0] / len(s) * 100), 2),
            "lower_bound": lo,
            "upper_bound": hi,
            "min": float(s.min()),
            "max": float(s.max()),
        })

    cols = ["column", "outlier_count", "outlier_pct", "lower_bound", "upper_bound", "min", "max"]
    if not rows:
        return pd.DataFrame(columns=cols)
    return pd.DataFrame(rows, columns=cols)


def missing_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Missing count and percentage per column, most incomplete first."""
    n = len(df)
    miss = df.isna().sum()
    summary = pd.DataFrame({
        "column": miss.index,
        "missing": miss.values.astype(int),
        "missing_pct": np.round(miss.values / n * 100, 2) if n else np.zeros(len(miss)),
    })
    return summary.sort_values("missing", ascending=False, kind="mergesort").reset_index(drop=True)
