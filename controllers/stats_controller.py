from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

import pandas as pd
from pandas.io.formats.style import Styler

from common.colors import ZONE_COLORS, text_color_for, zone_for_rank
from common.constants import LISTING_CATEGORY_COLUMNS, LISTING_NUMERIC_COLUMNS, OUTLIER_K
from common.metrics import (
    compute_standings, expand_grid, grid_codes, home_away_split, results_pivot, standings_to_frame,
)
from common.quality import category_balance, imbalance_ratio, missing_summary, outlier_report
from models.match_model import Match, StandingsRow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeagueReport:
    rows: List[StandingsRow]
    table: pd.DataFrame        # Pos, Team, Pts, GD, GF, GA
    split: pd.DataFrame        # code, Team, Home, Away, Total
    pivot: pd.DataFrame        # home points, home code x away code
    matches: List[Match]


def build_league_report(grid: pd.DataFrame, meta: Mapping[str, str]) -> LeagueReport:
    rows = compute_standings(grid, meta)
    matches = expand_grid(grid)
    codes = grid_codes(grid)
    return LeagueReport(
        rows=rows,
        table=standings_to_frame(rows),
        split=home_away_split(matches, meta, codes=codes),
        pivot=results_pivot(matches, codes=codes),
        matches=matches,
    )


def _zone_row_styles(row: pd.Series, n_teams: int, sizes: Optional[Dict[str, int]]) -> List[str]:
    zone = zone_for_rank(int(row["Pos"]), n_teams, sizes)
    if zone is None:
        return [""] * len(row)
    bg = ZONE_COLORS[zone]
    return [f"background-color: {bg}; color: {text_color_for(bg)}"] * len(row)


def style_standings(table: pd.DataFrame, sizes: Optional[Dict[str, int]] = None) -> Styler:
    """
    Styled league table: zone colors per row (title, continental places,
    relegation), bold points and signed goal difference.
    """
    n = len(table)
    return (
        table.style
        .apply(_zone_row_styles, axis=1, n_teams=n, sizes=sizes)
        .format({"GD": "{:+d}"})
        .set_properties(subset=["Pts"], **{"font-weight": "bold"})
        .hide(axis="index")
    )


@dataclass(frozen=True)
class ListingsReport:
    balance: Dict[str, pd.DataFrame]
    imbalance: Dict[str, float]
    outliers: pd.DataFrame
    missing: pd.DataFrame


def build_listings_report(df: pd.DataFrame, k: float = OUTLIER_K) -> ListingsReport:
    cats = [c for c in LISTING_CATEGORY_COLUMNS if c in df.columns]
    nums = [c for c in LISTING_NUMERIC_COLUMNS if c in df.columns]

    balance = {c: category_balance(df, c) for c in cats}
    imbalance = {c: imbalance_ratio(b) for c, b in balance.items()}
    for col, ratio in imbalance.items():
        if ratio > 10:
            logger.warning("Column %r is heavily imbalanced (ratio %.1f)", col, ratio)

    return ListingsReport(
        balance=balance,
        imbalance=imbalance,
        outliers=outlier_report(df, nums, k=k),
        missing=missing_summary(df),
    )
