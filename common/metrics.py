"""
League table derivation and the small table reshapes built on top of it.

This module provides:
    - score parsing for results-grid cells ("2-1", "2 – 1"),
    - the wide-to-long expansion of the results grid into `Match` records,
    - per-team accumulation of points and goals, split into private partial
        accumulators that are merged by summing, and
    - the ranked standings plus DataFrame helpers used by tables and charts.

Function notes:
    - `compute_standings` is pure: it never mutates the grid or metadata and
        raises on the first bad cell; no partial table is returned.
    - Sorting uses the (points, goal difference, goals for) key only. Python's
        sort is stable, so full ties keep the order in which the teams first
        appear on the grid (rows first, then any column-only codes).
"""

#Import libraries
from __future__ import annotations
import logging
import re
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple
import pandas as pd

from common.constants import POINTS_DRAW, POINTS_LOSS, POINTS_WIN, SCORE_DELIMITER, STANDINGS_COLUMNS
from common.errors import ScoreParseError, UnknownTeamCode
from models.match_model import Match, StandingsRow, TeamRecord

logger = logging.getLogger(__name__)

SCORE_RE = re.compile(rf"^(\d+)\s*{re.escape(SCORE_DELIMITER)}\s*(\d+)$")
MATCH_COLUMNS = ["home_code", "away_code", "home_goals", "away_goals", "home_points", "away_points"]


# ---------- Small helpers ----------
def is_empty_cell(val: Any) -> bool:
    """True for cells that hold no result (NaN, None or blank text)."""
    if val is None:
        return True
    if isinstance(val, str):
        return val.strip() == ""
    try:
        return bool(pd.isna(val))
    except (TypeError, ValueError):
        return False


def parse_score(val: Any, home_code: str, away_code: str) -> Tuple[int, int]:
    """
    Parse a score cell into (home_goals, away_goals).
    Typographic dashes are normalised to the plain delimiter first.
    """
    s = str(val).strip()
    s = s.replace("–", SCORE_DELIMITER).replace("—", SCORE_DELIMITER).replace("−", SCORE_DELIMITER)
    m = SCORE_RE.match(s)
    if not m:
        raise ScoreParseError(home_code, away_code, val)
    return int(m.group(1)), int(m.group(2))


def grid_codes(grid: pd.DataFrame) -> List[str]:
    """Team codes in first-appearance order: row labels, then unseen column labels."""
    codes: List[str] = []
    for label in list(grid.index) + list(grid.columns):
        code = str(label).strip()
        if code not in codes:
            codes.append(code)
    return codes


def match_points(match: Match) -> Tuple[int, int]:
    """Return the (home, away) points awarded for a single match."""
    if match.home_goals > match.away_goals:
        return POINTS_WIN, POINTS_LOSS
    if match.home_goals == match.away_goals:
        return POINTS_DRAW, POINTS_DRAW
    return POINTS_LOSS, POINTS_WIN


# ---------- Grid -> matches -> records ----------
def expand_grid(grid: pd.DataFrame) -> List[Match]:
    """
    Enumerate the results grid into played matches.
    Self-pairings and empty cells are skipped; any other unreadable cell
    raises `ScoreParseError` with its coordinates.
    """
    matches: List[Match] = []
    for home_label, row in grid.iterrows():
        home = str(home_label).strip()
        for away_label, cell in row.items():
            away = str(away_label).strip()
            if home == away or is_empty_cell(cell):
                continue
            home_goals, away_goals = parse_score(cell, home, away)
            matches.append(Match(home, away, home_goals, away_goals))
    logger.debug("Expanded grid %s into %d matches", grid.shape, len(matches))
    return matches


def _accumulate_partition(matches: Iterable[Match]) -> Dict[str, TeamRecord]:
    """Private accumulator for one chunk of matches."""
    acc: Dict[str, TeamRecord] = {}
    for m in matches:
        home_pts, away_pts = match_points(m)
        home = TeamRecord(m.home_code, home_pts, m.home_goals, m.away_goals)
        away = TeamRecord(m.away_code, away_pts, m.away_goals, m.home_goals)
        acc[m.home_code] = acc.get(m.home_code, TeamRecord(m.home_code)) + home
        acc[m.away_code] = acc.get(m.away_code, TeamRecord(m.away_code)) + away
    return acc


def merge_records(partials: Iterable[Mapping[str, TeamRecord]]) -> Dict[str, TeamRecord]:
    """Merge partial accumulators by summing the numeric fields per team."""
    merged: Dict[str, TeamRecord] = {}
    for part in partials:
        for code, rec in part.items():
            merged[code] = merged.get(code, TeamRecord(code)) + rec
    return merged


def accumulate_records(matches: Sequence[Match], partitions: int = 1) -> Dict[str, TeamRecord]:
    """
    Sum points and goals per team over home and away appearances.
    Matches are dealt round-robin into `partitions` chunks, each chunk is
    accumulated on its own and the partials are merged; the result does not
    depend on the partition count or on match order.
    """
    if partitions < 1:
        raise ValueError(f"partitions must be >= 1, got {partitions}")
    matches = list(matches)
    chunks = [matches[i::partitions] for i in range(partitions)]
    return merge_records(_accumulate_partition(c) for c in chunks)


def rank_records(records: Sequence[TeamRecord], meta: Mapping[str, str]) -> List[StandingsRow]:
    """Join names, sort by (points, goal_diff, goals_for) and number the rows."""
    named = []
    for rec in records:
        if rec.code not in meta:
            logger.error("Team code %r missing from team metadata", rec.code)
            raise UnknownTeamCode(rec.code)
        named.append((rec, str(meta[rec.code])))

    ordered = sorted(named, key=lambda pair: (pair[0].points, pair[0].goal_diff, pair[0].goals_for), reverse=True)
    return [
        StandingsRow(
            rank=pos,
            code=rec.code,
            display_name=name,
            points=rec.points,
            goal_diff=rec.goal_diff,
            goals_for=rec.goals_for,
            goals_against=rec.goals_against,
        )
        for pos, (rec, name) in enumerate(ordered, start=1)
    ]


def compute_standings(grid: pd.DataFrame, meta: Mapping[str, str], partitions: int = 1) -> List[StandingsRow]:
    """
    Build the ranked league table from a results grid and team names.

    Every code labelling the grid gets a row, so teams without a played
    match appear with zero totals. An empty grid returns an empty list.
    """
    codes = grid_codes(grid)
    if not codes:
        return []

    matches = expand_grid(grid)
    totals = accumulate_records(matches, partitions=partitions)
    records = [totals.get(code, TeamRecord(code)) for code in codes]

    rows = rank_records(records, meta)
    logger.info("Built standings for %d teams from %d matches", len(rows), len(matches))
    return rows


# ---------- Data prep for tables and charts ----------
def matches_to_frame(matches: Sequence[Match]) -> pd.DataFrame:
    """Long-format matches with the points each side earned."""
    rows = []
    for m in matches:
        home_pts, away_pts = match_points(m)
        rows.append({**asdict(m), "home_points": home_pts, "away_points": away_pts})
    return pd.DataFrame(rows, columns=MATCH_COLUMNS)


def standings_to_frame(rows: Sequence[StandingsRow]) -> pd.DataFrame:
    """Standings with display column names (Pos, Team, Pts, GD, GF, GA)."""
    df = pd.DataFrame([asdict(r) for r in rows], columns=["code", *STANDINGS_COLUMNS.keys()])
    return df[list(STANDINGS_COLUMNS.keys())].rename(columns=STANDINGS_COLUMNS)


def home_away_split(matches: Sequence[Match], meta: Mapping[str, str],
                    codes: Sequence[str] | None = None) -> pd.DataFrame:
    """
    Points earned at home and away per team, with columns: code, Team, Home, Away, Total.

    `codes` lists the teams to report (pass `grid_codes(grid)` so teams without
    a played match get a zero row); by default the teams seen in `matches`.
    Sorted by total points, stable on the order of `codes`.
    """
    if codes is None:
        codes = list(dict.fromkeys(c for m in matches for c in (m.home_code, m.away_code)))
    codes = list(codes)

    df = matches_to_frame(matches)
    if df.empty:
        split = pd.DataFrame(0, index=codes, columns=["Home", "Away"])
    else:
        # Stack both sides into one (code, venue, points) table, then pivot
        # venues back into columns.
        long = pd.concat(
            [
                df[["home_code", "home_points"]].set_axis(["code", "points"], axis=1).assign(venue="Home"),
                df[["away_code", "away_points"]].set_axis(["code", "points"], axis=1).assign(venue="Away"),
            ],
            ignore_index=True,
        )
        split = long.pivot_table(index="code", columns="venue", values="points", aggfunc="sum", fill_value=0)
    split = split.reindex(index=codes, columns=["Home", "Away"], fill_value=0).rename_axis("code").reset_index()
    split.columns.name = None

    for code in split["code"]:
        if code not in meta:
            raise UnknownTeamCode(code)
    split.insert(1, "Team", split["code"].map(lambda c: str(meta[c])))
    split["Total"] = split["Home"] + split["Away"]
    return split.sort_values("Total", ascending=False, kind="mergesort").reset_index(drop=True)


def results_pivot(matches: Sequence[Match], codes: Sequence[str] | None = None) -> pd.DataFrame:
    """Home points per (home code x away code); NaN where no match was played."""
    df = matches_to_frame(matches)
    order = list(codes) if codes is not None else sorted(set(df["home_code"]) | set(df["away_code"]))
    if df.empty:
        return pd.DataFrame(index=order, columns=order, dtype=float)
    pv = df.pivot_table(index="home_code", columns="away_code", values="home_points", aggfunc="sum")
    pv = pv.reindex(index=order, columns=order).astype(float)
    pv.index.name, pv.columns.name = None, None
    return pv
