# common/plots.py
from __future__ import annotations
from typing import Optional, Dict, Tuple

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from common.colors import is_light_color

DEFAULT_FIGSIZE = (6.6, 2.6)  # more compact; tweak if you want even smaller

def _new_ax(ax=None, figsize: Tuple[float, float] = DEFAULT_FIGSIZE):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax

def _edge_kw_for(hexs: str) -> dict:
    """Return edgecolor/linewidth kwargs for bars when color is very light."""
    return {"edgecolor": "black", "linewidth": 1.0} if is_light_color(hexs) else {}


# --- Points per team (horizontal bars, leader on top) ----------------
def plot_points_bar(table: pd.DataFrame,
                    colors_map: Optional[Dict[str, str]] = None,
                    ax: Optional[plt.Axes] = None,
                    title: str = "") -> plt.Axes:
    """`table` is the display frame from `standings_to_frame` (Team, Pts, ...)."""
    fig, ax = _new_ax(ax)
    colors = colors_map or {}

    bar_colors = [colors.get(t, "#888888") for t in table["Team"]]
    bars = ax.barh(table["Team"], table["Pts"], color=bar_colors)
    for patch, c in zip(bars, bar_colors):
        if is_light_color(c):
            patch.set_edgecolor("black"); patch.set_linewidth(1.0)

    ax.invert_yaxis()
    ax.set_xlabel("Points", fontsize=6)
    ax.set_title(title)
    ax.tick_params(axis="both", labelsize=6)

    for i, v in enumerate(table["Pts"]):
        ax.text(v + 0.1, i, f"{v:.0f}", va="center", fontsize=6)

    return ax


# --- Goals for / against per team (grouped bars) ----------------
def plot_goals_grouped(table: pd.DataFrame,
                       ax: Optional[plt.Axes] = None,
                       color_for: str = "#2A9D8F",
                       color_against: str = "#E76F51",
                       title: str = "") -> plt.Axes:
    fig, ax = _new_ax(ax)

    x = np.arange(len(table), dtype=float)
    w = 0.42
    ax.bar(x - w/2, table["GF"], width=w, color=color_for, align="center", label="Scored", **_edge_kw_for(color_for))
    ax.bar(x + w/2, table["GA"], width=w, color=color_against, align="center", label="Conceded", **_edge_kw_for(color_against))

    ax.set_xticks(x, table["Team"], rotation=45, ha="right")
    ax.set_ylabel("Goals", fontsize=6)
    ax.set_title(title)
    ax.tick_params(axis="both", labelsize=6)
    ax.legend(fontsize=6, frameon=False)

    return ax


# --- Home vs away points (stacked bars) ----------------
def plot_home_away(split: pd.DataFrame,
                   ax: Optional[plt.Axes] = None,
                   color_home: str = "#264653",
                   color_away: str = "#E9C46A",
                   title: str = "") -> plt.Axes:
    """`split` comes from `home_away_split` (Team, Home, Away, Total)."""
    fig, ax = _new_ax(ax)

    x = np.arange(len(split), dtype=float)
    ax.bar(x, split["Home"], color=color_home, label="Home", **_edge_kw_for(color_home))
    ax.bar(x, split["Away"], bottom=split["Home"], color=color_away, label="Away", **_edge_kw_for(color_away))

    ax.set_xticks(x, split["Team"], rotation=45, ha="right")
    ax.set_ylabel("Points", fontsize=6)
    ax.set_title(title)
    ax.tick_params(axis="both", labelsize=6)
    ax.legend(fontsize=6, frameon=False)

    return ax


# --- Results heatmap (home points per fixture) ----------------
def plot_results_heatmap(pivot: pd.DataFrame,
                         ax: Optional[plt.Axes] = None,
                         cmap: str = "RdYlGn",
                         title: str = "") -> plt.Axes:
    """`pivot` comes from `results_pivot`; NaN cells (not played) stay blank."""
    fig, ax = _new_ax(ax, figsize=(4.2, 4.2))

    data = np.ma.masked_invalid(pivot.to_numpy(dtype=float))
    ax.imshow(data, cmap=cmap, vmin=0, vmax=3)

    ax.set_xticks(np.arange(pivot.shape[1]), pivot.columns, rotation=90)
    ax.set_yticks(np.arange(pivot.shape[0]), pivot.index)
    ax.set_xlabel("Away", fontsize=6); ax.set_ylabel("Home", fontsize=6)
    ax.set_title(title)
    ax.tick_params(axis="both", labelsize=6)

    for (i, j), v in np.ndenumerate(pivot.to_numpy(dtype=float)):
        if not np.isnan(v):
            ax.text(j, i, f"{v:.0f}", ha="center", va="center", fontsize=5)

    return ax


# --- Category balance (bars with share labels) ----------------
def plot_category_balance(balance: pd.DataFrame,
                          ax: Optional[plt.Axes] = None,
                          color: str = "#457B9D",
                          title: str = "") -> plt.Axes:
    """`balance` comes from `category_balance` (value, count, share)."""
    fig, ax = _new_ax(ax)

    x = np.arange(len(balance), dtype=float)
    ax.bar(x, balance["count"], color=color, **_edge_kw_for(color))
    ax.set_xticks(x, balance["value"], rotation=45, ha="right")
    ax.set_ylabel("Listings", fontsize=6)
    ax.set_title(title)
    ax.tick_params(axis="both", labelsize=6)

    for xi, (cnt, share) in enumerate(zip(balance["count"], balance["share"])):
        ax.annotate(f"{share:.0%}", xy=(xi, cnt), xytext=(0, 2), textcoords="offset points",
                    ha="center", va="bottom", fontsize=5)

    return ax


# --- Outliers (box plot with the IQR fences) ----------------
def plot_outlier_box(series: pd.Series,
                     bounds: Tuple[float, float],
                     ax: Optional[plt.Axes] = None,
                     color: str = "#A8DADC",
                     title: str = "") -> plt.Axes:
    fig, ax = _new_ax(ax)

    vals = pd.to_numeric(series, errors="coerce").dropna().to_numpy()
    box = ax.boxplot(vals, patch_artist=True, widths=0.5,
                     flierprops={"marker": "o", "markersize": 3, "markerfacecolor": "#E63946"})
    for patch in box["boxes"]:
        patch.set_facecolor(color)

    lo, hi = bounds
    for b in (lo, hi):
        if not np.isnan(b):
            ax.axhline(b, linestyle="--", linewidth=1, color="gray")

    ax.set_xticks([])
    ax.set_ylabel(str(series.name or ""), fontsize=6)
    ax.set_title(title)
    ax.tick_params(axis="both", labelsize=6)

    return ax


# --- Scatter with flagged outliers ----------------
def plot_flagged_scatter(df: pd.DataFrame,
                         x: str,
                         y: str,
                         flag_col: str,
                         ax: Optional[plt.Axes] = None,
                         color: str = "#457B9D",
                         flag_color: str = "#E63946",
                         title: str = "") -> plt.Axes:
    fig, ax = _new_ax(ax)

    flagged = df[flag_col].astype(bool)
    ax.scatter(df.loc[~flagged, x], df.loc[~flagged, y], s=8, color=color, label="Typical")
    ax.scatter(df.loc[flagged, x], df.loc[flagged, y], s=12, color=flag_color, label="Outlier")

    ax.set_xlabel(x, fontsize=6); ax.set_ylabel(y, fontsize=6)
    ax.set_title(title)
    ax.tick_params(axis="both", labelsize=6)
    ax.legend(fontsize=6, frameon=False)

    return ax
