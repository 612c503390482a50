import matplotlib.pyplot as plt
import pytest

from common.colors import team_colors_map
from common.plots import (
    plot_category_balance,
    plot_flagged_scatter,
    plot_goals_grouped,
    plot_home_away,
    plot_outlier_box,
    plot_points_bar,
    plot_results_heatmap,
)
from common.quality import category_balance, flag_iqr_outliers, iqr_bounds
from controllers.stats_controller import build_league_report


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def report(sample_grid, sample_meta):
    return build_league_report(sample_grid, sample_meta)


def test_plot_points_bar(report):
    ax = plot_points_bar(report.table, colors_map=team_colors_map(report.table["Team"]))

    assert len(ax.patches) == len(report.table)
    assert ax.yaxis_inverted()


def test_plot_goals_grouped(report):
    ax = plot_goals_grouped(report.table)
    assert len(ax.patches) == 2 * len(report.table)


def test_plot_home_away(report):
    ax = plot_home_away(report.split)
    assert len(ax.patches) == 2 * len(report.split)


def test_plot_results_heatmap(report):
    ax = plot_results_heatmap(report.pivot)
    # one annotation per played match
    assert len(ax.texts) == len(report.matches)


def test_plot_category_balance(sample_listings):
    balance = category_balance(sample_listings, "fuel_type")

    ax = plot_category_balance(balance)

    assert len(ax.patches) == len(balance)


def test_plot_outlier_box(sample_listings):
    price = sample_listings["price"]
    ax = plot_outlier_box(price, iqr_bounds(price))
    assert len(ax.lines) > 0


def test_plot_flagged_scatter(sample_listings):
    flagged = flag_iqr_outliers(sample_listings, "price")
    ax = plot_flagged_scatter(flagged, "mileage", "price", "price_outlier")
    assert len(ax.collections) == 2
