import pytest

from common.colors import ZONE_COLORS, team_colors_map, text_color_for, zone_for_rank
from controllers.stats_controller import build_league_report, build_listings_report, style_standings

SIZES = {"title": 1, "continental": 4, "relegation": 3}


@pytest.mark.parametrize("rank,zone", [
    (1, "title"), (2, "continental"), (4, "continental"), (5, None), (17, None), (18, "relegation"), (20, "relegation"),
])
def test_zone_for_rank_full_league(rank, zone):
    assert zone_for_rank(rank, 20, SIZES) == zone


def test_zones_never_overlap_in_small_league():
    assert [zone_for_rank(r, 5, SIZES) for r in range(1, 6)] == [
        "title", "continental", "continental", "continental", "relegation",
    ]


def test_text_color_for():
    assert text_color_for("#FFFFFF") == "#000000"
    assert text_color_for("#000000") == "#FFFFFF"


def test_team_colors_map_is_deterministic():
    codes = ["ARS", "AVL", "CHE", "LIV"]

    first, second = team_colors_map(codes), team_colors_map(codes)

    assert first == second
    assert set(first) == set(codes)
    assert all(c.startswith("#") and len(c) == 7 for c in first.values())


def test_build_league_report(sample_grid, sample_meta):
    report = build_league_report(sample_grid, sample_meta)

    assert len(report.rows) == 6
    assert len(report.matches) == 29
    assert report.table["Pos"].tolist() == [1, 2, 3, 4, 5, 6]
    assert len(report.split) == 6
    assert report.pivot.shape == (6, 6)
    assert report.split["Total"].sum() == report.table["Pts"].sum()


def test_style_standings_renders_zones(sample_grid, sample_meta):
    report = build_league_report(sample_grid, sample_meta)

    html = style_standings(report.table, sizes=SIZES).to_html()

    assert "Liverpool" in html
    assert ZONE_COLORS["title"].lower() in html.lower()
    assert ZONE_COLORS["relegation"].lower() in html.lower()
    leader_gd = int(report.table["GD"].iloc[0])
    assert f"{leader_gd:+d}" in html


def test_build_listings_report(sample_listings):
    report = build_listings_report(sample_listings)

    assert set(report.balance) == {"make", "fuel_type", "transmission", "body_type"}
    assert report.imbalance["transmission"] == pytest.approx(11 / 11)
    price = report.outliers.set_index("column").loc["price"]
    assert price["outlier_count"] == 3
    assert report.missing.iloc[0]["column"] == "engine_size"


def test_league_report_split_covers_every_team(grid_factory):
    grid = grid_factory("ABC", {("A", "B"): "1-0"})
    meta = {"A": "Alpha", "B": "Beta", "C": "Gamma"}

    report = build_league_report(grid, meta)

    assert len(report.split) == len(report.table) == 3
    assert set(report.split["Team"]) == set(report.table["Team"])
