"""
Main application entry for the League & Listings Streamlit report.

This module defines the top-level Streamlit page that users see when they
open the report. It handles:
    - application configuration (`st.set_page_config`),
    - environment variable loading via `python-dotenv` and logging setup,
    - loading the results grid and team names (via
        `controllers.data_controller`),
    - building the ranked league table and rendering it as a styled table.

This file only composes logic from helper modules; the standings derivation
lives in `common.metrics` and the table styling in
`controllers.stats_controller`.

Notes:
    - Bad input (an unreadable score, a team code without a name) stops the
        page with an error message instead of showing a partial table.
    - Ties on points, goal difference and goals scored keep the order in
        which the teams appear on the results grid.
"""

# Import libraries
import logging
import streamlit as st
from dotenv import load_dotenv

from controllers.data_controller import load_league
from controllers.stats_controller import build_league_report, style_standings
from common.constants import grid_path, log_level
from common.errors import StandingsError
from common.ui import sidebar_header, zone_legend

# Configure Streamlit page and load environment variables from `.env`.
st.set_page_config(page_title="League report — Table", layout="wide")
load_dotenv(override=False)
logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def main():
    sidebar_header(show_custom_nav=True)

    st.title("🏆 League table")
    st.caption("Derived from the home/away results grid: 3 points for a win, 1 for a draw.")

    with st.spinner("Loading results..."):
        try:
            grid, meta = load_league()
        except FileNotFoundError as exc:
            logger.error("Missing league dataset: %s", exc)
            st.error(f"League dataset not found: {exc.filename or grid_path()}")
            st.stop()

    try:
        report = build_league_report(grid, meta)
    except StandingsError as exc:
        logger.error("Cannot build standings: %s", exc)
        st.error(str(exc))
        st.stop()

    if report.table.empty:
        st.warning("The results grid is empty.")
        return

    st.caption(f"**Teams:** {len(report.table)}  |  **Matches played:** {len(report.matches)}")
    st.dataframe(style_standings(report.table), use_container_width=True)
    zone_legend()

    # Keep the report for the chart page
    st.session_state["league_report"] = report


if __name__ == "__main__":
    main()
