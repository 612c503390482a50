import logging
import streamlit as st
import matplotlib.pyplot as plt

from controllers.data_controller import load_league
from controllers.stats_controller import build_league_report
from common.colors import team_colors_map
from common.errors import StandingsError
from common.ui import sidebar_header
from common.plots import plot_points_bar, plot_goals_grouped, plot_home_away, plot_results_heatmap

# ------------------------------------------------------------
# Page setup & consistent sidebar
# ------------------------------------------------------------
SMALL_FIGSIZE = (5.2, 2.6)  # <- compact size for all charts

st.set_page_config(page_title="League charts", layout="wide")
logger = logging.getLogger(__name__)


def _get_report():
    report = st.session_state.get("league_report")
    if report is not None:
        return report
    try:
        grid, meta = load_league()
        return build_league_report(grid, meta)
    except (FileNotFoundError, StandingsError) as exc:
        logger.error("Cannot build standings: %s", exc)
        st.error(str(exc))
        st.stop()


def main():
    sidebar_header(show_custom_nav=True)
    report = _get_report()

    st.header("League charts")
    if report.table.empty:
        st.info("No teams on the results grid.")
        st.stop()

    table = report.table
    colors_map = team_colors_map(table["Team"])

    st.subheader("Points")
    fig1, ax1 = plt.subplots(figsize=(SMALL_FIGSIZE[0], max(2.0, 0.22 * len(table))))
    plot_points_bar(table, colors_map=colors_map, ax=ax1)
    st.pyplot(fig1, use_container_width=False)

    st.subheader("Goals scored vs conceded")
    fig2, ax2 = plt.subplots(figsize=SMALL_FIGSIZE)
    plot_goals_grouped(table, ax=ax2)
    st.pyplot(fig2, use_container_width=False)

    st.subheader("Points at home and away")
    fig3, ax3 = plt.subplots(figsize=SMALL_FIGSIZE)
    plot_home_away(report.split, ax=ax3)
    st.pyplot(fig3, use_container_width=False)

    st.subheader("Results grid (home points)")
    st.caption("3 = home win, 1 = draw, 0 = away win; blank cells were not played.")
    fig4, ax4 = plt.subplots(figsize=(4.2, 4.2))
    plot_results_heatmap(report.pivot, ax=ax4)
    st.pyplot(fig4, use_container_width=False)


if __name__ == "__main__":
    main()
