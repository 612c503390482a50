import logging
import streamlit as st
import matplotlib.pyplot as plt

from controllers.data_controller import load_listings
from controllers.stats_controller import build_listings_report
from common.constants import listings_path, outlier_k
from common.quality import flag_iqr_outliers, iqr_bounds
from common.ui import sidebar_header
from common.plots import plot_category_balance, plot_outlier_box, plot_flagged_scatter

SMALL_FIGSIZE = (5.2, 2.2)

st.set_page_config(page_title="Car listings checks", layout="wide")
logger = logging.getLogger(__name__)


def main():
    sidebar_header(show_custom_nav=True)

    try:
        df = load_listings()
    except FileNotFoundError as exc:
        logger.error("Missing listings dataset: %s", exc)
        st.error(f"Listings dataset not found: {exc.filename or listings_path()}")
        st.stop()

    k = outlier_k()
    report = build_listings_report(df, k=k)

    st.header("Car listings — balance & outliers")
    st.caption(f"**Listings:** {len(df)}  |  **Columns:** {df.shape[1]}  |  **IQR fence k:** {k:g}")

    # ------------------------------------------------------------
    # Missing values
    # ------------------------------------------------------------
    st.subheader("Missing values")
    st.dataframe(report.missing, use_container_width=True, hide_index=True)

    # ------------------------------------------------------------
    # Category balance
    # ------------------------------------------------------------
    st.subheader("Category balance")
    for col, balance in report.balance.items():
        st.markdown(f"**{col}** — imbalance ratio {report.imbalance[col]:.1f}")
        fig, ax = plt.subplots(figsize=SMALL_FIGSIZE)
        plot_category_balance(balance, ax=ax)
        st.pyplot(fig, use_container_width=False)

    # ------------------------------------------------------------
    # Outliers (IQR)
    # ------------------------------------------------------------
    st.subheader("Outliers (IQR)")
    if report.outliers.empty:
        st.info("Not enough numeric values to check for outliers.")
        return
    st.dataframe(report.outliers, use_container_width=True, hide_index=True)

    for col in report.outliers["column"]:
        fig, ax = plt.subplots(figsize=SMALL_FIGSIZE)
        plot_outlier_box(df[col], iqr_bounds(df[col], k=k), ax=ax, title=col)
        st.pyplot(fig, use_container_width=False)

    if {"price", "mileage"} <= set(df.columns):
        st.subheader("Price vs mileage")
        flagged = flag_iqr_outliers(df, "price", k=k)
        fig, ax = plt.subplots(figsize=SMALL_FIGSIZE)
        plot_flagged_scatter(flagged, "mileage", "price", "price_outlier", ax=ax)
        st.pyplot(fig, use_container_width=False)


if __name__ == "__main__":
    main()
