# common/ui.py
from __future__ import annotations
from typing import Dict

import streamlit as st

from common.colors import ZONE_COLORS, ZONE_LABELS, is_light_color


def sidebar_header(show_custom_nav: bool = True):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown("**League & Listings Report**")
        if show_custom_nav:
            st.divider()
            st.markdown("#### Pages")
            st.page_link("main.py", label="League table", icon="🏆")
            st.page_link("pages/1_Standings.py", label="League charts", icon="📊")
            st.page_link("pages/2_Listings.py", label="Car listings checks", icon="🚗")


def zone_legend(labels: Dict[str, str] = ZONE_LABELS):
    """Render one colored swatch per table zone just under the table."""
    def sw(c: str) -> str:
        border = "#000" if is_light_color(c) else c
        return (f'<span style="display:inline-block;width:14px;height:14px;vertical-align:middle;'
                f'background:{c};border:1px solid {border};margin-right:6px"></span>')

    html = " &nbsp;&nbsp; ".join(f"{sw(ZONE_COLORS[z])} {label}" for z, label in labels.items())
    st.markdown(html, unsafe_allow_html=True)
