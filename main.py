"""
Main application entry for the AllHoops Streamlit app.

This module defines the top-level page users see when they open the app.
It handles:
    - application configuration (`st.set_page_config`) and logging setup,
    - the simulated sign-in gate (delegated to `controllers.auth_controller`),
    - the shared search box feeding the "Games" and "Tournaments" lists,
    - the map of all games, centered on the user's location when the URL
        carries `?lat=..&lon=..`, otherwise on the default region,
    - the profile tab with sign-out.

Selecting a game in either list stores its id in `st.session_state` and opens
`pages/1_Game_Details.py`.
"""

# Import libraries
import logging
import streamlit as st

from common.config import LOG_LEVEL
from common.constants import APP_ICON, APP_NAME, SEARCH_PLACEHOLDER
from common.location import parse_user_location, resolve_map_center
from common.ui import render_game_list, render_game_map, render_profile, sidebar_header
from common.utils import safe_rerun
from controllers.auth_controller import get_auth, login_page, logout_button
from controllers.data_controller import load_catalog, search_games, search_tournaments

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(page_title=f"{APP_NAME} — Home", page_icon=APP_ICON, layout="wide")


def main():
    profile = login_page()
    sidebar_header(profile)
    logout_button()

    st.title(f"{APP_ICON} Local Basketball Games")

    # One search box drives both lists
    search_text = st.text_input("Search", placeholder=SEARCH_PLACEHOLDER,
                                key="search_text", label_visibility="collapsed")

    user_location = parse_user_location(st.query_params)
    if user_location is None:
        logger.debug("No user location available, using default map center")
    center = resolve_map_center(user_location)

    tab_games, tab_map, tab_tournaments, tab_profile = st.tabs(
        ["📋 Games", "🗺️ Map", "🏆 Tournaments", "👤 Profile"]
    )

    with tab_games:
        render_game_list("Local Basketball Games", search_games(search_text), key="games", center=center)

    with tab_map:
        render_game_map(list(load_catalog()), center)

    with tab_tournaments:
        render_game_list("Local Basketball Tournaments", search_tournaments(search_text),
                         key="tournaments", center=center)

    with tab_profile:
        render_profile(profile)
        if st.button("Sign Out", key="profile_sign_out", type="primary"):
            get_auth().sign_out()
            safe_rerun()


if __name__ == "__main__":
    main()
