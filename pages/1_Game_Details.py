import streamlit as st

from common.constants import APP_ICON
from common.ui import render_game_detail, sidebar_header
from controllers.auth_controller import get_auth, logout_button
from controllers.data_controller import find_game

st.set_page_config(page_title="Game Details", page_icon=APP_ICON, layout="wide")


def _ensure_auth():
    if not st.session_state.get("authenticated"):
        try:
            st.switch_page("main.py")
        except Exception:
            st.info("Please sign in on **Home** first.")
            st.stop()


def main():
    _ensure_auth()
    sidebar_header(get_auth().current_profile)
    logout_button()

    game = find_game(st.session_state.get("selected_game_id"))
    if game is None:
        st.info("Go to **Home** to select a game first.")
        st.stop()

    st.header("Game Details")
    render_game_detail(game)


if __name__ == "__main__":
    main()
