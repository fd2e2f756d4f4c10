# common/ui.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import streamlit as st

from models.game_model import Coordinate, GameRecord
from models.user_model import UserProfile
from .colors import is_light_color, league_color, lighten_or_darken
from .config import MAP_ZOOM
from .constants import APP_ICON
from .maps import DETAIL_ZOOM, build_game_deck
from .utils import format_game_date, games_to_frame, selectbox_with_placeholder, unique_labels

# Project root = .../allhoops
APP_ROOT = Path(__file__).resolve().parents[1]
DETAILS_PAGE = "pages/1_Game_Details.py"


def _link_if_exists(rel_path: str, label: str, icon: str = "📄"):
    """Safely add a page link if the target file exists."""
    target = (APP_ROOT / rel_path)
    if target.exists():
        # Streamlit expects an app-relative path with forward slashes
        st.sidebar.page_link(rel_path.replace("\\", "/"), label=label, icon=icon)


def sidebar_header(profile: Optional[UserProfile]):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown("**Signed in as:** " + (profile.username if profile else "—"))
        st.divider()
        st.markdown("#### Pages")
    _link_if_exists("main.py", label="Home", icon="🏠")
    _link_if_exists(DETAILS_PAGE, label="Game Details", icon=APP_ICON)


def _swatch(color: str) -> str:
    border = lighten_or_darken(color, -0.35) if is_light_color(color) else color
    return (f'<span style="display:inline-block;width:12px;height:12px;vertical-align:middle;'
            f'background:{color};border:1px solid {border};margin-right:6px"></span>')


def render_league_legend(games: List[GameRecord]):
    leagues = sorted({g.league for g in games})
    html = " &nbsp; ".join(f"{_swatch(league_color(lg))}{lg}" for lg in leagues)
    st.markdown(html, unsafe_allow_html=True)


def render_game_list(title: str, games: List[GameRecord], key: str, center: Optional[Coordinate] = None):
    """Table of games plus a select box that opens the details page.

    With a `center`, a toggle shows the listed games on a map as well.
    """
    st.subheader(title)
    if not games:
        st.info("No games match your search.")
        return

    if center is not None and st.toggle("Show results on map", key=f"{key}_map"):
        render_game_map(games, center, title="Search Results")

    df = games_to_frame(games)
    st.dataframe(
        df[["Matchup", "League", "Date", "Time", "Venue", "Tickets"]],
        use_container_width=True,
        hide_index=True,
    )

    label_to_id = unique_labels(games)
    labels = list(label_to_id.keys())
    ids = list(label_to_id.values())

    # --- Restore previous selection if it is still in this list ---
    prev_id = st.session_state.get("selected_game_id")
    default_index = ids.index(prev_id) if prev_id in ids else None

    selected = selectbox_with_placeholder("Choose a game to see its details:", labels,
                                          key=f"{key}_select", default_index=default_index)
    if selected and st.button("Open details", key=f"{key}_open"):
        st.session_state["selected_game_id"] = label_to_id[selected]
        try:
            st.switch_page(DETAILS_PAGE)
        except Exception:
            st.info("Open **Game Details** from the sidebar.")


def render_game_map(games: List[GameRecord], center: Coordinate, title: str = "Game Locations"):
    st.subheader(title)
    if not games:
        st.info("No games to show on the map.")
        return
    st.caption(f"Centered near {center.latitude:.4f}, {center.longitude:.4f}")
    st.pydeck_chart(build_game_deck(games, center, MAP_ZOOM), use_container_width=True)
    render_league_legend(games)


def _info_row(icon: str, title: str, value: str):
    st.markdown(f"{icon} **{title}:** {value}")


def render_game_detail(game: GameRecord):
    c1, c2, c3 = st.columns([5, 1, 5])
    with c1:
        st.markdown(f"### {game.away_team}")
        st.caption("Away")
    with c2:
        st.markdown("### @")
    with c3:
        st.markdown(f"### {game.home_team}")
        st.caption("Home")
    st.markdown(f"**{game.league}**")

    st.subheader("Game Information")
    _info_row("📅", "Date", format_game_date(game))
    _info_row("🕒", "Time", game.time)
    _info_row("📍", "Venue", game.venue)
    _info_row("🗺️", "Address", game.address)
    if game.ticket_price is not None:
        _info_row("🎟️", "Tickets", game.ticket_price)

    st.subheader("About This Game")
    st.write(game.description)

    st.subheader("Location")
    st.pydeck_chart(build_game_deck([game], game.coordinate, DETAIL_ZOOM), use_container_width=True)


def render_profile(profile: Optional[UserProfile]):
    st.subheader("Profile")
    st.markdown(f"### 👤 {profile.username if profile else 'Welcome!'}")
    if profile and profile.email:
        st.markdown(f"**Email:** {profile.email}")
    else:
        st.markdown("**User not found or is Guest**")
    st.caption(f"Simulated User ID: {profile.id if profile else 'N/A'}")
