"""
Common helpers shared by the pages.

This module holds Streamlit conveniences (`safe_rerun`,
`selectbox_with_placeholder`) and the conversions from `GameRecord` objects to
what the widgets want: a `pandas.DataFrame` for tables, and unique
human-readable labels for select boxes.

Dates are shown as e.g. "Oct 21, 2026", the abbreviated style used on the
game rows.
"""

# Import libraries
from __future__ import annotations
from typing import Dict, Iterable, List, Optional
import pandas as pd
import streamlit as st

from models.game_model import GameRecord

FRAME_COLUMNS = ["GameId", "Matchup", "League", "Date", "Time", "Venue", "Tickets"]


def safe_rerun() -> None:
    if hasattr(st, "rerun"): st.rerun()
    elif hasattr(st, "experimental_rerun"): st.experimental_rerun()
    else: st.stop()


def format_game_date(game: GameRecord) -> str:
    return game.date.strftime("%b %d, %Y")


def games_to_frame(games: Iterable[GameRecord]) -> pd.DataFrame:
    # One row per game, in the order given (callers pass already-sorted lists).
    rows = [
        {
            "GameId": g.id,
            "Matchup": g.matchup,
            "League": g.league,
            "Date": format_game_date(g),
            "Time": g.time,
            "Venue": g.venue,
            "Tickets": g.ticket_price or "",
        }
        for g in games
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def game_label(game: GameRecord) -> str:
    return f"{game.matchup} | {game.league} | {format_game_date(game)}"


def unique_labels(games: Iterable[GameRecord]) -> Dict[str, str]:
    """Map select-box label -> game id, suffixing ' (2)', ' (3)'... on collisions."""
    label_to_id: Dict[str, str] = {}
    for g in games:
        lab = game_label(g)
        if lab not in label_to_id:
            label_to_id[lab] = g.id
        else:
            c = 2
            new_lab = f"{lab} ({c})"
            while new_lab in label_to_id:
                c += 1
                new_lab = f"{lab} ({c})"
            label_to_id[new_lab] = g.id
    return label_to_id


def selectbox_with_placeholder(
    label: str,
    options: List[str],
    key: Optional[str] = None,
    default_index: Optional[int] = None,
):
    """
    A selectbox that can start empty (placeholder) or preselect an item (default_index).
    - Uses a hidden label to avoid duplicate text under the title.
    - Works on older Streamlit as well.
    """
    try:
        return st.selectbox(
            label,
            options=options,
            index=default_index,            # None -> placeholder shown; int -> preselect
            placeholder=label,
            label_visibility="collapsed",
            key=key,
        )
    except TypeError:
        # Older Streamlit versions do not accept `placeholder`. Fall back to
        # inserting a synthetic placeholder item at the front of the list.
        if default_index is None:
            placeholder = f"— {label} —"
            choice = st.selectbox(" ", options=[placeholder] + options, index=0, key=key)
            return None if choice == placeholder else choice
        return st.selectbox(" ", options=options, index=default_index, key=key)
