"""
Data controller helpers that glue the game catalog to the Streamlit pages.

This module exposes:
    - `load_catalog()` returns the process-wide `GameCatalog`, built once from
        the built-in games and reused by every session and rerun.
    - `search_games(text)` / `search_tournaments(text)` feed the two list tabs.
        They are the same query under two names; neither list filters
        differently.
    - `find_game(game_id)` resolves the selection stored in session state.

Filtering and ordering live in `common.search`; this module only adds caching.
"""

import logging
from typing import List, Optional
import streamlit as st

from common.catalog import build_sample_games
from common.search import GameCatalog
from models.game_model import GameRecord

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def load_catalog() -> GameCatalog:
    catalog = GameCatalog(build_sample_games())
    logger.info("Loaded %d games into the catalog", len(catalog))
    return catalog


def search_games(search_text: str) -> List[GameRecord]:
    return load_catalog().query(search_text)


def search_tournaments(search_text: str) -> List[GameRecord]:
    return load_catalog().query(search_text)


def find_game(game_id: Optional[str]) -> Optional[GameRecord]:
    if not game_id:
        return None
    return load_catalog().get(game_id)
