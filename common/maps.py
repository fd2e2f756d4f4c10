# common/maps.py
from __future__ import annotations
from typing import Iterable, List
import pydeck as pdk

from models.game_model import Coordinate, GameRecord
from .colors import league_color
from .utils import format_game_date

PIN_RADIUS_M = 400
DETAIL_ZOOM = 14
MAP_TOOLTIP = {"html": "<b>{matchup}</b><br/>{venue}<br/>{date}"}


def _rgba(hexs: str, alpha: int = 220) -> List[int]:
    h = hexs.strip().lstrip("#")
    return [int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), alpha]


def game_points(games: Iterable[GameRecord]) -> List[dict]:
    """One plain dict per pin; pydeck serializes these as-is."""
    return [
        {
            "id": g.id,
            "matchup": g.matchup,
            "venue": g.venue,
            "date": format_game_date(g),
            "position": [g.coordinate.longitude, g.coordinate.latitude],
            "fill": _rgba(league_color(g.league)),
        }
        for g in games
    ]


def build_game_deck(games: Iterable[GameRecord], center: Coordinate, zoom: float) -> pdk.Deck:
    """Pins coloured by league, with the initial view fixed on `center`."""
    layer = pdk.Layer(
        "ScatterplotLayer",
        data=game_points(games),
        get_position="position",
        get_fill_color="fill",
        get_radius=PIN_RADIUS_M,
        radius_min_pixels=5,
        pickable=True,
    )
    view = pdk.ViewState(latitude=center.latitude, longitude=center.longitude, zoom=zoom)
    return pdk.Deck(layers=[layer], initial_view_state=view, tooltip=MAP_TOOLTIP, map_style=None)

