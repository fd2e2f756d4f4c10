"""
Built-in game catalog.

The app has no remote source for games: the list below is the whole catalog.
Dates are relative to "today" so the listing always shows upcoming games;
pass a fixed `today` to get a reproducible catalog (tests do this).
"""

# Import libraries
from __future__ import annotations
from datetime import datetime, timedelta
from typing import Optional, Tuple

from models.game_model import Coordinate, GameRecord

# (days from today, fields): one entry per game
_SAMPLE_GAMES = [
    (2, dict(
        home_team="Albuquerque Thunder", away_team="Santa Fe Storm", time="7:00 PM",
        venue="Tingley Coliseum", address="300 San Pedro Dr NE, Albuquerque, NM",
        coordinate=(35.0844, -106.6504), league="Southwest Basketball League", ticket_price="$15-45",
        description="Rivalry game between two top teams in the Southwest Basketball League.",
    )),
    (5, dict(
        home_team="Los Alamos Lakers", away_team="Taos Tigers", time="6:30 PM",
        venue="Los Alamos High School Gym", address="1300 Diamond Dr, Los Alamos, NM",
        coordinate=(35.8800, -106.2989), league="High School Division", ticket_price="$8-12",
        description="High school championship semifinal game.",
    )),
    (7, dict(
        home_team="Rio Rancho Rockets", away_team="Farmington Flyers", time="8:00 PM",
        venue="Rio Rancho Events Center", address="3001 Civic Center Cir NE, Rio Rancho, NM",
        coordinate=(35.2327, -106.6630), league="New Mexico Pro League", ticket_price="$20-60",
        description="Professional league game featuring rising stars.",
    )),
    (10, dict(
        home_team="UNM Lobos JV", away_team="NMSU Aggies JV", time="5:00 PM",
        venue="Johnson Center", address="1 University of New Mexico, Albuquerque, NM",
        coordinate=(35.0844, -106.6218), league="College Junior Varsity", ticket_price="Free",
        description="Junior varsity matchup between state university rivals.",
    )),
    (12, dict(
        home_team="Roswell Aliens", away_team="Carlsbad Cavemen", time="7:30 PM",
        venue="Roswell Recreation Center", address="912 N Main St, Roswell, NM",
        coordinate=(33.3943, -104.5230), league="Southeast New Mexico League", ticket_price="$10-25",
        description="Regional league game with playoff implications.",
    )),
    (14, dict(
        home_team="Las Cruces Heat", away_team="Silver City Miners", time="6:00 PM",
        venue="Las Cruces Convention Center", address="680 E University Ave, Las Cruces, NM",
        coordinate=(32.3199, -106.7637), league="Southwest Basketball League", ticket_price="$12-35",
        description="Southern division showdown between conference leaders.",
    )),
]


def build_sample_games(today: Optional[datetime] = None) -> Tuple[GameRecord, ...]:
    """Create a fresh set of records (new ids) dated relative to `today`."""
    today = today or datetime.now()
    games = []
    for offset, fields in _SAMPLE_GAMES:
        lat, lon = fields["coordinate"]
        games.append(GameRecord(
            **{**fields, "coordinate": Coordinate(lat, lon)},
            date=today + timedelta(days=offset),
        ))
    return tuple(games)
