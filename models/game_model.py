"""
Data model for a basketball game listing.

`GameRecord` is a frozen dataclass describing one game shown in the list,
map and detail views. Records are built once from the built-in catalog and
never mutated afterwards.

Identity is carried by `id` alone: two records with the same teams, venue and
date are still different games if their ids differ. The id is generated when
the record is created and is never derived from the other fields.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True, eq=False)
class GameRecord:
    home_team: str
    away_team: str
    date: datetime
    time: str
    venue: str
    address: str
    coordinate: Coordinate
    league: str
    description: str
    ticket_price: Optional[str] = None
    id: str = field(default_factory=lambda: uuid4().hex)

    def __post_init__(self) -> None:
        if not self.home_team or not self.home_team.strip():
            raise ValueError("home_team must be a non-empty string")
        if not self.away_team or not self.away_team.strip():
            raise ValueError("away_team must be a non-empty string")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameRecord):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def matchup(self) -> str:
        """Row title used by the list views, e.g. 'Santa Fe Storm @ Albuquerque Thunder'."""
        return f"{self.away_team} @ {self.home_team}"
