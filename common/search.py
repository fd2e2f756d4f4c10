"""
Search and ordering for the game catalog.

`query_games` is the single function behind both the "Games" and the
"Tournaments" lists. It filters by a case-insensitive substring match on the
team names, venue and league, then orders by game date. Python's sort is
stable, so games sharing a date keep their catalog order.

`GameCatalog` wraps an immutable snapshot of the records and adds the small
lookups the pages need (by id, length, iteration).
"""

# Import libraries
from __future__ import annotations
from datetime import datetime
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from models.game_model import GameRecord
from .constants import SEARCH_FIELDS


def matches_search(game: GameRecord, search_text: str) -> bool:
    needle = search_text.casefold()
    return any(needle in str(getattr(game, f)).casefold() for f in SEARCH_FIELDS)


def _date_key(game: GameRecord) -> datetime:
    # naive dates are local wall-clock times (the catalog uses datetime.now());
    # aware ones are converted to local time so mixed catalogs still compare
    d = game.date
    if d.tzinfo is not None and d.utcoffset() is not None:
        return d.astimezone().replace(tzinfo=None)
    return d


def query_games(catalog: Sequence[GameRecord], search_text: str) -> List[GameRecord]:
    """Return the games matching `search_text`, sorted ascending by date.

    An empty string returns every game. The input sequence is never modified
    and a fresh list is returned on each call.
    """
    if search_text == "":
        hits = list(catalog)
    else:
        hits = [g for g in catalog if matches_search(g, search_text)]
    return sorted(hits, key=_date_key)


class GameCatalog:
    def __init__(self, records: Iterable[GameRecord]):
        self._records: Tuple[GameRecord, ...] = tuple(records)
        self._by_id = {g.id: g for g in self._records}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[GameRecord]:
        return iter(self._records)

    def query(self, search_text: str) -> List[GameRecord]:
        return query_games(self._records, search_text)

    def get(self, game_id: str) -> Optional[GameRecord]:
        return self._by_id.get(str(game_id))
