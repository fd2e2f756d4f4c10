"""
Tests for `common/search.py`.

Covers:
- Empty search text returns the whole catalog ordered by date, stable on ties.
- Non-empty search text matches team names, venue and league only,
  case-insensitively, as a plain substring.
- The query never mutates its input and always returns a new list.
- Empty catalogs and searches with no hits return empty lists.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from common.search import GameCatalog, matches_search, query_games
from models.game_model import Coordinate, GameRecord


def _game(home: str, day: int, **kw) -> GameRecord:
    fields = dict(
        home_team=home,
        away_team=kw.pop("away", "Visitors"),
        date=datetime(2025, 1, 1) + timedelta(days=day),
        time="7:00 PM",
        venue=kw.pop("venue", "Main Gym"),
        address=kw.pop("address", "1 Court St"),
        coordinate=Coordinate(35.0, -106.0),
        league=kw.pop("league", "City League"),
        description=kw.pop("description", "A game."),
        ticket_price=kw.pop("ticket_price", None),
    )
    return GameRecord(**fields)


def _is_subsequence(result, catalog) -> bool:
    it = iter(catalog)
    return all(any(r is c for c in it) for r in result)


def test_empty_search_returns_all_sorted_by_date() -> None:
    """Verify '' returns every game, ascending by date."""

    catalog = [_game("C", 5), _game("A", 1), _game("B", 3)]

    result = query_games(catalog, "")

    assert [g.home_team for g in result] == ["A", "B", "C"]
    assert len(result) == len(catalog)


def test_sort_is_stable_for_equal_dates() -> None:
    """Verify games on the same date keep their catalog order."""

    catalog = [_game("Late", 9), _game("First", 2), _game("Second", 2), _game("Third", 2)]

    result = query_games(catalog, "")

    assert [g.home_team for g in result] == ["First", "Second", "Third", "Late"]


@pytest.mark.parametrize(
    "search_text, expected",
    [
        ("thunder", {"Albuquerque Thunder"}),       # home team
        ("STORM", {"Albuquerque Thunder"}),         # away team
        ("events center", {"Rio Rancho Rockets"}),  # venue
        ("southwest", {"Albuquerque Thunder", "Las Cruces Heat"}),  # league
    ],
)
def test_matches_each_searchable_field(sample_games, search_text, expected) -> None:
    """Verify home team, away team, venue and league all participate, case-insensitively."""

    result = query_games(sample_games, search_text)

    assert {g.home_team for g in result} == expected


@pytest.mark.parametrize("search_text", ["San Pedro", "rivalry", "$15", "7:00"])
def test_other_fields_do_not_match(sample_games, search_text) -> None:
    """Verify address, description, ticket price and time are not searched."""

    assert query_games(sample_games, search_text) == []


def test_filtered_result_is_sorted_by_date() -> None:
    """Verify hits are ordered by date, not by relevance or catalog order."""

    catalog = [
        _game("Hawks", 8, league="Metro"),
        _game("Bears", 1, league="Other"),
        _game("Owls", 4, league="Metro"),
    ]

    result = query_games(catalog, "metro")

    assert [g.home_team for g in result] == ["Owls", "Hawks"]


def test_search_partitions_catalog(sample_games) -> None:
    """Verify every hit matches and every miss fails the same test."""

    for text in ["", "a", "LEAGUE", "jv", "zzz", " "]:
        result = query_games(sample_games, text)
        assert _is_subsequence(sorted(result, key=lambda g: sample_games.index(g)), sample_games)
        for g in sample_games:
            if text == "":
                assert g in result
            else:
                assert (g in result) == matches_search(g, text)


def test_whitespace_is_not_trimmed() -> None:
    """Verify a single space is a real (non-empty) search term."""

    catalog = [_game("Thunder", 1, away="Storm", venue="Gym", league="X"), _game("Los Lobos", 2)]

    result = query_games(catalog, " ")

    assert [g.home_team for g in result] == ["Los Lobos"]


def test_no_hits_returns_empty_list(sample_games) -> None:
    """Verify a search with no matches is an empty list, not an error."""

    assert query_games(sample_games, "no such team") == []


def test_empty_catalog_returns_empty() -> None:
    """Verify an empty catalog yields an empty result for any search text."""

    assert query_games([], "") == []
    assert query_games([], "thunder") == []


def test_query_is_pure_and_returns_new_list(sample_games) -> None:
    """Verify the catalog is untouched and repeated calls give equal, distinct lists."""

    catalog = list(reversed(sample_games))
    before = list(catalog)

    first = query_games(catalog, "")
    second = query_games(catalog, "")

    assert catalog == before
    assert first == second
    assert first is not second
    assert first is not catalog


def test_result_has_no_duplicates_or_new_records(sample_games) -> None:
    """Verify results only contain catalog records, each at most once."""

    result = query_games(sample_games, "e")

    assert len(set(result)) == len(result)
    assert set(result) <= set(sample_games)


def test_catalog_games_and_tournaments_share_semantics(sample_games) -> None:
    """Verify `GameCatalog.query` matches the plain function."""

    catalog = GameCatalog(sample_games)

    assert catalog.query("league") == query_games(sample_games, "league")
    assert catalog.query("") == query_games(sample_games, "")


def test_catalog_lookup_by_id(sample_games) -> None:
    """Verify the catalog resolves ids and returns None for unknown ones."""

    catalog = GameCatalog(sample_games)
    target = sample_games[3]

    assert len(catalog) == 6
    assert catalog.get(target.id) is target
    assert catalog.get("missing") is None
    assert list(catalog) == list(sample_games)


def test_catalog_snapshot_ignores_later_list_changes(sample_games) -> None:
    """Verify the catalog keeps its own copy of the records it was built with."""

    records = list(sample_games)
    catalog = GameCatalog(records)
    records.clear()

    assert len(catalog.query("")) == 6


def test_mixed_naive_and_aware_dates_sort() -> None:
    """Verify catalogs mixing naive and timezone-aware dates still sort by date."""

    naive_early = _game("Early", 1)
    aware_late = replace(_game("Late", 0), date=datetime(2025, 2, 1, tzinfo=timezone.utc))
    aware_first = replace(_game("First", 0), date=datetime(2024, 12, 1, tzinfo=timezone(timedelta(hours=-7))))

    result = query_games([aware_late, naive_early, aware_first], "")

    assert [g.home_team for g in result] == ["First", "Early", "Late"]
    assert [g.home_team for g in query_games([aware_late, naive_early], "city")] == ["Early", "Late"]
