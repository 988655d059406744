"""Search and filter behaviour over explicit game lists."""

from __future__ import annotations

import pytest

from playgama import queries
from playgama.models import Game, GameCatalog


@pytest.fixture
def games(catalog_payload) -> list[Game]:
    return GameCatalog.model_validate(catalog_payload).flatten()


def _ids(games: list[Game]) -> list[str]:
    return [game.id for game in games]


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_blank_search_returns_input_unchanged(games, query: str) -> None:
    result = queries.search(query, games)

    assert result == games
    assert result is not games


def test_search_matches_genre_case_insensitively(games) -> None:
    assert _ids(queries.search("PUZZLE", games)) == ["a1", "b1"]


def test_search_matches_title_and_description(games) -> None:
    assert _ids(queries.search("castle", games)) == ["b1"]
    assert _ids(queries.search("Neon", games)) == ["a2"]


def test_search_uses_substring_matching(games) -> None:
    assert _ids(queries.search("rcad", games)) == ["a1"]


def test_filter_by_genre_requires_exact_match(games) -> None:
    assert _ids(queries.filter_by_genre("arcade", games)) == ["a1"]
    assert queries.filter_by_genre("arc", games) == []


def test_android_filter_excludes_unknown_compatibility(games) -> None:
    assert _ids(queries.filter_android_compatible(games)) == ["a1", "a2"]


def test_ios_filter_excludes_unknown_compatibility(games) -> None:
    assert _ids(queries.filter_ios_compatible(games)) == ["a1", "b1"]


def test_platform_filters_drop_game_without_mobile_ready(game_payload) -> None:
    game = Game.model_validate(game_payload("x1"))

    assert queries.filter_android_compatible([game]) == []
    assert queries.filter_ios_compatible([game]) == []


def test_orientation_filter(games) -> None:
    assert _ids(queries.filter_by_orientation(True, games)) == ["a2", "b1", "b2"]
    assert _ids(queries.filter_by_orientation(False, games)) == ["a1", "b1", "b2"]


@pytest.mark.parametrize("landscape", [True, False])
def test_orientation_filter_keeps_games_without_orientation(
    game_payload, landscape: bool
) -> None:
    game = Game.model_validate(game_payload("x1"))

    assert queries.filter_by_orientation(landscape, [game]) == [game]


def test_all_genres_sorted_and_deduplicated(game_payload) -> None:
    games = [
        Game.model_validate(game_payload("x1", genres=["a", "b"])),
        Game.model_validate(game_payload("x2", genres=["b", "c"])),
    ]

    assert queries.all_genres(games) == ["a", "b", "c"]


def test_all_genres_is_case_sensitive(games) -> None:
    assert queries.all_genres(games) == ["Arcade", "puzzle", "racing", "strategy"]


def test_find_game(games) -> None:
    assert queries.find_game("b1", games) is games[2]
    assert queries.find_game("missing", games) is None
