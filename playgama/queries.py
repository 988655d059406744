"""Pure search and filter helpers over a list of games.

None of these touch the service cache: callers pass the list they want to
query and get a new list back in the same order.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import ANDROID_LABEL, IOS_LABEL, Game


def search(query: str, games: Sequence[Game]) -> list[Game]:
    """Case-insensitive substring match on title, description and genres."""

    if not query or not query.strip():
        return list(games)

    needle = query.casefold()
    return [
        game
        for game in games
        if needle in game.title.casefold()
        or needle in game.description.casefold()
        or any(needle in genre.casefold() for genre in game.genres)
    ]


def filter_by_genre(genre: str, games: Sequence[Game]) -> list[Game]:
    """Keep games with a genre equal to ``genre``, ignoring case."""

    target = genre.casefold()
    return [
        game
        for game in games
        if any(candidate.casefold() == target for candidate in game.genres)
    ]


def filter_android_compatible(games: Sequence[Game]) -> list[Game]:
    # A missing mobileReady list counts as not compatible here.
    return [game for game in games if game.platform_support(ANDROID_LABEL) is True]


def filter_ios_compatible(games: Sequence[Game]) -> list[Game]:
    return [game for game in games if game.platform_support(IOS_LABEL) is True]


def filter_by_orientation(landscape: bool, games: Sequence[Game]) -> list[Game]:
    """Keep games playable in the requested orientation.

    Games without a ``screenOrientation`` entry are kept either way.
    """

    selected: list[Game] = []
    for game in games:
        orientation = game.screen_orientation
        if orientation is None:
            selected.append(game)
        elif landscape and orientation.horizontal:
            selected.append(game)
        elif not landscape and orientation.vertical:
            selected.append(game)
    return selected


def all_genres(games: Iterable[Game]) -> list[str]:
    """Return the distinct genres across ``games``, sorted."""

    return sorted({genre for game in games for genre in game.genres})


def find_game(game_id: str, games: Iterable[Game]) -> Game | None:
    for game in games:
        if game.id == game_id:
            return game
    return None
