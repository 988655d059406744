"""Pytest configuration and test helpers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import pytest


# Ensure the application package is importable when running tests without an
# editable install. This mirrors the expected runtime layout where ``playgama``
# sits at the project root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _game_payload(game_id: str, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": game_id,
        "slug": f"game-{game_id}",
        "title": f"Game {game_id}",
        "description": f"Description for {game_id}",
        "gameURL": f"https://playgama.com/export/game/{game_id}?clid=p_test",
        "playgamaGameUrl": f"https://playgama.com/game/{game_id}",
        "images": [f"https://cdn.example.com/{game_id}.png"],
        "genres": [],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO tests to run on asyncio without requiring trio."""

    return "asyncio"


@pytest.fixture
def game_payload() -> Callable[..., dict[str, Any]]:
    """Return a builder for a minimal, valid ``hit`` entry."""

    return _game_payload


@pytest.fixture
def catalog_payload() -> dict[str, Any]:
    """A two-segment catalog with four games."""

    return {
        "segments": [
            {
                "title": "Popular",
                "count": 10,
                "hits": [
                    _game_payload(
                        "a1",
                        title="Bubble Shooter",
                        genres=["puzzle", "Arcade"],
                        mobileReady=["For Android", "For IOS"],
                        screenOrientation={"horizontal": False, "vertical": True},
                    ),
                    _game_payload(
                        "a2",
                        title="Racing Rivals",
                        description="Fast cars on neon tracks",
                        genres=["racing"],
                        mobileReady=["For Android"],
                        screenOrientation={"horizontal": True, "vertical": False},
                    ),
                ],
            },
            {
                "title": "New",
                "count": 1,
                "hits": [
                    _game_payload(
                        "b1",
                        title="Castle Keeper",
                        genres=["strategy", "puzzle"],
                        mobileReady=["For IOS", "For Desktop"],
                    ),
                    _game_payload("b2", title="Mystery Box"),
                ],
            },
        ]
    }
