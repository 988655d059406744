"""HTML pages for browsing the catalog and playing a game."""

from __future__ import annotations

import re
from html import escape
from textwrap import dedent
from typing import Mapping, Sequence
from urllib.parse import quote

from .config import Settings
from .models import Game


GRID_TEMPLATE = dedent(
    """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>__APP_NAME__</title>
    <style>
        :root {
            color-scheme: dark;
            font-family: 'Inter', 'Segoe UI', system-ui, -apple-system, sans-serif;
            --surface: #141414;
            --text-primary: #f5f5f5;
            --text-muted: #a6a6a6;
            --outline: #1c1c1c;
            background: #000000;
            color: var(--text-primary);
        }
        * {
            box-sizing: border-box;
        }
        body {
            margin: 0;
            min-height: 100vh;
        }
        main {
            max-width: 960px;
            margin: 0 auto;
            padding: 2rem 1rem 3rem;
        }
        header {
            display: flex;
            flex-wrap: wrap;
            gap: 1rem;
            align-items: baseline;
            justify-content: space-between;
            margin-bottom: 1.5rem;
        }
        header h1 {
            margin: 0;
            letter-spacing: -0.03em;
        }
        header p {
            margin: 0;
            color: var(--text-muted);
        }
        form input {
            width: 100%;
            padding: 0.75rem 1rem;
            border-radius: 12px;
            border: 1px solid var(--outline);
            background: var(--surface);
            color: inherit;
            margin-bottom: 1.5rem;
        }
        .grid {
            display: grid;
            grid-template-columns: repeat(2, minmax(0, 1fr));
            gap: 1rem;
        }
        .card {
            display: block;
            background: var(--surface);
            border: 1px solid var(--outline);
            border-radius: 16px;
            overflow: hidden;
            color: inherit;
            text-decoration: none;
        }
        .card img,
        .card .placeholder {
            display: block;
            width: 100%;
            aspect-ratio: 16 / 10;
            object-fit: cover;
            background: #1f1f1f;
        }
        .card h2 {
            margin: 0.75rem 0.75rem 0.25rem;
            font-size: 1rem;
        }
        .card p {
            margin: 0 0.75rem 0.75rem;
            font-size: 0.85rem;
            color: var(--text-muted);
        }
        .empty {
            color: var(--text-muted);
            text-align: center;
        }
    </style>
</head>
<body>
    <main>
        <header>
            <h1>__APP_NAME__</h1>
            <p>__GAMES_COUNT__</p>
        </header>
        <form method="get" action="/">
            <input type="search" name="q" value="__QUERY__" placeholder="Search games" />
        </form>
        __GRID__
    </main>
</body>
</html>
"""
)


PLAYER_TEMPLATE = dedent(
    """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1, viewport-fit=cover" />
    <title>__GAME_TITLE__</title>
    <style>
        html, body {
            margin: 0;
            height: 100%;
            background: #000000;
            overflow: hidden;
        }
        iframe {
            display: block;
            width: 100%;
            height: 100%;
            border: 0;
        }
    </style>
</head>
<body>
    <iframe src="__GAME_URL__" title="__GAME_TITLE__"
        allow="autoplay; fullscreen; gamepad; accelerometer; gyroscope"
        allowfullscreen></iframe>
</body>
</html>
"""
)


PLACEHOLDER_RE = re.compile(r"__[A-Z_]+__")


def _fill(template: str, replacements: Mapping[str, str]) -> str:
    # Single pass: substituted values are never scanned for placeholders.
    return PLACEHOLDER_RE.sub(
        lambda match: replacements.get(match.group(0), match.group(0)), template
    )


def _format_games_count(count: int) -> str:
    return f"{count} game" if count == 1 else f"{count} games"


def play_path(game_id: str) -> str:
    return f"/play/{quote(game_id, safe='')}"


def _render_card(game: Game) -> str:
    thumbnail = game.thumbnail_url
    if thumbnail:
        image = f'<img src="{escape(thumbnail)}" alt="" loading="lazy" />'
    else:
        image = '<div class="placeholder"></div>'
    return (
        f'<a class="card" href="{escape(play_path(game.id))}">'
        f"{image}"
        f"<h2>{escape(game.title)}</h2>"
        f"<p>{escape(game.genres_display_text)}</p>"
        "</a>"
    )


def render_game_grid(
    settings: Settings, games: Sequence[Game], *, query: str = ""
) -> str:
    """Render the two-column game grid with a search box."""

    if games:
        grid = '<div class="grid">' + "".join(_render_card(g) for g in games) + "</div>"
    else:
        grid = '<p class="empty">No games found.</p>'

    replacements = {
        "__APP_NAME__": escape(settings.app_name),
        "__GAMES_COUNT__": _format_games_count(len(games)),
        "__QUERY__": escape(query),
        "__GRID__": grid,
    }
    return _fill(GRID_TEMPLATE, replacements)


def render_player_page(game_url: str, title: str) -> str:
    """Render a full-viewport frame around ``game_url``.

    Only the launch URL and the title are used; the URL is HTML-escaped for
    the attribute but otherwise left exactly as the catalog supplied it.
    """

    replacements = {
        "__GAME_TITLE__": escape(title),
        "__GAME_URL__": escape(game_url),
    }
    return _fill(PLAYER_TEMPLATE, replacements)
