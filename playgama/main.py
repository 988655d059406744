"""Entry point for the FastAPI-powered game catalog."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any, Literal, NoReturn

import httpx
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from .config import Settings, settings
from .errors import CatalogError, CatalogErrorKind
from .models import Game
from .services.catalog import CatalogService
from .services.remote import RemoteCatalogClient
from .services.resources import (
    DirectoryResourceReader,
    PackageResourceReader,
    ResourceReader,
)
from .web import render_game_grid, render_player_page

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

ERROR_STATUS: dict[CatalogErrorKind, int] = {
    CatalogErrorKind.RESOURCE_NOT_FOUND: 500,
    CatalogErrorKind.DECODE_ERROR: 502,
    CatalogErrorKind.NETWORK_ERROR: 502,
}

app: FastAPI


def build_resource_reader(config: Settings) -> ResourceReader:
    if config.catalog_resource_dir is not None:
        return DirectoryResourceReader(config.catalog_resource_dir)
    return PackageResourceReader()


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    exit_stack = AsyncExitStack()
    http_client = await exit_stack.enter_async_context(
        httpx.AsyncClient(timeout=settings.http_timeout(), follow_redirects=True)
    )
    fastapi_app.state.catalog_service = CatalogService(
        build_resource_reader(settings),
        RemoteCatalogClient(http_client),
        resource_name=settings.catalog_resource_name,
    )

    try:
        yield
    finally:  # pragma: no cover - teardown path exercised at runtime
        await exit_stack.aclose()


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        description="Browse the Playgama game catalog and play games in the browser",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    register_routes(fastapi_app)
    return fastapi_app


def get_catalog_service(app: FastAPI) -> CatalogService:
    service = getattr(app.state, "catalog_service", None)
    if not isinstance(service, CatalogService):
        raise RuntimeError("Catalog service not initialised")
    return service


def _raise_for_error(error: CatalogError) -> NoReturn:
    raise HTTPException(
        status_code=ERROR_STATUS[error.kind], detail=error.to_payload()
    )


def apply_filters(
    games: list[Game],
    *,
    query: str | None = None,
    genre: str | None = None,
    platform: str | None = None,
    orientation: str | None = None,
) -> list[Game]:
    """Narrow ``games`` with the listing filters, in a fixed order."""

    selected = CatalogService.search(query or "", games)
    if genre:
        selected = CatalogService.filter_by_genre(genre, selected)
    if platform == "android":
        selected = CatalogService.filter_android_compatible(selected)
    elif platform == "ios":
        selected = CatalogService.filter_ios_compatible(selected)
    if orientation is not None:
        selected = CatalogService.filter_by_orientation(
            orientation == "landscape", selected
        )
    return selected


def register_routes(fastapi_app: FastAPI) -> None:
    async def _load_games() -> list[Game]:
        service = get_catalog_service(fastapi_app)
        result = await service.load_from_local_source()
        if result.error is not None:
            _raise_for_error(result.error)
        return result.unwrap()

    @fastapi_app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @fastapi_app.get("/api/games")
    async def list_games(
        q: str | None = None,
        genre: str | None = None,
        platform: Literal["android", "ios"] | None = None,
        orientation: Literal["landscape", "portrait"] | None = None,
    ) -> dict[str, Any]:
        games = apply_filters(
            await _load_games(),
            query=q,
            genre=genre,
            platform=platform,
            orientation=orientation,
        )
        return {"count": len(games), "games": [game.to_listing() for game in games]}

    @fastapi_app.get("/api/genres")
    async def list_genres() -> dict[str, list[str]]:
        games = await _load_games()
        return {"genres": CatalogService.all_genres(games)}

    @fastapi_app.get("/api/segments")
    async def list_segments() -> dict[str, Any]:
        service = get_catalog_service(fastapi_app)
        result = await service.load_segments_from_local_source()
        if result.error is not None:
            _raise_for_error(result.error)
        segments = [
            {
                "title": segment.title,
                "count": segment.count,
                "hits": len(segment.hits),
            }
            for segment in result.unwrap()
        ]
        return {"segments": segments}

    @fastapi_app.post("/api/catalog/refresh")
    async def refresh_catalog(url: str | None = Query(default=None)) -> dict[str, Any]:
        service = get_catalog_service(fastapi_app)
        target = url or (
            str(settings.catalog_remote_url) if settings.catalog_remote_url else None
        )
        if not target:
            raise HTTPException(
                status_code=400,
                detail="No catalog URL supplied and CATALOG_REMOTE_URL is not set.",
            )
        result = await service.load_from_remote_source(target)
        if result.error is not None:
            _raise_for_error(result.error)
        return {"count": len(result.unwrap()), "cached": service.is_cached()}

    @fastapi_app.delete("/api/catalog/cache")
    async def clear_catalog_cache() -> dict[str, bool]:
        service = get_catalog_service(fastapi_app)
        service.clear_cache()
        return {"cached": service.is_cached()}

    @fastapi_app.get("/", response_class=HTMLResponse)
    async def game_grid(q: str = "") -> HTMLResponse:
        games = apply_filters(await _load_games(), query=q)
        return HTMLResponse(render_game_grid(settings, games, query=q))

    @fastapi_app.get("/play/{game_id:path}", response_class=HTMLResponse)
    async def play_game(game_id: str) -> HTMLResponse:
        game = CatalogService.find_game(game_id, await _load_games())
        if game is None:
            raise HTTPException(status_code=404, detail=f"Game {game_id} not found")
        return HTMLResponse(render_player_page(game.game_url, game.title))


app = create_app()
