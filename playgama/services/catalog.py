"""Loading, caching and querying of the game catalog."""

from __future__ import annotations

import asyncio
import logging

from pydantic import ValidationError

from .. import queries
from ..errors import CatalogError, LoadResult
from ..models import Game, GameCatalog, GameSegment
from .remote import RemoteCatalogClient, RemoteCatalogError
from .resources import ResourceReader

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_NAME = "games.json"


class CatalogService:
    """Owns the single cached copy of the catalog.

    The games and segments slots are always written and cleared together.
    Every write happens under one lock, so overlapping loads finish in the
    order they acquired it and the last one wins.
    """

    search = staticmethod(queries.search)
    filter_by_genre = staticmethod(queries.filter_by_genre)
    filter_android_compatible = staticmethod(queries.filter_android_compatible)
    filter_ios_compatible = staticmethod(queries.filter_ios_compatible)
    filter_by_orientation = staticmethod(queries.filter_by_orientation)
    all_genres = staticmethod(queries.all_genres)
    find_game = staticmethod(queries.find_game)

    def __init__(
        self,
        resources: ResourceReader,
        remote: RemoteCatalogClient | None = None,
        *,
        resource_name: str = DEFAULT_RESOURCE_NAME,
    ):
        self._resources = resources
        self._remote = remote
        self._resource_name = resource_name
        self._games: tuple[Game, ...] | None = None
        self._segments: tuple[GameSegment, ...] | None = None
        self._lock = asyncio.Lock()

    @property
    def resource_name(self) -> str:
        return self._resource_name

    @property
    def cached_games(self) -> tuple[Game, ...] | None:
        return self._games

    @property
    def cached_segments(self) -> tuple[GameSegment, ...] | None:
        return self._segments

    def is_cached(self) -> bool:
        return self._games is not None

    def clear_cache(self) -> None:
        """Drop the cached catalog; the next load reads its source again."""

        self._games = None
        self._segments = None
        logger.debug("Catalog cache cleared")

    async def load_from_local_source(self) -> LoadResult[list[Game]]:
        """Return the bundled catalog, reading it only when nothing is cached."""

        async with self._lock:
            if self._games is not None:
                logger.debug("Serving %d cached games", len(self._games))
                return LoadResult.success(list(self._games))

            try:
                raw = await asyncio.to_thread(
                    self._resources.read_bytes, self._resource_name
                )
            except OSError as exc:
                error = CatalogError.resource_not_found(
                    f"{self._resource_name} could not be read from the "
                    f"application resources: {exc}",
                    cause=exc,
                )
                return self._failed(error, source=self._resource_name)

            return self._store(raw, source=self._resource_name)

    async def load_segments_from_local_source(
        self,
    ) -> LoadResult[list[GameSegment]]:
        """Return the cached segments, loading the bundled catalog if needed."""

        result = await self.load_from_local_source()
        if result.error is not None:
            return LoadResult.failure(result.error)
        return LoadResult.success(list(self._segments or ()))

    async def load_from_remote_source(self, url: str) -> LoadResult[list[Game]]:
        """Fetch the catalog from ``url`` and replace whatever is cached."""

        if self._remote is None:
            raise RuntimeError("Remote catalog client not configured")

        async with self._lock:
            try:
                raw = await self._remote.fetch(url)
            except RemoteCatalogError as exc:
                error = CatalogError.network_error(
                    str(exc),
                    status_code=exc.status_code,
                    cause=exc.__cause__ or exc,
                )
                return self._failed(error, source=url)

            return self._store(raw, source=url)

    def _store(self, raw: bytes, *, source: str) -> LoadResult[list[Game]]:
        try:
            catalog = GameCatalog.model_validate_json(raw)
        except ValidationError as exc:
            error = CatalogError.decode_error(
                f"Error parsing catalog JSON: {exc}", cause=exc
            )
            return self._failed(error, source=source)

        games = catalog.flatten()
        self._games = tuple(games)
        self._segments = tuple(catalog.segments)
        logger.info(
            "Loaded %d games in %d segments from %s",
            len(games),
            len(catalog.segments),
            source,
        )
        return LoadResult.success(games)

    @staticmethod
    def _failed(error: CatalogError, *, source: str) -> LoadResult[list[Game]]:
        logger.warning(
            "Catalog load from %s failed (%s): %s",
            source,
            error.kind.value,
            error.message,
        )
        return LoadResult.failure(error)
