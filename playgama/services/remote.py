"""HTTP client for catalog documents hosted on a remote server."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


class RemoteCatalogError(Exception):
    """The catalog document could not be fetched."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteCatalogClient:
    """Fetches raw catalog bytes with a plain ``GET``.

    Timeouts are whatever the injected ``httpx.AsyncClient`` was built with.
    """

    _HEADERS = {"Accept": "application/json"}

    def __init__(self, http_client: httpx.AsyncClient):
        self._client = http_client

    async def fetch(self, url: str) -> bytes:
        """Return the response body for ``url`` or raise :class:`RemoteCatalogError`."""

        try:
            response = await self._client.get(url, headers=self._HEADERS)
        except httpx.TimeoutException as exc:
            logger.warning("Timed out fetching catalog from %s: %s", url, exc)
            raise RemoteCatalogError(f"Request timed out: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Failed to fetch catalog from %s: %s", url, exc)
            raise RemoteCatalogError(
                f"Network error: {exc}. Check internet connection."
            ) from exc

        if not response.is_success:
            logger.warning(
                "Catalog server %s answered %s %s",
                url,
                response.status_code,
                response.reason_phrase,
            )
            raise RemoteCatalogError(
                f"Server error: {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )
        return response.content
