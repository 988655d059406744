"""Readers for the catalog resource bundled with the application."""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Protocol


class ResourceReader(Protocol):
    """Anything that can return the raw bytes of a named resource.

    Implementations raise :class:`OSError` when the resource is missing or
    cannot be read.
    """

    def read_bytes(self, name: str) -> bytes:  # pragma: no cover - protocol
        ...


class DirectoryResourceReader:
    """Reads resources from a directory on disk."""

    def __init__(self, root: str | Path):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def read_bytes(self, name: str) -> bytes:
        return (self._root / name).read_bytes()


class PackageResourceReader:
    """Reads resources shipped as package data (``playgama/data`` by default)."""

    def __init__(self, package: str = "playgama.data"):
        self._package = package

    def read_bytes(self, name: str) -> bytes:
        try:
            return resources.files(self._package).joinpath(name).read_bytes()
        except ModuleNotFoundError as exc:
            raise FileNotFoundError(
                f"Resource package {self._package!r} is not installed"
            ) from exc
