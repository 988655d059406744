"""Pydantic models describing the Playgama catalog document."""

from __future__ import annotations

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

ANDROID_LABEL = "For Android"
IOS_LABEL = "For IOS"
DESKTOP_LABEL = "For Desktop"

GENRE_DISPLAY_LIMIT = 3
GENRE_DISPLAY_SEPARATOR = " • "


class _CatalogModel(BaseModel):
    """Base model: immutable, keyed by feed names, tolerant of extra keys."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class GameVideo(_CatalogModel):
    """A promotional video attached to a game."""

    playgama_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("playgamaId", "playgama_id"),
        serialization_alias="playgamaId",
    )
    external_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("externalUrl", "external_url"),
        serialization_alias="externalUrl",
    )
    type: str | None = None


class ScreenOrientation(_CatalogModel):
    horizontal: bool
    vertical: bool


class Game(_CatalogModel):
    """A single playable entry (a "hit") from the catalog."""

    id: str = Field(min_length=1)
    slug: str
    title: str
    description: str
    how_to_play_text: str | None = Field(default=None, alias="howToPlayText")

    # Launch target for the embedded player. Carries the partner CLID and is
    # kept byte-for-byte as received.
    game_url: str = Field(alias="gameURL", min_length=1)
    playgama_game_url: str = Field(alias="playgamaGameUrl")

    images: list[str]
    videos: list[GameVideo] | None = None

    genres: list[str]
    tags: list[str] | None = None

    mobile_ready: list[str] | None = Field(default=None, alias="mobileReady")
    supported_languages: list[str] | None = Field(
        default=None, alias="supportedLanguages"
    )
    screen_orientation: ScreenOrientation | None = Field(
        default=None, alias="screenOrientation"
    )

    gender: list[str] | None = None
    in_game_purchases: str | None = Field(default=None, alias="inGamePurchases")
    embed: str | None = None

    @property
    def thumbnail_url(self) -> str | None:
        """Return the first image URL, used as the grid thumbnail."""

        return self.images[0] if self.images else None

    def platform_support(self, label: str) -> bool | None:
        """Return whether the catalog certifies the game for ``label``.

        ``None`` means the catalog says nothing about compatibility at all,
        which is not the same as the platform being unsupported.
        """

        if self.mobile_ready is None:
            return None
        return label in self.mobile_ready

    @property
    def supports_android(self) -> bool:
        return self.platform_support(ANDROID_LABEL) is True

    @property
    def supports_ios(self) -> bool:
        return self.platform_support(IOS_LABEL) is True

    @property
    def preferred_orientation(self) -> str:
        """Return ``landscape``, ``portrait`` or ``any``."""

        orientation = self.screen_orientation
        if orientation is None:
            return "any"
        if orientation.horizontal and not orientation.vertical:
            return "landscape"
        if orientation.vertical and not orientation.horizontal:
            return "portrait"
        return "any"

    @property
    def genres_display_text(self) -> str:
        return GENRE_DISPLAY_SEPARATOR.join(self.genres[:GENRE_DISPLAY_LIMIT])

    def to_listing(self) -> dict[str, object]:
        """Return the JSON payload used by the listing endpoints."""

        payload = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        payload["thumbnailUrl"] = self.thumbnail_url
        payload["preferredOrientation"] = self.preferred_orientation
        payload["genresDisplayText"] = self.genres_display_text
        return payload


class GameSegment(_CatalogModel):
    """A named group of games.

    ``count`` is whatever the feed advertises; it is never checked against
    ``len(hits)``.
    """

    title: str
    count: int
    hits: list[Game]


class GameCatalog(_CatalogModel):
    """Root catalog document: an ordered list of segments."""

    segments: list[GameSegment]

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "GameCatalog":
        seen: set[str] = set()
        for segment in self.segments:
            for game in segment.hits:
                if game.id in seen:
                    raise ValueError(f"Duplicate game id {game.id!r} in catalog")
                seen.add(game.id)
        return self

    def flatten(self) -> list[Game]:
        """Return every hit, segment by segment, in document order."""

        return [game for segment in self.segments for game in segment.hits]
