"""Pydantic data models for catalog API payloads.

Defines read-only DTOs (Data Transfer Objects) for:
- AnimeRecord: one catalog entry from the Jikan API
- AnimeImages / ImageSet: poster URLs per image format
- Broadcast: weekly airing slot of a show
- ViewState: lifecycle of a data-backed view
"""

from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

# Type aliases for common patterns
DayLabel: TypeAlias = str
MalID: TypeAlias = int


class _CatalogModel(BaseModel):
    """Base for API models: immutable, tolerant of fields we don't read."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class ImageSet(_CatalogModel):
    """Poster URLs in one image format."""

    image_url: str | None = None
    small_image_url: str | None = None
    large_image_url: str | None = None


class AnimeImages(_CatalogModel):
    """Poster URLs keyed by format.

    Attributes:
        jpg: JPEG posters
        webp: WebP posters
    """

    jpg: ImageSet = Field(default_factory=ImageSet)
    webp: ImageSet = Field(default_factory=ImageSet)


class Broadcast(_CatalogModel):
    """Weekly broadcast slot.

    Attributes:
        day: Day of week as sent by the API (e.g. "Mondays"), may be absent
        time: Local airing time ("HH:MM"), may be absent
        timezone: IANA timezone of `time`
        string: Human readable summary ("Mondays at 23:00 (JST)")
    """

    day: str | None = None
    time: str | None = None
    timezone: str | None = None
    string: str | None = None


class AnimeRecord(_CatalogModel):
    """One catalog entry.

    Attributes:
        mal_id: MyAnimeList identifier, unique per entry
        title: Default title
        images: Poster URLs
        broadcast: Airing slot, absent for finished or unscheduled shows
    """

    mal_id: MalID = Field(..., description="MyAnimeList ID")
    title: str = Field(..., description="Default title")
    images: AnimeImages = Field(default_factory=AnimeImages)
    broadcast: Broadcast | None = None
    url: str | None = None
    score: float | None = None
    rank: int | None = None
    episodes: int | None = None

    @property
    def image_url(self) -> str | None:
        """Regular-size JPEG poster."""
        return self.images.jpg.image_url

    @property
    def large_image_url(self) -> str | None:
        """Large JPEG poster, falling back to the regular one."""
        return self.images.jpg.large_image_url or self.images.jpg.image_url


class ViewState(str, Enum):
    """Lifecycle of a view backed by a single fetch."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
