"""Pydantic data models for catalog data transfer.

Defines DTOs (Data Transfer Objects) for:
- FetchFilters: Optional list-view filters coming from the host
- CatalogSummary: One entry of a catalog page
- ShowDetail / MovieDetail: Detail record, one variant per media type
- FetchResult: A reshaped catalog page
- ProviderConfig: Static descriptor the host reads from a provider class
"""

from enum import Enum
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

# Type aliases for common patterns
AnimeID: TypeAlias = str | int
RawRecord: TypeAlias = dict[str, Any]


class MediaType(str, Enum):
    """Media types the remote API serves."""

    MOVIE = "movie"
    SHOW = "show"


class FetchFilters(BaseModel):
    """Filters for a catalog page request.

    Attributes:
        keywords: Free-text search
        genre: Genre tag (e.g., "Action")
        sorter: Sort field; "popularity" means "use the default"
        order: Sort order (e.g., -1 / 1)
        page: Page number, 1-based
    """

    model_config = ConfigDict(extra="ignore")

    keywords: str | None = Field(None, description="Free-text search keywords")
    genre: str | None = Field(None, description="Genre tag")
    sorter: str | None = Field(None, description="Sort field")
    order: str | int | None = Field(None, description="Sort order")
    page: int | None = Field(None, description="Page number")


class CatalogSummary(BaseModel):
    """List-view projection of a raw catalog record.

    The id is repeated under each key hosts use to look items up.
    """

    mal_id: AnimeID | None = None
    haru_id: AnimeID | None = None
    tvdb_id: str | None = None
    imdb_id: AnimeID | None = None
    slug: str | None = None
    title: str | None = None
    year: str | int | None = None
    genres: list[str] | None = None
    rating: Any = None
    images: dict[str, Any] | None = None
    type: str | None = None
    item_data: str | None = None
    num_seasons: int | None = None


class DetailBase(BaseModel):
    """Fields shared by every detail record."""

    mal_id: AnimeID
    haru_id: AnimeID
    tvdb_id: str
    imdb_id: AnimeID
    slug: str | None = None
    title: str | None = None
    item_data: str
    country: str = "Japan"
    genre: list[str] | None = None
    genres: list[str] | None = None
    runtime: str | int | None = None
    synopsis: str | None = None
    network: list[str] = Field(default_factory=list)
    rating: Any = None
    images: dict[str, Any] | None = None
    year: str | int | None = None


class ShowDetail(DetailBase):
    """Detail record of a series."""

    type: Literal["show"] = "show"
    status: str | None = None
    num_seasons: int = 1
    episodes: list[dict[str, Any]] | None = None


class MovieDetail(DetailBase):
    """Detail record of a movie."""

    type: Literal["movie"] = "movie"
    torrents: dict[str, Any] | None = None
    trailer: str | None = None


CatalogDetail: TypeAlias = ShowDetail | MovieDetail


class FetchResult(BaseModel):
    """A reshaped catalog page.

    has_more is always True: the API has no end-of-results signal, so the
    host pages until it receives an empty page.
    """

    model_config = ConfigDict(populate_by_name=True)

    results: list[CatalogSummary] = Field(default_factory=list)
    has_more: bool = Field(True, alias="hasMore")


class ProviderConfig(BaseModel):
    """Static metadata a provider exposes to the host.

    Attributes:
        name: Display name
        unique_id: Key of the summary field that identifies an item
        tab_name: Label of the host tab listing this provider
        type: Catalog kind served by the provider
        metadata: Metadata source the host should enrich items with
        sorters: Accepted values of FetchFilters.sorter
        genres: Accepted values of FetchFilters.genre
        types: Media types the provider can return
        defaults: Default constructor arguments
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    unique_id: str = Field(..., min_length=1)
    tab_name: str = Field(..., min_length=1)
    type: str = "anime"
    metadata: str | None = None
    sorters: tuple[str, ...] = ()
    genres: tuple[str, ...] = ()
    types: tuple[MediaType, ...] = (MediaType.MOVIE, MediaType.SHOW)
    defaults: dict[str, Any] = Field(default_factory=dict)
