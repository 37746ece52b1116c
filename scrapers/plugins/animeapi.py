"""AnimeApi catalog provider.

Serves the host's anime tab from a Popcorn-style REST API
(``/animes/{page}``, ``/anime/{id}``, ``/random/anime``) reached through an
ordered list of mirrors.
"""

import re
from collections.abc import Sequence
from typing import Any

from models.config import settings
from models.models import FetchFilters, MediaType, ProviderConfig
from services.mirror_client import MirrorClient
from services.query_builder import build_query, resolve_page
from services.repository import rep
from services.shaping import format_detail, format_fetch
from utils.exceptions import StreamNotFoundError
from utils.logging import get_logger

logger = get_logger(__name__)

_QUALITY_RE = re.compile(r"^(\d+)p?$")

SORTERS = ("popularity", "name", "rating", "year", "updated")

GENRES = (
    "All", "Action", "Adventure", "Cars", "Comedy", "Dementia", "Demons",
    "Drama", "Ecchi", "Fantasy", "Game", "Harem", "Historical", "Horror",
    "Josei", "Kids", "Magic", "Martial Arts", "Mecha", "Military", "Music",
    "Mystery", "Parody", "Police", "Psychological", "Romance", "Samurai",
    "School", "Sci-Fi", "Seinen", "Shoujo", "Shoujo Ai", "Shounen",
    "Shounen Ai", "Slice of Life", "Space", "Sports", "Super Power",
    "Supernatural", "Thriller", "Vampire",
)


def _quality_rank(quality: str) -> int:
    match = _QUALITY_RE.match(quality)
    return int(match.group(1)) if match else -1


def _is_quality_map(torrents: dict) -> bool:
    return all(_QUALITY_RE.match(key) for key in torrents)


class AnimeApi:
    languages = ["en"]

    config = ProviderConfig(
        name="AnimeApi",
        unique_id="mal_id",
        tab_name="AnimeApi",
        type="anime",
        metadata="trakttv:anime-metadata",
        sorters=SORTERS,
        genres=GENRES,
        types=(MediaType.MOVIE, MediaType.SHOW),
        defaults={
            "apiURL": settings.provider.api_urls,
            "language": settings.provider.language,
            "quality": settings.provider.quality,
            "translate": settings.provider.translate,
        },
    )

    def __init__(
        self,
        api_url: str | Sequence[str] | None = None,
        language: str | None = None,
        quality: str | None = None,
        translate: str | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_url: Mirror base URLs, as a list or a comma-separated string
            language: Preferred stream language
            quality: Preferred stream quality (e.g., "720p")
            translate: Metadata translation language
        """
        provider_settings = settings.provider
        self.client = MirrorClient(api_url or provider_settings.api_urls, provider_settings)
        self.language = language or provider_settings.language
        self.quality = quality or provider_settings.quality
        self.translate = translate or provider_settings.translate

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> "AnimeApi":
        """Build a provider from the host's argument mapping.

        Args:
            args: {"apiURL": "a,b" | [...], "language": ..., "quality": ..., "translate": ...}
        """
        return cls(
            api_url=args.get("apiURL"),
            language=args.get("language"),
            quality=args.get("quality"),
            translate=args.get("translate"),
        )

    @property
    def api_url(self) -> tuple[str, ...]:
        return self.client.endpoints

    def fetch(self, filters: FetchFilters | dict | None = None) -> dict[str, Any]:
        if filters is None:
            filters = FetchFilters()
        elif isinstance(filters, dict):
            filters = FetchFilters(**filters)

        params = build_query(filters)
        data = self.client.get(f"animes/{resolve_page(filters)}", params)
        return format_fetch(data)

    def detail(self, anime_id: str, old_data: dict | None = None, debug: bool = False) -> dict[str, Any]:
        if debug:
            logger.debug(f"Detail for {anime_id} (cached: {old_data is not None})")
        return format_detail(self.client.get(f"anime/{anime_id}"))

    def random(self) -> dict[str, Any]:
        """Fetch the detail record of a random catalog item."""
        return format_detail(self.client.get("random/anime"))

    def extract_ids(self, items: dict[str, Any]) -> list:
        """Unique ids of the items in a fetch() result."""
        return [item[self.config.unique_id] for item in items["results"]]

    def resolve_stream(
        self,
        item: dict[str, Any],
        language: str | None = None,
        quality: str | None = None,
    ) -> dict[str, Any]:
        """Pick one torrent of a movie detail record or show episode.

        The requested language/quality win, then the provider's configured
        ones; otherwise the first language and its highest quality are used.

        Args:
            item: Dict carrying a "torrents" map, keyed by language then
                quality, or by quality only
            language: Requested language
            quality: Requested quality

        Returns:
            The chosen torrent entry

        Raises:
            StreamNotFoundError: If the item has no torrents
        """
        torrents = item.get("torrents") or {}
        if torrents and _is_quality_map(torrents):
            torrents = {self.language: torrents}
        if not torrents:
            raise StreamNotFoundError(f"No torrents for {item.get('title', 'item')}")

        for lang in (language, self.language):
            if lang in torrents:
                qualities = torrents[lang]
                break
        else:
            qualities = next(iter(torrents.values()))

        if not qualities:
            raise StreamNotFoundError(f"No torrents for {item.get('title', 'item')}")

        for wanted in (quality, self.quality):
            if wanted in qualities:
                return qualities[wanted]
        return qualities[max(qualities, key=_quality_rank)]


def load(languages_dict) -> None:
    can_load = False
    for language in AnimeApi.languages:
        if language in languages_dict:
            can_load = True
            break
    if not can_load:
        return
    rep.register(AnimeApi)
