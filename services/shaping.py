"""Reshape raw AnimeApi records into the host's list and detail schemas.

Every function here is pure: output depends only on the record passed in,
and fields missing from the record are omitted rather than invented.
"""

from typing import Any

from pydantic import ValidationError

from models.models import (
    CatalogDetail,
    CatalogSummary,
    FetchResult,
    MediaType,
    MovieDetail,
    RawRecord,
    ShowDetail,
)
from utils.exceptions import RecordShapeError, UnsupportedTypeError
from utils.sanitizer import sanitize


def _build(model, record: Any, fields: dict[str, Any]):
    try:
        return model(**fields)
    except ValidationError as e:
        raise RecordShapeError(f"Record {record.get('_id')!r} does not fit {model.__name__}: {e}") from e


def _check_record(record: Any) -> None:
    if not isinstance(record, dict):
        raise RecordShapeError(f"Expected a JSON object, got {type(record).__name__}")


def _ids(record: RawRecord) -> dict[str, Any]:
    anime_id = record.get("_id")
    if anime_id is None:
        return {}
    return {
        "mal_id": anime_id,
        "haru_id": anime_id,
        "tvdb_id": f"mal-{anime_id}",
        "imdb_id": anime_id,
    }


def _present(record: RawRecord, *keys: str) -> dict[str, Any]:
    return {key: record[key] for key in keys if record.get(key) is not None}


def to_summary(record: RawRecord) -> CatalogSummary:
    """Project one raw record onto the list-view schema.

    Raises:
        RecordShapeError: If the record is not an object or has bad field types
    """
    _check_record(record)
    fields = _ids(record)
    fields.update(_present(record, "slug", "title", "year", "genres", "rating", "images", "type", "num_seasons"))
    if record.get("type") is not None:
        fields["item_data"] = record["type"]
    return _build(CatalogSummary, record, fields)


def to_detail(record: RawRecord) -> CatalogDetail:
    """Build the detail variant matching the record's media type.

    Raises:
        UnsupportedTypeError: If the type is neither "show" nor "movie"
        RecordShapeError: If the record lacks an id or has bad field types
    """
    _check_record(record)
    media_type = record.get("type")
    base = _ids(record)
    base.update(_present(record, "slug", "title", "runtime", "synopsis", "rating", "images", "year"))
    base["item_data"] = media_type
    if record.get("genres") is not None:
        base["genre"] = record["genres"]
        base["genres"] = record["genres"]

    match media_type:
        case MediaType.SHOW.value:
            return _build(ShowDetail, record, base | _present(record, "status", "num_seasons", "episodes"))
        case MediaType.MOVIE.value:
            return _build(MovieDetail, record, base | _present(record, "torrents", "trailer"))
        case _:
            raise UnsupportedTypeError(media_type)


def _records(data: Any) -> list[RawRecord]:
    # Some mirrors wrap the page in {"results": [...]}
    if isinstance(data, dict):
        return data.get("results") or []
    return list(data or [])


def format_fetch(data: Any) -> dict[str, Any]:
    """Reshape a catalog page for the host.

    Args:
        data: List of raw records, or a mapping holding them under "results"

    Returns:
        {"results": [summary, ...], "hasMore": True}, sanitized
    """
    page = FetchResult(results=[to_summary(record) for record in _records(data)])
    return {
        "results": sanitize([item.model_dump(exclude_none=True) for item in page.results]),
        "hasMore": page.has_more,
    }


def format_detail(record: RawRecord) -> dict[str, Any]:
    """Reshape one detail record for the host (sanitized)."""
    return sanitize(to_detail(record).model_dump(exclude_none=True))
