"""Translate host filters into AnimeApi query-string parameters."""

import re

from models.models import FetchFilters

DEFAULT_SORT = "seeds"
DEFAULT_LIMIT = "50"

# Sorter value meaning "keep the API default"
NO_OVERRIDE_SORTER = "popularity"

_WHITESPACE_RE = re.compile(r"\s")


def format_keywords(keywords: str) -> str:
    """Replace every whitespace character with the API's literal '% ' separator."""
    return _WHITESPACE_RE.sub("% ", keywords)


def resolve_page(filters: FetchFilters) -> int:
    """Page to request; 1 when the filters carry none."""
    return filters.page or 1


def build_query(filters: FetchFilters | dict | None = None) -> dict[str, str]:
    """Build the query parameters for a catalog page request.

    Only filters that are present end up in the query; values are passed
    through verbatim apart from the keyword separator.

    Args:
        filters: FetchFilters or a plain mapping with the same keys

    Returns:
        Mapping of parameter name to string value
    """
    if filters is None:
        filters = FetchFilters()
    elif isinstance(filters, dict):
        filters = FetchFilters(**filters)

    params = {"sort": DEFAULT_SORT, "limit": DEFAULT_LIMIT}

    if filters.keywords:
        params["keywords"] = format_keywords(filters.keywords)
    if filters.genre:
        params["genre"] = filters.genre
    if filters.order is not None and filters.order != "":
        params["order"] = str(filters.order)
    if filters.sorter and filters.sorter != NO_OVERRIDE_SORTER:
        params["sort"] = filters.sorter

    return params
