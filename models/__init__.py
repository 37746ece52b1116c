"""Data models and configuration.

Pydantic models and configuration:
- models: Filters, catalog summary/detail and provider descriptor models
- config: Centralized configuration (Pydantic Settings)
"""

from models.models import (
    CatalogDetail,
    CatalogSummary,
    FetchFilters,
    FetchResult,
    MediaType,
    MovieDetail,
    ProviderConfig,
    ShowDetail,
)
from models.config import settings, get_data_path

__all__ = [
    "CatalogDetail",
    "CatalogSummary",
    "FetchFilters",
    "FetchResult",
    "MediaType",
    "MovieDetail",
    "ProviderConfig",
    "ShowDetail",
    "settings",
    "get_data_path",
]
