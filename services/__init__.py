"""Request pipeline services.

Core services for catalog providers:
- query_builder: Filters to query-string parameters
- mirror_client: GET with sequential failover across mirrors
- shaping: Raw records to summary/detail schemas
- repository: Registry of loaded providers
"""

from services import mirror_client, query_builder, repository, shaping

__all__ = [
    "mirror_client",
    "query_builder",
    "repository",
    "shaping",
]
