"""Custom exception hierarchy for the AnimeApi provider.

Provides specific exception types for each way a catalog request can fail,
so callers can tell connectivity problems apart from bad data.
"""


class AnimeApiError(Exception):
    """Base exception for all provider errors."""

    pass


class ConfigError(AnimeApiError):
    """Raised when provider configuration is invalid or missing."""

    pass


class MirrorError(AnimeApiError):
    """Raised when a single mirror fails to answer a request.

    Attributes:
        endpoint: Base URL of the mirror that failed
    """

    def __init__(self, message: str, endpoint: str | None = None):
        super().__init__(message)
        self.endpoint = endpoint


class TransportError(MirrorError):
    """Raised when a mirror cannot be reached (DNS, connection, timeout)."""

    pass


class HTTPStatusError(MirrorError):
    """Raised when a mirror answers with status >= 400."""

    def __init__(self, status_code: int, endpoint: str | None = None):
        super().__init__(f"Status Code is above 400 ({status_code})", endpoint)
        self.status_code = status_code


class EmptyBodyError(MirrorError):
    """Raised when a mirror answers successfully but returns no data."""

    def __init__(self, endpoint: str | None = None):
        super().__init__("No data returned", endpoint)


class RemoteError(MirrorError):
    """Raised when the response body carries the API's error flag."""

    pass


class UnsupportedTypeError(AnimeApiError):
    """Raised when a detail record is neither a movie nor a show."""

    def __init__(self, media_type):
        super().__init__(f"Unsupported media type: {media_type!r}")
        self.media_type = media_type


class RecordShapeError(AnimeApiError):
    """Raised when a raw record cannot be reshaped (missing id, wrong field types)."""

    pass


class StreamNotFoundError(AnimeApiError):
    """Raised when no torrent matches the requested language/quality."""

    pass


class ProviderNotFoundError(AnimeApiError):
    """Raised when a requested provider plugin is not loaded."""

    pass
