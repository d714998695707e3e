"""Custom exception hierarchy for anime-schedule.

Provides specific exception types for catalog failures so each view can
map them to its own message without inspecting transport details.
"""


class AnimeScheduleError(Exception):
    """Base exception for all anime-schedule errors."""

    pass


class CatalogError(AnimeScheduleError):
    """Raised when a catalog API call cannot produce a result."""

    pass


class NetworkError(CatalogError):
    """Raised on transport failure or a non-success HTTP status."""

    pass


class ParseError(CatalogError):
    """Raised when a response body is not valid JSON or has the wrong shape."""

    pass
