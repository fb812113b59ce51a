"""
Exceptions raised at the fetch and persistence boundaries.
"""

from __future__ import annotations


class NytgError(Exception):
    """Base class for every error raised by nytg."""


class FetchError(NytgError):
    """A puzzle could not be obtained for a (game, date) pair."""

    log_line = "Failed to download game"


class NetworkFailure(FetchError):
    """Transport-level failure (DNS, refused connection, timeout...)."""


class MalformedResponse(FetchError):
    """The response body is not a JSON object."""

    log_line = "Failed to convert data to JSON"


class ServerError(FetchError):
    """The service answered with an error status payload."""


class StateLoadError(NytgError):
    """The persisted state blob could not be decoded."""
