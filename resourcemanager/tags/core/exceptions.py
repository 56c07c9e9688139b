"""Custom exception hierarchy."""

from __future__ import annotations


class TagsError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(TagsError):
    """Failure while fetching a page from the service.

    Covers authentication, network, malformed response and server-side
    errors alike. ``status_code`` is set when the server answered with an
    HTTP error status.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(TagsError):
    """Invalid client configuration value."""

    pass
