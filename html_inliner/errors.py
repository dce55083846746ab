# html_inliner/errors.py
"""
Error taxonomy for the inliner.

Only root-document failures are always fatal. Asset-level errors are turned into
exclusions by :class:`~html_inliner.resources.cache.ResourceCache` unless the
configuration asks for strict mode.
"""
from __future__ import annotations

__all__ = (
    "InlinerError",
    "InvalidPathError",
    "ResourceIOError",
    "HttpRequestError",
    "CyclicImportError",
)


class InlinerError(Exception):
    """Base class for everything the inliner raises on purpose."""

    def __init__(self, location: str, reason: str = "") -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"{location}: {reason}" if reason else location)


class InvalidPathError(InlinerError):
    """Reference does not point at a readable location."""


class ResourceIOError(InlinerError):
    """Filesystem failure other than a missing file."""


class HttpRequestError(InlinerError):
    """Network failure, timeout or non-success HTTP status."""

    def __init__(self, location: str, reason: str = "", status: int | None = None) -> None:
        self.status = status
        super().__init__(location, reason)


class CyclicImportError(InlinerError):
    """An ``@import`` chain leads back to one of its own ancestors."""
