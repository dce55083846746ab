# html_inliner/resources/models.py
"""
Data models for resolved resource addresses.
"""
from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit


@dataclass(frozen=True, slots=True)
class ResolvedAddress:
    """Absolute URL (``remote=True``) or absolute filesystem path of one asset."""

    location: str
    remote: bool = False

    @property
    def key(self) -> str:
        """Cache key: the address without query string or fragment."""
        if not self.remote:
            return self.location
        parts = urlsplit(self.location)
        return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), parts.path, "", ""))

    @property
    def extension(self) -> str:
        """Lower-case extension without the dot, ``""`` if there is none."""
        if self.remote:
            suffix = posixpath.splitext(urlsplit(self.location).path)[1]
        else:
            suffix = os.path.splitext(self.location)[1]
        return suffix.lstrip(".").lower()

    @property
    def base(self) -> str:
        """Location that references found inside this asset are resolved against."""
        if self.remote:
            return self.location
        return os.path.dirname(self.location)

    @property
    def is_stylesheet(self) -> bool:
        return self.extension == "css"

    def __str__(self) -> str:
        return self.location
