# html_inliner/resources/resolver.py
"""
Turn a reference string found in HTML or CSS into an absolute address.
"""
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional, Union
from urllib.parse import unquote, urljoin, urlsplit
from urllib.request import url2pathname

from html_inliner.logger import logger
from html_inliner.resources.models import ResolvedAddress

__all__ = ("PathResolver", "is_data_uri", "is_remote")

_REMOTE_SCHEMES = ("http", "https")
_QUERY_OR_FRAGMENT = re.compile(r"[?#]")


def is_data_uri(reference: str) -> bool:
    return reference.lstrip()[:5].lower() == "data:"


def is_remote(location: str) -> bool:
    return urlsplit(location).scheme.lower() in _REMOTE_SCHEMES


class PathResolver:
    """Resolves references against a base location (a URL or a directory).

    URLs are taken as-is, or joined against the base when the base is itself a
    URL. Everything else is a filesystem path: absolute paths are used as they
    are, relative ones are joined to the base directory.
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = str(root)

    def resolve(self, reference: str, base: Optional[str] = None) -> Optional[ResolvedAddress]:
        """Return the absolute address, or None when there is nothing to fetch."""
        reference = reference.strip()
        if not reference or reference.startswith("#") or is_data_uri(reference):
            return None
        base = self.root if base is None else str(base)
        try:
            return self._resolve(reference, base)
        except ValueError as exc:
            # malformed URLs such as an unterminated IPv6 host
            logger.info("Leaving malformed reference %r: %s", reference, exc)
            return None

    def _resolve(self, reference: str, base: str) -> Optional[ResolvedAddress]:
        if reference.startswith("//"):
            scheme = urlsplit(base).scheme if is_remote(base) else "https"
            reference = f"{scheme}:{reference}"

        scheme = urlsplit(reference).scheme.lower()
        if scheme in _REMOTE_SCHEMES:
            return ResolvedAddress(reference, remote=True)
        if scheme == "file":
            return self._local(url2pathname(urlsplit(reference).path), base)
        # single letters are Windows drive names, not schemes
        if len(scheme) > 1:
            return None

        if is_remote(base):
            return ResolvedAddress(urljoin(base, reference), remote=True)
        return self._local(unquote(_QUERY_OR_FRAGMENT.split(reference, 1)[0]), base)

    @staticmethod
    def _local(path: str, base: str) -> Optional[ResolvedAddress]:
        if not path:
            return None
        if not os.path.isabs(path):
            path = os.path.join(base, path)
        return ResolvedAddress(os.path.normpath(path), remote=False)
