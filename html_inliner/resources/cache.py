# html_inliner/resources/cache.py
"""
Per-pass memo of fetch + encode results.
"""
from __future__ import annotations

from typing import Dict, Optional

from html_inliner.config import InlinerConfig
from html_inliner.errors import InlinerError
from html_inliner.logger import logger
from html_inliner.mime import encode
from html_inliner.resources.fetcher import ContentFetcher
from html_inliner.resources.models import ResolvedAddress


class ResourceCache:
    """Maps normalised addresses to their inlinable value for one pass.

    Exclusions are cached too, so every distinct address is fetched at most
    once. Fetch errors become exclusions (logged) unless ``config.strict``.
    """

    def __init__(self, fetcher: ContentFetcher, config: InlinerConfig) -> None:
        self.fetcher = fetcher
        self.config = config
        self.fetch_count = 0
        self._entries: Dict[str, Optional[str]] = {}

    def __contains__(self, address: ResolvedAddress) -> bool:
        return address.key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    async def resolve(self, address: ResolvedAddress) -> Optional[str]:
        key = address.key
        if key in self._entries:
            return self._entries[key]

        self.fetch_count += 1
        try:
            raw = await self.fetcher.fetch(address)
        except InlinerError as exc:
            if self.config.strict:
                raise
            logger.warning("Leaving %s as a reference: %s", address, exc)
            raw = None

        value = None if raw is None else encode(raw, address.extension, self.config.mime_types)
        self._entries[key] = value
        return value
