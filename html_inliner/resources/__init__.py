"""html_inliner.resources: address resolution, fetching and per-pass caching."""
from __future__ import annotations

from html_inliner.resources.cache import ResourceCache
from html_inliner.resources.fetcher import ContentFetcher
from html_inliner.resources.models import ResolvedAddress
from html_inliner.resources.resolver import PathResolver, is_data_uri

__all__ = ["ContentFetcher", "PathResolver", "ResolvedAddress", "ResourceCache", "is_data_uri"]
