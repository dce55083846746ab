# html_inliner/context.py
"""Explicit state for a single inlining pass."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from html_inliner.config import InlinerConfig
from html_inliner.resources.cache import ResourceCache
from html_inliner.resources.fetcher import ContentFetcher
from html_inliner.resources.resolver import PathResolver


@dataclass(slots=True)
class PassContext:
    """Owned by exactly one pass; never shared between documents."""

    config: InlinerConfig
    root: Path
    resolver: PathResolver
    cache: ResourceCache

    @classmethod
    def create(cls, config: InlinerConfig, root: Path, fetcher: ContentFetcher) -> PassContext:
        return cls(
            config=config,
            root=root,
            resolver=PathResolver(root),
            cache=ResourceCache(fetcher, config),
        )

    @property
    def root_base(self) -> str:
        return str(self.root)
