# File: html_inliner/engine.py
"""html_inliner.engine: orchestration of one inlining pass (parse, rewrite, serialise)."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup

from html_inliner.config import InlinerConfig, load_config
from html_inliner.context import PassContext
from html_inliner.errors import InvalidPathError, ResourceIOError
from html_inliner.logger import logger
from html_inliner.resources.fetcher import ContentFetcher
from html_inliner.transform.document import DocumentRewriter

__all__ = ["Engine"]

PathLike = Union[str, Path]


def _read_document(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as exc:
        raise InvalidPathError(str(path), "HTML document not found") from exc
    except OSError as exc:
        raise ResourceIOError(str(path), exc.strerror or str(exc)) from exc


class Engine:
    """Facade for the CLI and library callers: one call is one pass with a fresh cache."""

    @staticmethod
    def load_config(path: Optional[PathLike]) -> InlinerConfig:
        """Load a config from YAML/JSON, or fall back to the defaults."""
        return load_config(path)

    def __init__(self, config: Optional[InlinerConfig] = None) -> None:
        self.config = config or InlinerConfig()

    def inline_file(self, path: PathLike) -> str:
        """Inline the HTML file at *path*, resolving relative references against its directory."""
        return asyncio.run(self.inline_file_async(path))

    def inline_html(self, html: str, root: PathLike) -> str:
        """Inline an HTML string whose relative references resolve against *root*."""
        return asyncio.run(self.inline_html_async(html, root))

    async def inline_file_async(self, path: PathLike) -> str:
        path = Path(path).expanduser()
        html = _read_document(path)
        return await self.inline_html_async(html, path.parent)

    async def inline_html_async(self, html: str, root: PathLike) -> str:
        root_path = Path(root).expanduser().resolve()
        logger.info("Inlining document rooted at %s", root_path)

        soup = BeautifulSoup(html, "html.parser")
        try:
            async with ContentFetcher(self.config) as fetcher:
                context = PassContext.create(self.config, root_path, fetcher)
                await DocumentRewriter(context).rewrite(soup)
        except Exception as exc:
            logger.error("Inlining failed: %s", exc)
            raise

        logger.info("Resolved %d distinct resources", len(context.cache))
        return str(soup)
