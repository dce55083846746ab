# html_inliner/transform/css.py
"""
Recursive CSS inlining.

Each stylesheet goes through four steps: comments are stripped, ``@import``
statements are replaced by the (recursively inlined) imported sheet, ``url()``
references are replaced by their data URI or literal text, and the result is
minified.
"""
from __future__ import annotations

import re
from typing import AbstractSet, List, Optional

from html_inliner.context import PassContext
from html_inliner.errors import CyclicImportError
from html_inliner.logger import logger
from html_inliner.resources.models import ResolvedAddress
from html_inliner.resources.resolver import is_data_uri

__all__ = ("CssInliner", "minify_css")

_COMMENT_RE = re.compile(r"/\*[^*]*\*+(?:[^/*][^*]*\*+)*/")
_IMPORT_RE = re.compile(
    r"""@import\s*
        (?:url\(\s*(?P<q1>["']?)(?P<url>[^"')]+?)(?P=q1)\s*\)
          |(?P<q2>["'])(?P<path>[^"']+)(?P=q2))
        \s*(?P<media>[^;]*);""",
    re.IGNORECASE | re.VERBOSE,
)
_URL_RE = re.compile(r"""url\(\s*(?P<q>["']?)(?P<ref>[^"')]+?)(?P=q)\s*\)""", re.IGNORECASE)

_MINIFY_RULES = (
    (re.compile(r"/\*.*?\*/", re.DOTALL), ""),
    (re.compile(r"\s+"), " "),
    (re.compile(r":\s+"), ":"),
    (re.compile(r"\s*([{};])\s*"), r"\1"),
    (re.compile(r";+}"), "}"),
)


def minify_css(css: str) -> str:
    """Collapse whitespace and drop redundant separators. Idempotent."""
    for pattern, replacement in _MINIFY_RULES:
        css = pattern.sub(replacement, css)
    return css.strip()


class CssInliner:
    """Inlines everything a piece of CSS references, recursing into imports."""

    def __init__(self, context: PassContext) -> None:
        self.context = context

    async def inline(self, css: str, base: Optional[str] = None, ancestors: AbstractSet[str] = frozenset()) -> str:
        """Inline *css* whose relative references resolve against *base*.

        *base* is a URL or a directory; ``None`` means the document root.
        *ancestors* holds the cache keys of the stylesheets currently being
        resolved above this one.
        """
        base = self.context.root_base if base is None else base
        css = _COMMENT_RE.sub("", css)

        pieces: List[str] = []
        pos = 0
        for match in _IMPORT_RE.finditer(css):
            pieces.append(await self._inline_urls(css[pos:match.start()], base))
            pieces.append(await self._inline_import(match, base, ancestors))
            pos = match.end()
        pieces.append(await self._inline_urls(css[pos:], base))
        return minify_css("".join(pieces))

    async def inline_stylesheet(
        self, address: ResolvedAddress, ancestors: AbstractSet[str] = frozenset()
    ) -> Optional[str]:
        """Fetch the stylesheet at *address* and inline it against its own location."""
        css = await self.context.cache.resolve(address)
        if css is None:
            return None
        return await self.inline(css, address.base, frozenset(ancestors) | {address.key})

    async def _inline_import(self, match: re.Match[str], base: str, ancestors: AbstractSet[str]) -> str:
        statement = match.group(0)
        reference = match.group("url") or match.group("path")
        media = match.group("media").strip()

        address = self.context.resolver.resolve(reference, base)
        if address is None:
            return statement
        try:
            if address.key in ancestors:
                raise CyclicImportError(address.location, "stylesheet imports itself")
            imported = await self.inline_stylesheet(address, ancestors)
        except CyclicImportError as exc:
            if self.context.config.strict:
                raise
            logger.warning("Leaving @import in place: %s", exc)
            return statement

        if imported is None:
            return statement
        logger.debug("Inlined @import %s", address)
        if media:
            return f"@media {media}{{{imported}}}"
        return imported

    async def _inline_urls(self, css: str, base: str) -> str:
        pieces: List[str] = []
        pos = 0
        for match in _URL_RE.finditer(css):
            pieces.append(css[pos:match.start()])
            pieces.append(await self._inline_url(match, base))
            pos = match.end()
        pieces.append(css[pos:])
        return "".join(pieces)

    async def _inline_url(self, match: re.Match[str], base: str) -> str:
        reference = match.group("ref").strip()
        if is_data_uri(reference):
            return match.group(0)

        address = self.context.resolver.resolve(reference, base)
        value = await self.context.cache.resolve(address) if address is not None else None
        if value is None:
            return f"url('{reference}')"
        if address.is_stylesheet:
            value = minify_css(value)
        return f"url('{value}')"
