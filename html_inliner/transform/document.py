# html_inliner/transform/document.py
"""
Walks a parsed document and swaps external references for inlined content.

Binary/media references are handled first, then scripts and CSS, so that an
image inlined in the first pass is never looked at again.
"""
from __future__ import annotations

from enum import Enum
from typing import Awaitable, Callable, Dict, FrozenSet, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from html_inliner.context import PassContext
from html_inliner.logger import logger
from html_inliner.transform.css import CssInliner

__all__ = ("DocumentRewriter", "ElementRole", "classify_media", "classify_markup")


class ElementRole(Enum):
    MEDIA = "media"
    ICON = "icon"
    SCRIPT = "script"
    STYLE = "style"
    STYLESHEET = "stylesheet"
    INLINE_STYLE = "inline-style"
    NONE = "none"


ICON_RELS: FrozenSet[str] = frozenset(
    {"icon", "shortcut", "apple-touch-icon", "apple-touch-icon-precomposed", "mask-icon"}
)
MEDIA_ATTRIBUTES: Dict[str, Tuple[str, ...]] = {
    "img": ("src",),
    "video": ("src", "poster"),
    "audio": ("src",),
    "source": ("src",),
}
_DROPPED_SCRIPT_ATTRIBUTES = ("src", "integrity", "crossorigin")

_MEDIA_SELECTOR = "img, video, audio, source, link"
_MARKUP_SELECTOR = "script, style, link, [style]"


def _rel_tokens(tag: Tag) -> FrozenSet[str]:
    return frozenset(token.lower() for token in tag.get_attribute_list("rel") if token)


def classify_media(tag: Tag) -> ElementRole:
    if tag.name in MEDIA_ATTRIBUTES:
        return ElementRole.MEDIA
    if tag.name == "link" and _rel_tokens(tag) & ICON_RELS:
        return ElementRole.ICON
    return ElementRole.NONE


def classify_markup(tag: Tag) -> ElementRole:
    if tag.name == "script":
        return ElementRole.SCRIPT
    if tag.name == "style":
        return ElementRole.STYLE
    if tag.name == "link":
        return ElementRole.STYLESHEET if "stylesheet" in _rel_tokens(tag) else ElementRole.NONE
    if tag.name != "svg" and tag.has_attr("style"):
        return ElementRole.INLINE_STYLE
    return ElementRole.NONE


class DocumentRewriter:
    """Runs the two rewrite passes over one parsed document."""

    def __init__(self, context: PassContext) -> None:
        self.context = context
        self.css = CssInliner(context)
        self._handlers: Dict[ElementRole, Callable[[BeautifulSoup, Tag], Awaitable[None]]] = {
            ElementRole.MEDIA: self._inline_media,
            ElementRole.ICON: self._inline_icon,
            ElementRole.SCRIPT: self._inline_script,
            ElementRole.STYLE: self._inline_style_element,
            ElementRole.STYLESHEET: self._inline_stylesheet_link,
            ElementRole.INLINE_STYLE: self._inline_style_attribute,
        }

    async def rewrite(self, soup: BeautifulSoup) -> BeautifulSoup:
        for tag in soup.select(_MEDIA_SELECTOR):
            await self._dispatch(soup, tag, classify_media(tag))
        # collected up front: replacements must not be visited again
        for tag in soup.select(_MARKUP_SELECTOR):
            await self._dispatch(soup, tag, classify_markup(tag))
        return soup

    async def _dispatch(self, soup: BeautifulSoup, tag: Tag, role: ElementRole) -> None:
        handler = self._handlers.get(role)
        if handler is not None:
            await handler(soup, tag)

    async def _resolve_reference(self, reference: Optional[str]) -> Optional[str]:
        if not reference:
            return None
        address = self.context.resolver.resolve(reference)
        if address is None:
            return None
        return await self.context.cache.resolve(address)

    async def _inline_attribute(self, tag: Tag, attr: str) -> None:
        value = await self._resolve_reference(tag.get(attr))
        if value is not None:
            logger.debug("Inlining %s of <%s>", attr, tag.name)
            tag[attr] = value

    async def _inline_media(self, soup: BeautifulSoup, tag: Tag) -> None:
        for attr in MEDIA_ATTRIBUTES[tag.name]:
            await self._inline_attribute(tag, attr)

    async def _inline_icon(self, soup: BeautifulSoup, tag: Tag) -> None:
        await self._inline_attribute(tag, "href")

    async def _inline_script(self, soup: BeautifulSoup, tag: Tag) -> None:
        script = await self._resolve_reference(tag.get("src"))
        if script is None:
            return
        attrs = {k: v for k, v in tag.attrs.items() if k not in _DROPPED_SCRIPT_ATTRIBUTES}
        replacement = soup.new_tag("script", attrs=attrs)
        replacement.string = script
        logger.debug("Inlined script %s", tag.get("src"))
        tag.replace_with(replacement)

    async def _inline_style_element(self, soup: BeautifulSoup, tag: Tag) -> None:
        text = tag.string if tag.string is not None else tag.get_text()
        css = await self.css.inline(str(text))
        replacement = soup.new_tag("style", attrs=dict(tag.attrs))
        replacement.string = css
        tag.replace_with(replacement)

    async def _inline_stylesheet_link(self, soup: BeautifulSoup, tag: Tag) -> None:
        href = tag.get("href")
        address = self.context.resolver.resolve(href) if href else None
        if address is None:
            return
        css = await self.css.inline_stylesheet(address)
        if css is None:
            return
        attrs = {"media": tag["media"]} if tag.has_attr("media") else {}
        replacement = soup.new_tag("style", attrs=attrs)
        replacement.string = css
        logger.debug("Inlined stylesheet %s", address)
        tag.replace_with(replacement)

    async def _inline_style_attribute(self, soup: BeautifulSoup, tag: Tag) -> None:
        tag["style"] = await self.css.inline(tag["style"])
