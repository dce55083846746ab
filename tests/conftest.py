# File: tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

from html_inliner.config import InlinerConfig
from html_inliner.context import PassContext
from html_inliner.resources.fetcher import ContentFetcher
from html_inliner.resources.models import ResolvedAddress

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(64))
WOFF_BYTES = b"wOFF" + bytes(range(32))


class CountingFetcher(ContentFetcher):
    """ContentFetcher that records every address it is asked for."""

    def __init__(self, config: InlinerConfig) -> None:
        super().__init__(config)
        self.calls: List[str] = []

    async def fetch(self, address: ResolvedAddress) -> bytes | None:
        self.calls.append(address.location)
        return await super().fetch(address)


@pytest.fixture()
def site(tmp_path) -> Path:
    """
    Create a small on-disk site:

        index.html (empty), img/dot.png, fonts/icon.woff, js/app.js,
        css/b.css, css/site.css (url to ../img/dot.png)
    """
    for sub in ("img", "fonts", "js", "css"):
        (tmp_path / sub).mkdir()
    (tmp_path / "img" / "dot.png").write_bytes(PNG_BYTES)
    (tmp_path / "fonts" / "icon.woff").write_bytes(WOFF_BYTES)
    (tmp_path / "js" / "app.js").write_text("console.log('hi');", encoding="utf-8")
    (tmp_path / "css" / "b.css").write_text("body{color:red;}", encoding="utf-8")
    (tmp_path / "css" / "site.css").write_text(
        "/* site */\n.logo {\n  background: url(../img/dot.png) no-repeat;\n}\n", encoding="utf-8"
    )
    (tmp_path / "index.html").write_text("<html><body></body></html>", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def config() -> InlinerConfig:
    return InlinerConfig()


@pytest.fixture()
def make_context(site) -> Callable[..., PassContext]:
    """
    Return a factory building a PassContext rooted at *site* with a CountingFetcher.
    """

    def _make(**overrides) -> PassContext:
        cfg = InlinerConfig(**overrides)
        return PassContext.create(cfg, site, CountingFetcher(cfg))

    return _make
