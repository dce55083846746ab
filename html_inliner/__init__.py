# html_inliner/__init__.py
"""
html_inliner package initializer.
Defines the package version and the one-call inlining API.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

__version__ = "0.1.0"

from html_inliner.config import InlinerConfig, load_config
from html_inliner.engine import Engine
from html_inliner.errors import (
    CyclicImportError,
    HttpRequestError,
    InlinerError,
    InvalidPathError,
    ResourceIOError,
)


def inline_file(path: Union[str, Path], config: Optional[InlinerConfig] = None) -> str:
    """Return the HTML file at *path* with every asset inlined; its directory is the root."""
    return Engine(config).inline_file(path)


def inline_html(html: str, root: Union[str, Path], config: Optional[InlinerConfig] = None) -> str:
    """Return *html* with every asset inlined, resolving relative references against *root*."""
    return Engine(config).inline_html(html, root)


async def inline_file_async(path: Union[str, Path], config: Optional[InlinerConfig] = None) -> str:
    return await Engine(config).inline_file_async(path)


async def inline_html_async(html: str, root: Union[str, Path], config: Optional[InlinerConfig] = None) -> str:
    return await Engine(config).inline_html_async(html, root)


__all__ = [
    "__version__",
    "CyclicImportError",
    "Engine",
    "HttpRequestError",
    "InlinerConfig",
    "InlinerError",
    "InvalidPathError",
    "ResourceIOError",
    "inline_file",
    "inline_file_async",
    "inline_html",
    "inline_html_async",
    "load_config",
]
