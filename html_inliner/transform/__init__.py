"""html_inliner.transform: CSS inlining and the HTML document rewrite."""
from __future__ import annotations

from html_inliner.transform.css import CssInliner, minify_css
from html_inliner.transform.document import DocumentRewriter, ElementRole

__all__ = ["CssInliner", "DocumentRewriter", "ElementRole", "minify_css"]
