# html_inliner/mime.py
"""
Extension → content-type table and the byte encoder built on it.

An extension listed here means "binary, embed as a base64 data URI"; anything
else is treated as text and embedded literally. Stylesheets and scripts are
therefore deliberately absent from the table.
"""
from __future__ import annotations

import base64
from types import MappingProxyType
from typing import Mapping, Optional

__all__ = ("DEFAULT_MIME_TYPES", "normalize_extension", "expected_content_type", "encode")

DEFAULT_MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        # images
        "apng": "image/apng",
        "avif": "image/avif",
        "bmp": "image/bmp",
        "cur": "image/x-icon",
        "gif": "image/gif",
        "ico": "image/x-icon",
        "jpeg": "image/jpeg",
        "jpg": "image/jpeg",
        "png": "image/png",
        "svg": "image/svg+xml",
        "tif": "image/tiff",
        "tiff": "image/tiff",
        "webp": "image/webp",
        # fonts
        "eot": "application/vnd.ms-fontobject",
        "otf": "font/otf",
        "ttf": "font/ttf",
        "woff": "font/woff",
        "woff2": "font/woff2",
        # audio / video
        "flac": "audio/flac",
        "m4a": "audio/mp4",
        "mp3": "audio/mpeg",
        "oga": "audio/ogg",
        "ogg": "audio/ogg",
        "wav": "audio/wav",
        "mp4": "video/mp4",
        "ogv": "video/ogg",
        "webm": "video/webm",
        # documents
        "pdf": "application/pdf",
    }
)


def normalize_extension(extension: str) -> str:
    """``".PNG"`` → ``"png"``."""
    return extension.strip().lstrip(".").lower()


def expected_content_type(extension: str, mime_types: Mapping[str, str]) -> Optional[str]:
    """Content type implied by *extension*, or ``None`` if the table has no entry."""
    return mime_types.get(normalize_extension(extension))


def encode(raw: bytes, extension: str, mime_types: Mapping[str, str]) -> str:
    """Turn fetched bytes into the string that gets embedded.

    Table-listed extensions become ``data:<mime>;base64,<payload>``; everything
    else is decoded as UTF-8, replacing undecodable bytes instead of failing.
    """
    mime = expected_content_type(extension, mime_types)
    if mime is None:
        return raw.decode("utf-8", errors="replace")
    payload = base64.b64encode(raw).decode("ascii")
    return f"data:{mime};base64,{payload}"
