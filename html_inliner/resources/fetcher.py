# html_inliner/resources/fetcher.py
"""
Fetcher module: reads local files and issues HTTP GETs, applying the
font, remote, content-type and size policies before anything is inlined.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from html_inliner.config import InlinerConfig
from html_inliner.errors import HttpRequestError, InvalidPathError, ResourceIOError
from html_inliner.logger import logger
from html_inliner.mime import expected_content_type
from html_inliner.resources.models import ResolvedAddress


class ContentFetcher:
    """Retrieves raw bytes for a resolved address.

    ``None`` from :meth:`fetch` is an exclusion, never an error. Failures raise
    an :class:`~html_inliner.errors.InlinerError` subclass and are left to the
    caller to tolerate or propagate.
    """

    def __init__(self, config: InlinerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> ContentFetcher:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self.session is not None and not self.session.closed:
            await self.session.close()
        if self._owns_session:
            self.session = None

    async def fetch(self, address: ResolvedAddress) -> bytes | None:
        """Return the bytes behind *address*, or None if policy excludes it."""
        if not self.config.inline_fonts and self.config.is_font(address.extension):
            logger.info("Skipping font %s (font inlining disabled)", address)
            return None

        if address.remote:
            if not self.config.inline_remote:
                logger.info("Skipping remote %s (remote inlining disabled)", address)
                return None
            raw = await self._fetch_remote(address)
        else:
            raw = self._read_local(address)

        if raw is None:
            return None
        if self._too_large(len(raw)):
            logger.info("Skipping %s: %d bytes exceeds limit of %d", address, len(raw), self.config.max_inline_size)
            return None
        return raw

    def _too_large(self, size: int) -> bool:
        limit = self.config.max_inline_size
        return limit is not None and size > limit

    @staticmethod
    def _read_local(address: ResolvedAddress) -> bytes:
        path = Path(address.location)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise InvalidPathError(address.location, "file not found") from exc
        except ValueError as exc:
            # e.g. an embedded NUL from a percent-decoded reference
            raise InvalidPathError(address.location, str(exc)) from exc
        except OSError as exc:
            raise ResourceIOError(address.location, exc.strerror or str(exc)) from exc

    async def _session(self) -> ClientSession:
        if self.session is None or self.session.closed:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self._owns_session = True
        return self.session

    async def _fetch_remote(self, address: ResolvedAddress) -> bytes | None:
        session = await self._session()
        url = address.location
        try:
            async with session.get(url) as resp:
                if resp.status >= 400:
                    raise HttpRequestError(url, f"HTTP {resp.status}", status=resp.status)
                ctype = resp.headers.get("Content-Type")
                if ctype and not self._content_type_matches(address, ctype):
                    # error pages and other substitutes come back with the wrong type
                    logger.info("Skipping %s: content type %r does not match extension", url, ctype)
                    return None
                if resp.content_length is not None and self._too_large(resp.content_length):
                    logger.info("Skipping %s: announced %d bytes", url, resp.content_length)
                    return None
                return await resp.read()
        except asyncio.TimeoutError as exc:
            raise HttpRequestError(url, "request timed out") from exc
        except ClientError as exc:
            raise HttpRequestError(url, str(exc)) from exc

    def _content_type_matches(self, address: ResolvedAddress, header: str) -> bool:
        expected = expected_content_type(address.extension, self.config.mime_types)
        if expected is None:
            return True
        actual = header.split(";", 1)[0].strip().lower()
        return actual == expected.lower()
