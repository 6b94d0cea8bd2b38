"""
Shared aiohttp ClientSession, opened once during the FastAPI lifespan.

Reusing a single session avoids a TCP/TLS handshake with the playground on
every request.

Usage:
    async with http.request_session() as sess:
        response = await sess.post(url, data=payload)
        ...

The context manager yields the shared session when available, otherwise
creates and closes a temporary one (covers tests and pre-init calls).
No timeout override: aiohttp's client default applies.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)


class SharedSession:
    def __init__(self, logger: logging.Logger = logger):
        self._logger = logger
        self.session: Optional[aiohttp.ClientSession] = None

    async def initialize(self) -> None:
        self.session = aiohttp.ClientSession()
        self._logger.info("[STARTUP] Shared HTTP session initialized")

    async def close(self) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
            self.session = None
            self._logger.info("[SHUTDOWN] Shared HTTP session closed")

    @asynccontextmanager
    async def request_session(self):
        """
        Yield the shared session if available, otherwise a temporary one.

        Never closes the shared session; close() handles that.
        """
        if self.session and not self.session.closed:
            yield self.session
        else:
            tmp = aiohttp.ClientSession()
            try:
                yield tmp
            finally:
                await tmp.close()
