"""
Go Playground share integration.

One POST per inbound request: the decoded code goes out as the raw body of a
form-urlencoded request and the playground answers with a plain-text share ID.
No retries. The response is released on every exit path.
"""

import asyncio
import logging

import aiohttp

from playground_proxy.core.errors import (
    UpstreamEmptyResult,
    UpstreamReadError,
    UpstreamRejected,
    UpstreamUnreachable,
)
from playground_proxy.integrations.http_client import SharedSession
from playground_proxy.schemas.share import ShareResult

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class PlaygroundClient:
    """Forwards code to the playground share endpoint and returns the share ID."""

    def __init__(self, share_url: str, http: SharedSession, logger: logging.Logger = logger):
        self.share_url = share_url
        self._http = http
        self._logger = logger

    async def share(self, code: bytes) -> ShareResult:
        """
        POST the `code` bytes to the share endpoint as they are.

        Raises UpstreamUnreachable, UpstreamRejected, UpstreamReadError or
        UpstreamEmptyResult; all of them are ShareError.
        """
        async with self._http.request_session() as session:
            try:
                response = await session.post(
                    self.share_url,
                    data=code,
                    headers={"Content-Type": FORM_CONTENT_TYPE},
                )
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.error(f"[SHARE] Failed to post to playground {self.share_url}: {e!r}")
                raise UpstreamUnreachable(f"failed to post to playground: {e!r}") from e

            try:
                return await self._read_share_id(response)
            finally:
                self._release(response)

    async def _read_share_id(self, response: aiohttp.ClientResponse) -> ShareResult:
        if response.status != 200:
            self._logger.error(
                f"[SHARE] Playground returned status {response.status} for {self.share_url}"
            )
            raise UpstreamRejected(response.status)

        try:
            body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._logger.error(f"[SHARE] Failed to read playground response: {e!r}")
            raise UpstreamReadError(f"failed to read response: {e!r}") from e

        share_id = body.decode("utf-8", errors="replace").strip()

        if not share_id:
            self._logger.error("[SHARE] Empty share ID received from playground")
            raise UpstreamEmptyResult("empty share ID received")

        self._logger.debug(f"[SHARE] Playground issued share ID {share_id}")
        return ShareResult(share_id=share_id)

    def _release(self, response: aiohttp.ClientResponse) -> None:
        # Close failures are diagnostic only; they never replace the result.
        try:
            response.release()
        except Exception as e:
            self._logger.error(f"[SHARE] Error closing response body: {e!r}")
