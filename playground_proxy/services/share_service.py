"""
Share flow: decode the inbound code, forward it, compose the viewer URL.
"""

import logging
from typing import Optional

from playground_proxy.core.code_decoder import decode_code
from playground_proxy.integrations.playground import PlaygroundClient

logger = logging.getLogger(__name__)


def build_playground_url(base_url: str, share_id: str) -> str:
    """Viewer URL for a share ID. Plain concatenation, no escaping."""
    return base_url + share_id


async def share_code(
    raw_code: Optional[str],
    *,
    playground: PlaygroundClient,
    base_url: str,
    max_bytes: int,
    logger: logging.Logger = logger,
) -> str:
    """
    Turn the raw `code` query value into the playground URL to redirect to.

    Decoding failures are raised before the playground is contacted.
    """
    request = decode_code(raw_code, max_bytes=max_bytes, logger=logger)
    result = await playground.share(request.decoded)

    playground_url = build_playground_url(base_url, result.share_id)
    logger.info(f"[SHARE] Redirecting to playground: url={playground_url} share_id={result.share_id}")
    return playground_url
