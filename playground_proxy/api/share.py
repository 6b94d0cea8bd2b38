"""
Share route: GET /?code=<percent-encoded source>

Forwards the code to the playground and redirects the caller to the viewer.
Failures are raised as ProxyError and rendered by the app's error handler.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from playground_proxy.config import Settings
from playground_proxy.core.code_decoder import extract_raw_param
from playground_proxy.core.dependencies import get_playground_client, get_settings
from playground_proxy.integrations.playground import PlaygroundClient
from playground_proxy.schemas.share import ErrorResponse
from playground_proxy.services.share_service import share_code

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Share"])


@router.get(
    "/",
    response_class=Response,
    status_code=302,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def share_redirect(
    request: Request,
    settings: Settings = Depends(get_settings),
    playground: PlaygroundClient = Depends(get_playground_client),
):
    """
    Shares `code` with the playground and answers 302 to the viewer URL.
    The query value is read undecoded and decoded exactly once.
    """
    raw_code = extract_raw_param(request.scope.get("query_string", b""))
    playground_url = await share_code(
        raw_code,
        playground=playground,
        base_url=settings.playground_base_url,
        max_bytes=settings.max_code_bytes,
        logger=logger,
    )
    # Location is sent verbatim, the share ID is not quoted
    return Response(status_code=302, headers={"location": playground_url})
