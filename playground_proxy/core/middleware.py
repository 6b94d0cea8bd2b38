"""
Request ID and access logging.

Every request gets an ID (the caller's X-Request-ID when present, otherwise a
fresh one). It is kept on `request.state.request_id`, echoed back in the
response header and included in the access log line.
"""

import logging
import time
import uuid

from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger("playground_proxy.access")


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "")


def _log_request(request: Request, status: int, started: float) -> None:
    latency_ms = (time.perf_counter() - started) * 1000
    client_ip = request.client.host if request.client else "-"
    logger.info(
        f"[REQUEST] {request.method} {request.url.path} "
        f"query_bytes={len(request.scope.get('query_string', b''))} "
        f"status={status} remote_ip={client_ip} "
        f"user_agent={request.headers.get('user-agent', '-')!r} "
        f"latency={latency_ms:.2f}ms request_id={get_request_id(request)}"
    )


async def request_context(request: Request, call_next):
    request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    started = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception:
        # Rendered as a 500 by the catch-all handler further out.
        _log_request(request, 500, started)
        raise

    response.headers[REQUEST_ID_HEADER] = get_request_id(request)
    _log_request(request, response.status_code, started)
    return response
