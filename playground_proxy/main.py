"""
Go Playground Proxy application factory and entry point.

    python -m playground_proxy
    GOPLAY_PORT=9090 GOPLAY_LOG_LEVEL=debug playground-proxy
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from playground_proxy.api import share, system
from playground_proxy.config import Settings
from playground_proxy.core.errors import ProxyError
from playground_proxy.core.middleware import REQUEST_ID_HEADER, get_request_id, request_context
from playground_proxy.integrations.http_client import SharedSession
from playground_proxy.integrations.playground import PlaygroundClient
from playground_proxy.logging_config import configure_logging

logger = logging.getLogger(__name__)

# Room for the request line and headers on top of a fully %-encoded max-size code
_REQUEST_HEADROOM_BYTES = 16 * 1024


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    await app.state.http.initialize()
    yield
    await app.state.http.close()


def _error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers={REQUEST_ID_HEADER: get_request_id(request)},
    )


async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    # Detail was logged where the error was raised; the caller only gets the generic message.
    logger.info(
        f"[ERROR HANDLER] Returning {exc.status_code} to client "
        f"({type(exc).__name__}) request_id={get_request_id(request)}"
    )
    return _error_response(request, exc.status_code, exc.public_message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # The server logs the traceback when the error is re-raised past this handler
    logger.error(
        f"[ERROR HANDLER] Unhandled {type(exc).__name__} on {request.method} {request.url.path} "
        f"request_id={get_request_id(request)}"
    )
    return _error_response(request, 500, ProxyError.public_message)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app around one immutable Settings object."""
    settings = settings or Settings()

    app = FastAPI(title="Go Playground Proxy", lifespan=lifespan)
    app.state.settings = settings
    app.state.http = SharedSession()
    app.state.playground = PlaygroundClient(
        settings.playground_share_url,
        app.state.http,
        logger=logging.getLogger("playground_proxy.integrations.playground"),
    )

    app.add_exception_handler(ProxyError, proxy_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.middleware("http")(request_context)

    app.include_router(system.router)
    app.include_router(share.router)
    return app


def run(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings()
    level = configure_logging(settings.log_level)

    logger.info(
        f"[STARTUP] Go Playground Proxy starting port={settings.port} log_level={settings.log_level}"
    )
    logger.info(f"[STARTUP] Usage: http://localhost:{settings.port}/?code={{code}}")

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=level,
        access_log=False,
        # h11 rejects request lines above 16 KB by default
        h11_max_incomplete_event_size=settings.max_code_bytes * 3 + _REQUEST_HEADROOM_BYTES,
    )


if __name__ == "__main__":
    run()
