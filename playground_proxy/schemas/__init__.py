from playground_proxy.schemas.share import ErrorResponse, ShareRequest, ShareResult

__all__ = [
    "ErrorResponse",
    "ShareRequest",
    "ShareResult",
]
