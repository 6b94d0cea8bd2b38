"""
Request-scoped error taxonomy.

Each error carries the status code and the generic message the caller sees.
Internal detail stays in the exception message and the logs.
"""

from typing import Optional


class ProxyError(Exception):
    """Base class for every failure the proxy turns into a JSON error response."""

    status_code = 500
    public_message = "Internal server error"


# ---------------------------------------------------------------------------
# Decoder / validator failures (client side)
# ---------------------------------------------------------------------------


class MissingParameter(ProxyError):
    status_code = 400
    public_message = "Missing 'code' parameter"


class InvalidParameter(ProxyError):
    status_code = 400
    public_message = "Invalid code parameter"


class PayloadTooLarge(ProxyError):
    status_code = 413
    public_message = "Code parameter too large"


# ---------------------------------------------------------------------------
# Upstream forwarder failures (collapsed to one generic 500)
# ---------------------------------------------------------------------------


class ShareError(ProxyError):
    status_code = 500
    public_message = "Failed to share code with playground"


class UpstreamUnreachable(ShareError):
    pass


class UpstreamRejected(ShareError):
    def __init__(self, status: int, message: Optional[str] = None):
        super().__init__(message or f"playground returned status {status}")
        self.status = status


class UpstreamReadError(ShareError):
    pass


class UpstreamEmptyResult(ShareError):
    pass
