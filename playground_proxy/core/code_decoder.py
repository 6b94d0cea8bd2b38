"""
Extraction and percent-decoding of the inbound `code` query parameter.

The raw value is read from the undecoded query string and decoded exactly
once, with query semantics: `+` is a space and `%XX` is a byte. Anything that
fails here is rejected before the upstream is contacted.
"""

import logging
import re
from typing import Optional, Union
from urllib.parse import unquote_plus, unquote_to_bytes

from playground_proxy.core.errors import InvalidParameter, MissingParameter, PayloadTooLarge
from playground_proxy.schemas.share import ShareRequest

logger = logging.getLogger(__name__)

CODE_PARAM = "code"

# A '%' that does not introduce two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_LOG_PREVIEW_CHARS = 80


def _preview(raw: str) -> str:
    if len(raw) <= _LOG_PREVIEW_CHARS:
        return raw
    return f"{raw[:_LOG_PREVIEW_CHARS]}... ({len(raw)} chars)"


def extract_raw_param(
    query_string: Union[bytes, str],
    name: str = CODE_PARAM,
) -> Optional[str]:
    """
    Return the first still-encoded value for `name`, or None when absent.

    Accepts the ASGI `query_string` bytes directly. Bytes that are not UTF-8
    are carried through as surrogate escapes and restored by decode_code().
    """
    if isinstance(query_string, bytes):
        query_string = query_string.decode("utf-8", errors="surrogateescape")

    for pair in query_string.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        if unquote_plus(key) == name:
            return value
    return None


def decode_code(
    raw: Optional[str],
    *,
    max_bytes: int,
    logger: logging.Logger = logger,
) -> ShareRequest:
    """
    Percent-decode the raw `code` value.

    Raises MissingParameter for an absent or empty value, InvalidParameter for
    a malformed escape, PayloadTooLarge above `max_bytes`. The decoded bytes are
    kept as they are; the playground decides what is valid code.
    """
    if not raw:
        logger.warning("[DECODE] Request without 'code' parameter")
        raise MissingParameter("code parameter absent or empty")

    bad = _BAD_ESCAPE.search(raw)
    if bad:
        logger.error(
            f"[DECODE] Malformed percent-escape at offset {bad.start()}: {_preview(raw)!r}"
        )
        raise InvalidParameter(f"invalid URL escape at offset {bad.start()}")

    encoded = raw.encode("utf-8", errors="surrogateescape")
    data = unquote_to_bytes(encoded.replace(b"+", b" "))

    if len(data) > max_bytes:
        logger.warning(f"[DECODE] Code too large: {len(data)} bytes (max {max_bytes})")
        raise PayloadTooLarge(f"decoded code is {len(data)} bytes, max {max_bytes}")

    # pydantic rejects lone surrogates, so stray raw bytes are kept as \xNN text
    return ShareRequest(raw=encoded.decode("utf-8", errors="backslashreplace"), decoded=data)
