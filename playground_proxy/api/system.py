"""
System / health routes.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"
