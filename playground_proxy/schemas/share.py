from pydantic import BaseModel, Field


class ShareRequest(BaseModel):
    raw: str
    decoded: bytes


class ShareResult(BaseModel):
    share_id: str = Field(..., min_length=1)


class ErrorResponse(BaseModel):
    error: str
