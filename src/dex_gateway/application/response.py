"""Verdict envelope returned by every verification endpoint.

  accepted:  {"code": 0,  "message": "accepted", "data": {...}}
  rejected:  {"code": 13, "message": "Wrong sUDT diff amount: ...", "data": null}

code is the DexError code of the first violated rule, so an HTTP client sees
the same number the script would exit with.
"""

import uuid

from pydantic import BaseModel, Field

from src.dex_common.errors import DexError
from src.dex_gateway.application.schemas import (
    DecodeOrderResponse,
    EncodeOrderResponse,
    VerifyTransactionResponse,
)

ResponseData = VerifyTransactionResponse | DecodeOrderResponse | EncodeOrderResponse


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "accepted"
    data: ResponseData | None = None
    request_id: str = Field(default_factory=lambda: f"req_{uuid.uuid4().hex[:12]}")


def accepted_response(data: ResponseData, request_id: str | None = None) -> ApiResponse:
    resp = ApiResponse(data=data)
    if request_id:
        resp.request_id = request_id
    return resp


def rejected_response(exc: DexError, request_id: str | None = None) -> ApiResponse:
    resp = ApiResponse(code=exc.code, message=exc.message)
    if request_id:
        resp.request_id = request_id
    return resp
