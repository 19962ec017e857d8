"""Verification REST endpoints.

POST /transactions/verify  : run the order/signature checks on one transaction
POST /orders/decode        : decode an order record payload
POST /orders/encode        : encode an order record payload
"""

from fastapi import APIRouter, Request

from src.dex_auth.secp256k1 import Secp256k1Recoverer
from src.dex_gateway.application.response import ApiResponse, accepted_response
from src.dex_gateway.application.schemas import (
    DecodeOrderRequest,
    EncodeOrderRequest,
    VerifyTransactionRequest,
)
from src.dex_gateway.application.service import VerificationService
from src.dex_gateway.middleware.request_log import record_accepted

router = APIRouter(tags=["verification"])

_service = VerificationService(recoverer=Secp256k1Recoverer())


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.post("/transactions/verify")
async def verify_transaction(req: VerifyTransactionRequest, request: Request) -> ApiResponse:
    result = _service.verify(req)
    record_accepted(request, result.path)
    return accepted_response(result, _request_id(request))


@router.post("/orders/decode")
async def decode_order(req: DecodeOrderRequest, request: Request) -> ApiResponse:
    return accepted_response(_service.decode_order(req.data), _request_id(request))


@router.post("/orders/encode")
async def encode_order(req: EncodeOrderRequest, request: Request) -> ApiResponse:
    return accepted_response(_service.encode_order(req), _request_id(request))
