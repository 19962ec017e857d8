"""Verdict logging middleware.

Handlers record the outcome on request.state.verdict: the accepting
ValidationPath ("path=ORDER", "path=SIGNATURE") or the rejection code
("code=13"). This middleware assigns the request id and writes one line per
request once the response is ready:

    INFO [POST] /api/v1/transactions/verify → 422 (2ms) code=15 req_a1b2c3d4e5f6

Requests that never reached the engine (schema errors, codec endpoints)
log verdict "-".
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.dex_common.enums import ValidationPath
from src.dex_common.errors import DexError

logger = logging.getLogger("dex.request")


def record_accepted(request: Request, path: ValidationPath) -> None:
    request.state.verdict = f"path={path.value}"


def record_rejected(request: Request, exc: DexError) -> None:
    request.state.verdict = f"code={exc.code}"


class VerdictLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = f"req_{uuid.uuid4().hex[:12]}"
        request.state.verdict = "-"

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        level = logging.WARNING if request.state.verdict.startswith("code=") else logging.INFO
        logger.log(
            level,
            "[%s] %s → %d (%.0fms) %s %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request.state.verdict,
            request.state.request_id,
        )
        return response
