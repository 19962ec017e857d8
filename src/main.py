"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.dex_common.errors import DexError
from src.dex_gateway.api.router import router as verification_router
from src.dex_gateway.application.response import rejected_response
from src.dex_gateway.middleware.request_log import VerdictLogMiddleware, record_rejected

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
)


app.add_middleware(VerdictLogMiddleware)


@app.exception_handler(DexError)
async def dex_error_handler(request: Request, exc: DexError) -> JSONResponse:
    record_rejected(request, exc)
    resp = rejected_response(exc, getattr(request.state, "request_id", None))
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(mode="json"),
    )


app.include_router(verification_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
