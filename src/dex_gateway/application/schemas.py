# src/dex_gateway/application/schemas.py
"""Pydantic schemas for the verification API.

Byte fields travel as hex strings, with or without a 0x prefix.
Capacities are shannons; token amounts are base units.
"""
from pydantic import BaseModel, Field, field_validator

from config.settings import settings
from src.dex_common.enums import ValidationPath

_U128_MAX = (1 << 128) - 1
_U64_MAX = (1 << 64) - 1


def parse_hex(v: str) -> bytes:
    """'0xABCD' or 'abcd' -> bytes; raises ValueError on bad hex."""
    raw = v[2:] if v.startswith(("0x", "0X")) else v
    return bytes.fromhex(raw)


class CellIn(BaseModel):
    capacity: int = Field(ge=0, le=_U64_MAX)
    lock_args: str
    data: str = ""

    @field_validator("lock_args", "data")
    @classmethod
    def valid_hex(cls, v: str) -> str:
        parse_hex(v)
        return v


class WitnessIn(BaseModel):
    input_type: str | None = None

    @field_validator("input_type")
    @classmethod
    def valid_hex(cls, v: str | None) -> str | None:
        if v is not None:
            parse_hex(v)
        return v


class VerifyTransactionRequest(BaseModel):
    script_args: str
    inputs: list[CellIn]
    outputs: list[CellIn]
    witnesses: list[WitnessIn] = []

    @field_validator("script_args")
    @classmethod
    def valid_hex(cls, v: str) -> str:
        parse_hex(v)
        return v

    @field_validator("inputs", "outputs")
    @classmethod
    def bounded_width(cls, v: list[CellIn]) -> list[CellIn]:
        if len(v) > settings.MAX_TRANSACTION_CELLS:
            raise ValueError(
                f"at most {settings.MAX_TRANSACTION_CELLS} cells per side, got {len(v)}"
            )
        return v


class VerifyTransactionResponse(BaseModel):
    accepted: bool
    path: ValidationPath


class OrderRecordBody(BaseModel):
    sudt_amount: int = Field(ge=0, le=_U128_MAX)
    dealt_amount: int = Field(0, ge=0, le=_U128_MAX)
    undealt_amount: int = Field(0, ge=0, le=_U128_MAX)
    price: int = Field(0, ge=0, le=_U64_MAX)
    order_type: int = Field(0, ge=0, le=0xFF)


class DecodeOrderRequest(BaseModel):
    data: str

    @field_validator("data")
    @classmethod
    def valid_hex(cls, v: str) -> str:
        parse_hex(v)
        return v


class DecodeOrderResponse(OrderRecordBody):
    settled: bool  # decoded from the 16-byte form


class EncodeOrderRequest(OrderRecordBody):
    settled: bool = False


class EncodeOrderResponse(BaseModel):
    data: str
