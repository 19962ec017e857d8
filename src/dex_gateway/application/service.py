"""Verification application service: request schemas <-> engine."""
from src.dex_auth.signature import PubkeyRecoverer
from src.dex_gateway.application.schemas import (
    CellIn,
    DecodeOrderResponse,
    EncodeOrderRequest,
    EncodeOrderResponse,
    VerifyTransactionRequest,
    VerifyTransactionResponse,
    parse_hex,
)
from src.dex_entry.dispatcher import verify_transaction
from src.dex_ledger.domain.models import Cell, TransactionSnapshot, Witness
from src.dex_order.domain import codec
from src.dex_order.domain.models import OrderRecord


def _to_cell(cell: CellIn) -> Cell:
    return Cell(
        capacity=cell.capacity,
        lock_args=parse_hex(cell.lock_args),
        data=parse_hex(cell.data),
    )


def to_snapshot(req: VerifyTransactionRequest) -> TransactionSnapshot:
    return TransactionSnapshot(
        script_args=parse_hex(req.script_args),
        inputs=tuple(_to_cell(c) for c in req.inputs),
        outputs=tuple(_to_cell(c) for c in req.outputs),
        witnesses=tuple(
            Witness(input_type=None if w.input_type is None else parse_hex(w.input_type))
            for w in req.witnesses
        ),
    )


class VerificationService:
    def __init__(self, recoverer: PubkeyRecoverer | None = None) -> None:
        self._recoverer = recoverer

    def verify(self, req: VerifyTransactionRequest) -> VerifyTransactionResponse:
        path = verify_transaction(to_snapshot(req), self._recoverer)
        return VerifyTransactionResponse(accepted=True, path=path)

    def decode_order(self, data: str) -> DecodeOrderResponse:
        raw = parse_hex(data)
        record = codec.decode(raw)
        return DecodeOrderResponse(
            sudt_amount=record.sudt_amount,
            dealt_amount=record.dealt_amount,
            undealt_amount=record.undealt_amount,
            price=record.price,
            order_type=record.order_type,
            settled=len(raw) == codec.SUDT_LEN,
        )

    def encode_order(self, req: EncodeOrderRequest) -> EncodeOrderResponse:
        if req.settled:
            return EncodeOrderResponse(data="0x" + codec.encode_settled(req.sudt_amount).hex())
        record = OrderRecord(
            sudt_amount=req.sudt_amount,
            dealt_amount=req.dealt_amount,
            undealt_amount=req.undealt_amount,
            price=req.price,
            order_type=req.order_type,
        )
        return EncodeOrderResponse(data="0x" + codec.encode(record).hex())
