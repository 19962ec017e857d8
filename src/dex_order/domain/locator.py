"""Locate the invoking order cell's input/output pair within a transaction."""
import logging

from src.dex_common.enums import CellSource
from src.dex_common.errors import (
    DuplicateOrderCellError,
    EncodingError,
    InputsAndOutputsAmountNotSameError,
    ItemMissingError,
)
from src.dex_ledger.domain.repository import LedgerReader
from src.dex_order.domain import codec
from src.dex_order.domain.models import LocatedOrder

logger = logging.getLogger(__name__)

IDENTITY_LEN = 20


def owner_identity(script_args: bytes) -> bytes:
    """First 20 bytes of the script args: the order owner's pubkey hash."""
    if len(script_args) < IDENTITY_LEN:
        raise EncodingError(
            f"Script args must be at least {IDENTITY_LEN} bytes, got {len(script_args)}"
        )
    return script_args[:IDENTITY_LEN]


def find_order_index(ledger: LedgerReader, identity: bytes) -> int:
    """Scan outputs for the single cell whose lock args start with identity."""
    found: int | None = None
    for index in range(ledger.output_count()):
        lock_args = ledger.load_output_lock_args(index)
        if lock_args[:IDENTITY_LEN] != identity:
            continue
        if found is not None:
            raise DuplicateOrderCellError(found, index)
        found = index
    if found is None:
        raise ItemMissingError(f"No output cell matches owner {identity.hex()}")
    return found


def locate_order(ledger: LedgerReader) -> LocatedOrder:
    """Load capacities and decoded records of the order cell before and after.

    Inputs and outputs must correspond 1:1 by position; the output at the
    matched index is the settlement of the input at the same index.
    """
    identity = owner_identity(ledger.load_script_args())
    inputs, outputs = ledger.input_count(), ledger.output_count()
    if inputs != outputs:
        raise InputsAndOutputsAmountNotSameError(inputs, outputs)

    index = find_order_index(ledger, identity)
    located = LocatedOrder(
        index=index,
        input_capacity=ledger.load_cell_capacity(index, CellSource.INPUT),
        output_capacity=ledger.load_cell_capacity(index, CellSource.OUTPUT),
        input_record=codec.decode(ledger.load_cell_data(index, CellSource.INPUT)),
        output_record=codec.decode(ledger.load_cell_data(index, CellSource.OUTPUT)),
    )
    logger.debug(
        "Order cell located: index=%d, capacity %d -> %d",
        index, located.input_capacity, located.output_capacity,
    )
    return located
