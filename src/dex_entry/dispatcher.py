"""Entry point: route a transaction to the order checks or the owner-signature path.

A non-empty input_type in the script group's first witness means the owner is
cancelling or withdrawing the order; otherwise the transaction must be a
valid fill of the order cell.
"""
import logging

from src.dex_auth.signature import PubkeyRecoverer, verify_owner_signature
from src.dex_common.enums import ValidationPath
from src.dex_common.errors import DexError
from src.dex_ledger.domain.repository import LedgerReader
from src.dex_order.domain.locator import locate_order
from src.dex_order.domain.validator import validate_located_order

logger = logging.getLogger(__name__)


def select_path(ledger: LedgerReader) -> ValidationPath:
    if ledger.witness_count() == 0:
        return ValidationPath.ORDER
    input_type = ledger.load_witness_input_type(0)
    if input_type:
        return ValidationPath.SIGNATURE
    return ValidationPath.ORDER


def verify_transaction(
    ledger: LedgerReader, recoverer: PubkeyRecoverer | None = None
) -> ValidationPath:
    """Validate one transaction. Returns the accepting path or raises DexError."""
    path = select_path(ledger)
    logger.info("Validating transaction via %s path", path.value)
    try:
        if path == ValidationPath.SIGNATURE:
            if recoverer is None:
                raise ValueError("Signature path requires a PubkeyRecoverer")
            witness = ledger.load_witness_input_type(0) or b""
            verify_owner_signature(ledger.load_script_args(), witness, recoverer)
        else:
            validate_located_order(locate_order(ledger))
    except DexError as exc:
        logger.warning(
            "Transaction rejected: path=%s, code=%d, %s", path.value, exc.code, exc.message
        )
        raise
    return path
