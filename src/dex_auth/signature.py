"""Owner-signed cancellation path.

Witness input_type layout: message digest (32 bytes) | recoverable signature (65 bytes).
The signer's public key is recovered, hashed with CKB's personalized blake2b,
and its first 20 bytes must equal the script args.
"""
import hashlib
import logging
from typing import Any, Protocol

from src.dex_common.errors import (
    EncodingError,
    LoadPrefilledDataError,
    RecoverPubkeyError,
    WrongPubkeyError,
)

logger = logging.getLogger(__name__)

MESSAGE_LEN = 32
SIGNATURE_LEN = 65
PUBKEY_HASH_LEN = 20
_CKB_HASH_PERSONAL = b"ckb-default-hash"


class PubkeyRecoverer(Protocol):
    """Signature recovery capability supplied by an external secp256k1 library."""

    def load_prefilled_data(self) -> Any: ...

    def recover_pubkey(self, prefilled_data: Any, signature: bytes, message: bytes) -> bytes: ...


def ckb_blake2b(data: bytes) -> bytes:
    """32-byte blake2b with CKB's default personalization."""
    return hashlib.blake2b(data, digest_size=32, person=_CKB_HASH_PERSONAL).digest()


def split_witness(witness: bytes) -> tuple[bytes, bytes]:
    """Return (message, signature) from the witness input_type bytes."""
    if len(witness) != MESSAGE_LEN + SIGNATURE_LEN:
        raise EncodingError(
            f"Witness must be {MESSAGE_LEN + SIGNATURE_LEN} bytes, got {len(witness)}"
        )
    return witness[:MESSAGE_LEN], witness[MESSAGE_LEN:]


def verify_owner_signature(
    script_args: bytes, witness: bytes, recoverer: PubkeyRecoverer
) -> None:
    """Raise unless the witness signature was made by the owner named in script_args."""
    if len(script_args) != PUBKEY_HASH_LEN:
        raise EncodingError(
            f"Script args must be {PUBKEY_HASH_LEN} bytes, got {len(script_args)}"
        )
    message, signature = split_witness(witness)

    try:
        prefilled = recoverer.load_prefilled_data()
    except Exception as exc:
        raise LoadPrefilledDataError(str(exc)) from exc
    try:
        pubkey = recoverer.recover_pubkey(prefilled, signature, message)
    except Exception as exc:
        raise RecoverPubkeyError(str(exc)) from exc

    pubkey_hash = ckb_blake2b(pubkey)[:PUBKEY_HASH_LEN]
    if pubkey_hash != script_args:
        logger.debug(
            "Pubkey hash mismatch: recovered=%s, expected=%s",
            pubkey_hash.hex(), script_args.hex(),
        )
        raise WrongPubkeyError()
