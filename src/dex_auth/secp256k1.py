"""Default PubkeyRecoverer backed by libsecp256k1 through coincurve."""
from coincurve import PublicKey
from coincurve.context import GLOBAL_CONTEXT, Context


class Secp256k1Recoverer:
    """Recovers the compressed public key from a 65-byte (r | s | recid) signature."""

    def __init__(self, context: Context | None = None) -> None:
        self._context = context or GLOBAL_CONTEXT

    def load_prefilled_data(self) -> Context:
        return self._context

    def recover_pubkey(self, prefilled_data: Context, signature: bytes, message: bytes) -> bytes:
        # message is already a digest; no further hashing
        pubkey = PublicKey.from_signature_and_message(
            signature, message, hasher=None, context=prefilled_data
        )
        return pubkey.format(compressed=True)
