"""Binary order record codec.

Layout (little-endian):
  settled form, 16 bytes:  sudt_amount u128
  open form,    57 bytes:  sudt_amount u128 | dealt_amount u128 |
                           undealt_amount u128 | price u64 | order_type u8
"""

from src.dex_common.errors import EncodingError, WrongDataLengthOrFormatError
from src.dex_order.domain.models import OrderRecord

SUDT_LEN = 16
ORDER_LEN = 57

_U128_MAX = (1 << 128) - 1
_U64_MAX = (1 << 64) - 1
_U8_MAX = 0xFF


def decode(data: bytes) -> OrderRecord:
    """Decode a 16- or 57-byte payload. Any other length is rejected."""
    if len(data) not in (SUDT_LEN, ORDER_LEN):
        raise WrongDataLengthOrFormatError(len(data))
    sudt_amount = int.from_bytes(data[0:16], "little")
    if len(data) == SUDT_LEN:
        return OrderRecord(sudt_amount=sudt_amount)
    return OrderRecord(
        sudt_amount=sudt_amount,
        dealt_amount=int.from_bytes(data[16:32], "little"),
        undealt_amount=int.from_bytes(data[32:48], "little"),
        price=int.from_bytes(data[48:56], "little"),
        order_type=data[56],
    )


def encode(record: OrderRecord) -> bytes:
    """Encode the 57-byte open-order form."""
    _check_width("sudt_amount", record.sudt_amount, _U128_MAX)
    _check_width("dealt_amount", record.dealt_amount, _U128_MAX)
    _check_width("undealt_amount", record.undealt_amount, _U128_MAX)
    _check_width("price", record.price, _U64_MAX)
    _check_width("order_type", record.order_type, _U8_MAX)
    return (
        record.sudt_amount.to_bytes(16, "little")
        + record.dealt_amount.to_bytes(16, "little")
        + record.undealt_amount.to_bytes(16, "little")
        + record.price.to_bytes(8, "little")
        + record.order_type.to_bytes(1, "little")
    )


def encode_settled(sudt_amount: int) -> bytes:
    """Encode the 16-byte settled form."""
    _check_width("sudt_amount", sudt_amount, _U128_MAX)
    return sudt_amount.to_bytes(16, "little")


def _check_width(name: str, value: int, maximum: int) -> None:
    if not (0 <= value <= maximum):
        raise EncodingError(f"{name} out of range: {value}")
