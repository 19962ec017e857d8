"""Global enums: order type values must match the on-ledger record byte."""

from enum import Enum, IntEnum


class OrderType(IntEnum):
    BUY = 0
    SELL = 1


class CellSource(str, Enum):
    INPUT = "INPUT"
    OUTPUT = "OUTPUT"


class ValidationPath(str, Enum):
    """Which branch of the entry dispatcher accepted the transaction."""
    ORDER = "ORDER"
    SIGNATURE = "SIGNATURE"
