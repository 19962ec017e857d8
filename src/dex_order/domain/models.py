"""Order domain models: pure dataclasses, no ledger dependency."""
from dataclasses import dataclass


@dataclass(frozen=True)
class OrderRecord:
    """Decoded contents of one order cell's data payload."""
    sudt_amount: int  # token amount locked in the cell
    dealt_amount: int = 0  # cumulative matched amount
    undealt_amount: int = 0  # remaining open amount
    price: int = 0  # fixed-point: real price * 10^10
    order_type: int = 0  # raw byte: 0 = BUY, 1 = SELL

    @property
    def is_open(self) -> bool:
        """Still carries both dealt and undealt amounts (not yet settled)."""
        return self.dealt_amount != 0 and self.undealt_amount != 0


@dataclass(frozen=True)
class LocatedOrder:
    """The before/after snapshots of the invoking order cell in one transaction."""
    index: int
    input_capacity: int
    output_capacity: int
    input_record: OrderRecord
    output_record: OrderRecord
