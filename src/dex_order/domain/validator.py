"""Order state transition checks: buy and sell conservation rules.

One order cell is compared before (input) and after (output) a fill:

  BUY  (pay capacity, receive sUDT):
    capacity never grows, sUDT never shrinks, undealt never grows
    sUDT received == undealt consumed (exact)
    undealt consumed <= capacity paid / (1 + FEE) / price   (+ tolerance)

  SELL (pay sUDT, receive capacity):
    capacity never shrinks, sUDT never grows, undealt never grows
    sUDT paid <= undealt consumed * (1 + FEE)                (+ tolerance)
    capacity received >= sUDT paid / (1 + FEE) / price

While the output is still an open order, dealt must grow by exactly the
undealt consumed. The price always comes from the input record.
"""
import logging

from src.dex_common.enums import OrderType
from src.dex_common.errors import (
    DexError,
    OrderPriceNotZeroError,
    WrongDiffCapacityError,
    WrongOrderTypeError,
    WrongSUDTDiffAmountError,
    WrongSUDTInputAmountError,
    WrongSwapAmountError,
)
from src.dex_common.fixed_point import (
    exceeds_tolerance,
    fee_adjusted,
    fee_removed,
    order_price,
    to_display,
)
from src.dex_order.domain.models import LocatedOrder, OrderRecord

logger = logging.getLogger(__name__)


def validate_order_transition(
    input_record: OrderRecord,
    output_record: OrderRecord,
    input_capacity: int,
    output_capacity: int,
) -> None:
    """Raise the first violated rule; return None when the fill is valid."""
    if input_record.undealt_amount == 0:
        raise _rejected("Order", WrongSUDTInputAmountError(), undealt_in=0)
    if input_record.price == 0:
        raise _rejected("Order", OrderPriceNotZeroError(), price_in=0)

    if input_record.order_type == OrderType.BUY:
        _validate_buy(input_record, output_record, input_capacity, output_capacity)
    elif input_record.order_type == OrderType.SELL:
        _validate_sell(input_record, output_record, input_capacity, output_capacity)
    else:
        raise _rejected(
            "Order", WrongOrderTypeError(input_record.order_type),
            order_type=input_record.order_type,
        )


def validate_located_order(located: LocatedOrder) -> None:
    validate_order_transition(
        located.input_record,
        located.output_record,
        located.input_capacity,
        located.output_capacity,
    )


def _rejected(side: str, exc: DexError, **observed: object) -> DexError:
    """Log the observed values behind a rejection and hand the error back for raising."""
    logger.debug(
        "%s rejected: code=%d, %s",
        side, exc.code, ", ".join(f"{k}={v}" for k, v in observed.items()),
    )
    return exc


def _validate_buy(
    before: OrderRecord, after: OrderRecord, input_capacity: int, output_capacity: int
) -> None:
    if output_capacity > input_capacity:
        raise _rejected(
            "Buy", WrongDiffCapacityError(input_capacity, output_capacity),
            capacity_in=input_capacity, capacity_out=output_capacity,
        )
    if after.sudt_amount < before.sudt_amount:
        raise _rejected(
            "Buy", WrongSUDTDiffAmountError("buy order sUDT amount decreased"),
            sudt_in=before.sudt_amount, sudt_out=after.sudt_amount,
        )
    if after.undealt_amount > before.undealt_amount:
        raise _rejected(
            "Buy", WrongSUDTDiffAmountError("undealt amount increased"),
            undealt_in=before.undealt_amount, undealt_out=after.undealt_amount,
        )

    diff_undealt = before.undealt_amount - after.undealt_amount
    _check_dealt_follows_undealt("Buy", before, after, diff_undealt)

    diff_capacity = input_capacity - output_capacity
    diff_sudt = after.sudt_amount - before.sudt_amount
    if diff_sudt != diff_undealt:
        raise _rejected(
            "Buy",
            WrongSUDTDiffAmountError(
                f"sUDT received {diff_sudt} != undealt consumed {diff_undealt}"
            ),
            diff_sudt=diff_sudt, diff_undealt=diff_undealt,
        )

    affordable = fee_removed(diff_capacity) / order_price(before.price)
    if exceeds_tolerance(diff_undealt, affordable):
        raise _rejected(
            "Buy",
            WrongSwapAmountError(
                f"received {to_display(diff_undealt)} exceeds "
                f"{to_display(affordable)} paid for"
            ),
            diff_undealt=diff_undealt, affordable=affordable, diff_capacity=diff_capacity,
        )


def _validate_sell(
    before: OrderRecord, after: OrderRecord, input_capacity: int, output_capacity: int
) -> None:
    if output_capacity < input_capacity:
        raise _rejected(
            "Sell", WrongDiffCapacityError(input_capacity, output_capacity),
            capacity_in=input_capacity, capacity_out=output_capacity,
        )
    if after.sudt_amount > before.sudt_amount:
        raise _rejected(
            "Sell", WrongSUDTDiffAmountError("sell order sUDT amount increased"),
            sudt_in=before.sudt_amount, sudt_out=after.sudt_amount,
        )
    if after.undealt_amount > before.undealt_amount:
        raise _rejected(
            "Sell", WrongSUDTDiffAmountError("undealt amount increased"),
            undealt_in=before.undealt_amount, undealt_out=after.undealt_amount,
        )

    diff_undealt = before.undealt_amount - after.undealt_amount
    _check_dealt_follows_undealt("Sell", before, after, diff_undealt)

    diff_capacity = output_capacity - input_capacity
    diff_sudt = before.sudt_amount - after.sudt_amount

    # sUDT paid may include the fee on top of the undealt consumed, no more
    with_fee = fee_adjusted(diff_undealt)
    if exceeds_tolerance(diff_sudt, with_fee):
        raise _rejected(
            "Sell",
            WrongSUDTDiffAmountError(
                f"sUDT paid {to_display(diff_sudt)} exceeds {to_display(with_fee)} with fee"
            ),
            diff_sudt=diff_sudt, diff_undealt=diff_undealt, with_fee=with_fee,
        )

    required = fee_removed(diff_sudt) / order_price(before.price)
    if diff_capacity < required:
        raise _rejected(
            "Sell",
            WrongSwapAmountError(
                f"capacity received {diff_capacity} below required {to_display(required)}"
            ),
            diff_capacity=diff_capacity, required=required, diff_sudt=diff_sudt,
        )


def _check_dealt_follows_undealt(
    side: str, before: OrderRecord, after: OrderRecord, diff_undealt: int
) -> None:
    if not after.is_open:
        return
    if after.dealt_amount < before.dealt_amount:
        raise _rejected(
            side, WrongSUDTDiffAmountError("dealt amount decreased"),
            dealt_in=before.dealt_amount, dealt_out=after.dealt_amount,
        )
    diff_dealt = after.dealt_amount - before.dealt_amount
    if diff_dealt != diff_undealt:
        raise _rejected(
            side,
            WrongSUDTDiffAmountError(
                f"dealt moved by {diff_dealt} but undealt by {diff_undealt}"
            ),
            diff_dealt=diff_dealt, diff_undealt=diff_undealt,
        )
