"""Exact fee and price arithmetic over integer ledger amounts.

Amounts and capacities are ints (token base units, shannons). Ratios are
fractions.Fraction so comparisons never depend on float rounding.
The tolerance band below is the only imprecision allowed and it is applied
explicitly at each comparison.
"""

from fractions import Fraction

# 0.3% exchange fee
FEE = Fraction(3, 1000)
# real price * 10^10 = record price field
PRICE_PARAM = 10**10
# Accepted excess on swap comparisons, in token base units
SWAP_TOLERANCE = Fraction(1, 1000)

_FEE_FACTOR = 1 + FEE


def order_price(price: int) -> Fraction:
    """Convert the fixed-point record price to a real price: 5 * 10^10 -> 5."""
    if price <= 0:
        raise ValueError(f"Price must be positive, got {price}")
    return Fraction(price, PRICE_PARAM)


def fee_adjusted(amount: int | Fraction) -> Fraction:
    """amount * (1 + FEE)."""
    return amount * _FEE_FACTOR


def fee_removed(amount: int | Fraction) -> Fraction:
    """amount / (1 + FEE)."""
    return Fraction(amount) / _FEE_FACTOR


def exceeds_tolerance(lhs: int | Fraction, rhs: int | Fraction) -> bool:
    """True when lhs is more than SWAP_TOLERANCE above rhs. Equal to the band is accepted."""
    return lhs - rhs > SWAP_TOLERANCE


def to_display(amount: int | Fraction, decimals: int = 8) -> str:
    """Render base units with a decimal point: 15045000000 -> '150.45000000'."""
    value = Fraction(amount)
    sign = "-" if value < 0 else ""
    units = abs(value).numerator // abs(value).denominator
    whole, frac = divmod(units, 10**decimals)
    if decimals == 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{frac:0{decimals}d}"
