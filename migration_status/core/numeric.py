"""
Numeric Coercion
================

On-chain amounts arrive as decimal strings. Anything that does not parse
as a number reads as zero; nothing here raises.

    coerce_decimal("12.5")   -> Decimal("12.5")
    coerce_decimal("abc")    -> Decimal("0")
    coerce_block("100")      -> 100
    from_smallest_unit("1500000000000000000") -> "1.5"
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation, localcontext
from typing import Optional

ZERO = Decimal(0)

# Locked shares are reported in 18-decimal fixed point
SHARE_DECIMALS = 18

MAX_EXPONENT = 308
MIN_EXPONENT = -324

# uint256 tops out at 78 digits; larger block heights read as malformed
MAX_BLOCK_DIGITS = 78

INFINITY_SPELLING = "Infinity"

# Beyond this magnitude amounts render in exponent form
MAX_PLAIN_EXPONENT = 100


def coerce_decimal(value: Optional[str]) -> Decimal:
    """Parse a decimal string, reading malformed or NaN input as zero."""
    if value is None:
        return ZERO
    text = str(value).strip()
    if not text or '_' in text:
        return ZERO
    try:
        number = Decimal(text)
    except InvalidOperation:
        return ZERO
    if number.is_nan() or number == 0:
        return ZERO
    if number.is_infinite():
        # Only the exact spelling is numeric; "inf", "INF", "infinity" are not
        return number if text.lstrip('+-') == INFINITY_SPELLING else ZERO
    # Same range as an IEEE double: overflow to infinity, underflow to zero
    if number.adjusted() > MAX_EXPONENT:
        return Decimal('Infinity') if number > 0 else Decimal('-Infinity')
    if number.adjusted() < MIN_EXPONENT:
        return ZERO
    return number


def coerce_block(value: Optional[str]) -> int:
    """
    Parse a block height. Non-finite input reads as zero; fractions truncate.

    Exponent forms are numeric here, so "1e3" is block 1000.
    """
    number = coerce_decimal(value)
    if not number.is_finite() or number.adjusted() >= MAX_BLOCK_DIGITS:
        return 0
    return int(number)


def format_plain(number: Decimal) -> str:
    """Render without exponent or trailing zeros: Decimal("5.10") -> "5.1"."""
    if number.is_infinite():
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_nan() or number == 0:
        return "0"
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(number.as_tuple().digits))
        normalized = number.normalize()
        if abs(normalized.adjusted()) > MAX_PLAIN_EXPONENT:
            return str(normalized)
        return format(normalized, 'f')


def from_smallest_unit(raw: Optional[str], decimals: int = SHARE_DECIMALS) -> str:
    """
    Convert an integer amount in smallest units to a human-scaled string.

    Absent, malformed or non-finite input renders as "0".
    """
    amount = coerce_decimal(raw)
    if not amount.is_finite() or amount == 0:
        return "0"
    with localcontext() as ctx:
        # Enough digits that the division is exact
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + decimals + 1)
        scaled = amount / (Decimal(10) ** decimals)
        return format_plain(scaled)
