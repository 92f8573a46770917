from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP, getcontext
from datetime import datetime, timezone
from uuid import uuid4

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def qfloor(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_DOWN)


def to_decimal(value) -> Decimal:
    """
    Convert an amount to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1")
    and not its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
