from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Iterable, Union

from txatlas.core.errors import MalformedAmountError


Amount = Union[str, int, Decimal]

# wide enough for 256-bit integers scaled by 18 decimals
_PRECISION = 120


def parse_amount(raw: Amount) -> Decimal:
    """
    Parse a display amount ("0.010000000", 2, Decimal("1.5")) into a Decimal.

    Rejects anything that is not a finite, non-negative number. Floats are
    rejected too: they have already lost precision by the time they get here.
    """
    if isinstance(raw, bool) or isinstance(raw, float):
        raise MalformedAmountError(f"Unsupported amount type: {raw!r}")
    if isinstance(raw, Decimal):
        d = raw
    else:
        text = str(raw).strip()
        if not text:
            raise MalformedAmountError("Empty amount")
        try:
            d = Decimal(text)
        except (InvalidOperation, ValueError) as e:
            raise MalformedAmountError(f"Not a number: {raw!r}") from e

    if not d.is_finite():
        raise MalformedAmountError(f"Not a finite number: {raw!r}")
    if d < 0:
        raise MalformedAmountError(f"Negative amount: {raw!r}")
    return d


def to_smallest_unit(raw: Amount, exponent: int) -> str:
    """
    Scale a display amount by 10**exponent and return it as an integer string.

    to_smallest_unit("0.010000000", 9) -> "10000000"
    to_smallest_unit("2.000000000", 0) -> "2"

    Digits that would fall below the smallest unit raise MalformedAmountError
    instead of being rounded away.
    """
    d = parse_amount(raw)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        scaled = d.scaleb(exponent)
        integral = scaled.to_integral_value()
        if scaled != integral:
            raise MalformedAmountError(
                f"Amount {raw!r} has more than {exponent} decimal places"
            )
    return str(int(integral))


def sum_smallest_units(values: Iterable[str]) -> str:
    total = 0
    for v in values:
        try:
            total += int(v)
        except ValueError as e:
            raise MalformedAmountError(f"Not an integer amount: {v!r}") from e
    return str(total)
