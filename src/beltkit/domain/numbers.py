"""Numeric aggregation for values read from text."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

Number = int | float


def _parse(value: str | Number) -> Decimal:
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation as exc:
        msg = f"Not a number: {value!r}"
        raise ValueError(msg) from exc
    if not parsed.is_finite():
        msg = f"Not a finite number: {value!r}"
        raise ValueError(msg)
    return parsed


def sum_numbers(values: Iterable[str | Number]) -> Number:
    """Sum numbers given as strings or numerics.

    Returns an ``int`` when every input is integral, otherwise a ``float``.
    An empty input sums to ``0``.

    Raises:
        ValueError: A value does not parse as a finite number.
    """
    total = Decimal(0)
    integral = True
    for value in values:
        parsed = _parse(value)
        if parsed != parsed.to_integral_value():
            integral = False
        total += parsed
    return int(total) if integral else float(total)


def to_int(value: str | Number) -> int:
    """Round *value* to the nearest integer, halves away from zero.

    Examples:
        >>> to_int("2.5")
        3
        >>> to_int(-2.5)
        -3
        >>> to_int("7")
        7
    """
    return int(_parse(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
