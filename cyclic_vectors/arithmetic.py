"""
cyclic_vectors/arithmetic.py - Euclidean integer arithmetic.

Every modular reduction in the library goes through this module so that
remainders are always non-negative, whatever the signs of the operands.
Python's ``divmod`` follows the sign of the divisor; these helpers follow
the Euclidean convention instead (remainder in ``[0, |divisor|)``).

Exports:
    DivisionResult                      (quotient, remainder) record
    euclidean_division(dividend, divisor) → DivisionResult
    euclidean_mod(dividend, divisor)    → int
    gcd(a, b)                           → int
    lcm(values)                         → int
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from cyclic_vectors.errors import ArithmeticPreconditionError


@dataclass(frozen=True)
class DivisionResult:
    """Quotient and remainder of a Euclidean division.

    Invariant: ``dividend == quotient * divisor + remainder`` and
    ``0 <= remainder < |divisor|``.
    """

    quotient: int
    remainder: int


def euclidean_division(dividend: int, divisor: int) -> DivisionResult:
    """Divide so that the remainder is never negative.

    Args:
        dividend: Any integer.
        divisor:  Any non-zero integer.

    Returns:
        DivisionResult with ``0 <= remainder < |divisor|``.

    Raises:
        ArithmeticPreconditionError: If divisor is zero.

    Examples:
        >>> euclidean_division(-7, 3)
        DivisionResult(quotient=-3, remainder=2)
        >>> euclidean_division(7, -3)
        DivisionResult(quotient=-2, remainder=1)
    """
    if divisor == 0:
        raise ArithmeticPreconditionError("euclidean division", "divisor is zero")

    quotient, remainder = divmod(dividend, divisor)
    # divmod gives a remainder with the divisor's sign; pull it back to [0, |d|)
    if remainder < 0:
        remainder -= divisor
        quotient += 1
    return DivisionResult(quotient=quotient, remainder=remainder)


def euclidean_mod(dividend: int, divisor: int) -> int:
    """Return only the Euclidean remainder of ``dividend / divisor``."""
    return euclidean_division(dividend, divisor).remainder


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (always non-negative)."""
    return math.gcd(a, b)


def lcm(values: Iterable[int]) -> int:
    """Least common multiple of all values.

    Zeros are ignored; an empty (or all-zero) input yields 1.
    """
    result = 1
    for value in values:
        if value == 0:
            continue
        result = abs(result * value) // math.gcd(result, value)
    return result
