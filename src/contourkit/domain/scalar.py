"""Numeric capability used for contour coordinates.

Coordinates are not tied to ``float``. Any number type that supports
addition, subtraction, multiplication, division and ordering works:
``int``, ``float``, ``fractions.Fraction`` and ``decimal.Decimal`` all do.
The integer literals ``0`` and ``1`` act as the additive and multiplicative
identities for each of them.
"""

from enum import IntEnum
from typing import Any, Protocol, TypeVar


class Scalar(Protocol):
    """Arithmetic and ordering required from a coordinate value."""

    def __add__(self, other: Any, /) -> Any: ...
    def __sub__(self, other: Any, /) -> Any: ...
    def __mul__(self, other: Any, /) -> Any: ...
    def __truediv__(self, other: Any, /) -> Any: ...
    def __lt__(self, other: Any, /) -> bool: ...
    def __le__(self, other: Any, /) -> bool: ...


S = TypeVar("S", bound=Scalar)

ZERO = 0
ONE = 1


class Ordering(IntEnum):
    """Result of comparing two scalars."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def partial_cmp(a: Any, b: Any) -> Ordering:
    """Compare two scalars, treating incomparable values as equal.

    NaN compares neither less nor greater than anything. Mixing unorderable
    types raises ``TypeError`` and ordering a ``Decimal`` NaN raises
    ``decimal.InvalidOperation``; all of these give ``EQUAL``.

    Examples:
        >>> partial_cmp(1.0, 2.0)
        <Ordering.LESS: -1>
        >>> partial_cmp(float("nan"), 0.0)
        <Ordering.EQUAL: 0>
    """
    try:
        if a < b:
            return Ordering.LESS
        if b < a:
            return Ordering.GREATER
    except (TypeError, ArithmeticError):
        return Ordering.EQUAL
    return Ordering.EQUAL


def clamp(value: S, low: Any, high: Any) -> S:
    """Clamp ``value`` into the closed interval ``[low, high]``.

    Values that cannot be compared against the bounds, such as NaN, are
    returned unchanged.
    """
    if partial_cmp(value, low) == Ordering.LESS:
        return low
    if partial_cmp(value, high) == Ordering.GREATER:
        return high
    return value
