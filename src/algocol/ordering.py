"""
Three-way comparison helpers shared by every algorithm.

Comparators follow the usual convention: negative if ``a`` goes before
``b``, zero if they tie, positive if ``a`` goes after ``b``. The predicates
below classify that result so the algorithms never repeat sign checks.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, TypeVar

T = TypeVar("T")

CompareFunc = Callable[[T, T], int]


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int | Ordering) -> Ordering:
        """Classify a raw comparator result by its sign."""
        if isinstance(value, Ordering):
            return value
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


def default_compare(a: Any, b: Any) -> int:
    """Compare two naturally ordered values using ``<`` only."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def resolve_compare(compare: CompareFunc[T] | None) -> CompareFunc[T]:
    """Return ``compare``, or :func:`default_compare` when it is None."""
    return default_compare if compare is None else compare


def is_lt(order: int | Ordering) -> bool:
    return Ordering.of(order) is Ordering.LESS


def is_le(order: int | Ordering) -> bool:
    return Ordering.of(order) is not Ordering.GREATER


def is_eq(order: int | Ordering) -> bool:
    return Ordering.of(order) is Ordering.EQUAL


def is_ge(order: int | Ordering) -> bool:
    return Ordering.of(order) is not Ordering.LESS


def is_gt(order: int | Ordering) -> bool:
    return Ordering.of(order) is Ordering.GREATER


def precedes(order: int | Ordering, ascending: bool) -> bool:
    """
    True if the left operand strictly goes first in the given direction.

    Ascending treats LESS as "in order", descending treats GREATER as
    "in order".
    """
    return is_lt(order) if ascending else is_gt(order)


def in_order(order: int | Ordering, ascending: bool) -> bool:
    """Like :func:`precedes`, but a tie also counts as in order."""
    return is_le(order) if ascending else is_ge(order)
