"""
Binary search over ordered sequences.

:func:`binary_search_unchecked` trusts the caller that the sequence is
ordered and returns where ``item`` belongs. :func:`binary_search` verifies
the order first and reports whether the position is an exact match.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Sequence, TypeVar

from .errors import AlgocolError, ErrorKind
from .ordering import CompareFunc, in_order, is_eq, precedes, resolve_compare
from .slices import is_sorted

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Position found by :func:`binary_search`."""
    index: int
    found: bool

    @classmethod
    def match(cls, index: int) -> SearchResult:
        return cls(index, True)

    @classmethod
    def insertion(cls, index: int) -> SearchResult:
        return cls(index, False)


def binary_search_unchecked(
    sequence: Sequence[T],
    item: T,
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> int:
    """
    Return the index in ``[0, len(sequence)]`` where ``item`` belongs.

    If an element equal to ``item`` is met, its index is returned at once;
    with several equal elements any one of them may be returned.
    Otherwise the result is the insertion point: every element before it
    goes strictly before ``item``. The order of ``sequence`` is not
    checked and the result is meaningless on unordered input.

    Example:
        assert binary_search_unchecked([0, 2, 4, 6, 8], 5) == 3
    """
    length = len(sequence)
    if length == 0:
        return 0
    compare = resolve_compare(compare)
    if in_order(compare(item, sequence[0]), ascending):
        return 0
    if length == 1 or precedes(compare(sequence[length - 1], item), ascending):
        return length

    left = 1
    right = length - 1
    while left <= right:
        middle = left + (right - left) // 2
        order = compare(item, sequence[middle])
        if is_eq(order):
            return middle
        if precedes(order, ascending):
            right = middle - 1
        else:
            left = middle + 1
    return left


def binary_search(
    sequence: Sequence[T],
    item: T,
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> SearchResult:
    """
    Binary search that first verifies ``sequence`` is ordered.

    Returns:
        ``SearchResult(index, True)`` if ``sequence[index]`` equals
        ``item``, otherwise ``SearchResult(index, False)`` with the
        insertion point.

    Raises:
        AlgocolError: UNORDERED if ``sequence`` is not sorted in the
            requested direction.
    """
    compare = resolve_compare(compare)
    if not is_sorted(sequence, ascending, compare):
        logger.debug("binary_search rejected unordered sequence of length %d",
                     len(sequence))
        raise AlgocolError(ErrorKind.UNORDERED, "Sequence is not sorted")
    location = binary_search_unchecked(sequence, item, ascending, compare)
    if location < len(sequence) and is_eq(compare(item, sequence[location])):
        return SearchResult.match(location)
    return SearchResult.insertion(location)
