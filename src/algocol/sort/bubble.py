"""Exchange (bubble) sort."""

from __future__ import annotations
import logging
from typing import MutableSequence, TypeVar

from ..ordering import CompareFunc, precedes, resolve_compare
from ..slices import already_sorted, swap

T = TypeVar("T")

logger = logging.getLogger(__name__)


def bubblesort(
    sequence: MutableSequence[T],
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> MutableSequence[T]:
    """
    Sort in place by swapping out-of-order neighbours.

    Passes over the whole sequence until one pass makes no swap. Stable.
    O(n^2): reversed input of length n takes (n^2 - n) / 2 swaps.

    Example:
        items = [5, 4, 3, 2, 1]
        bubblesort(items)
        assert items == [1, 2, 3, 4, 5]
    """
    if already_sorted(sequence):
        return sequence
    compare = resolve_compare(compare)
    length = len(sequence)
    logger.debug("bubblesort: %d elements, ascending=%s", length, ascending)

    swapped = True
    while swapped:
        swapped = False
        for index in range(1, length):
            if precedes(compare(sequence[index], sequence[index - 1]), ascending):
                swap(sequence, index, index - 1)
                swapped = True
    return sequence
