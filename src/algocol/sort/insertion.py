"""Insertion sort."""

from __future__ import annotations
import logging
from typing import MutableSequence, TypeVar

from ..ordering import CompareFunc, precedes, resolve_compare
from ..slices import already_sorted, swap

T = TypeVar("T")

logger = logging.getLogger(__name__)


def insertionsort(
    sequence: MutableSequence[T],
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> MutableSequence[T]:
    """
    Sort in place by sinking each element left until its neighbour is in order.

    Stable, O(n^2) worst case and O(n) on already ordered input, which
    makes it the run sorter of :func:`~algocol.sort.hybrid.hybridsort`.
    """
    if already_sorted(sequence):
        return sequence
    compare = resolve_compare(compare)
    length = len(sequence)
    logger.debug("insertionsort: %d elements, ascending=%s", length, ascending)

    for index in range(1, length):
        location = index
        while location > 0 and precedes(
            compare(sequence[location], sequence[location - 1]), ascending
        ):
            swap(sequence, location, location - 1)
            location -= 1
    return sequence
