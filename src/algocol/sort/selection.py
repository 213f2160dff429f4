"""Selection sort."""

from __future__ import annotations
import logging
from typing import MutableSequence, TypeVar

from ..ordering import CompareFunc, precedes, resolve_compare
from ..slices import already_sorted, transfer

T = TypeVar("T")

logger = logging.getLogger(__name__)


def selectionsort(
    sequence: MutableSequence[T],
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> MutableSequence[T]:
    """
    Sort in place by repeatedly moving the extreme of the unsorted suffix.

    The smallest (ascending) or largest (descending) remaining element is
    transferred to the front of the suffix rather than swapped, so the
    suffix keeps its relative order and the first of several equal
    extremes is always the one picked.
    """
    if already_sorted(sequence):
        return sequence
    compare = resolve_compare(compare)
    length = len(sequence)
    logger.debug("selectionsort: %d elements, ascending=%s", length, ascending)

    for position in range(length):
        extreme = position
        for index in range(position + 1, length):
            if precedes(compare(sequence[index], sequence[extreme]), ascending):
                extreme = index
        transfer(sequence, extreme, position)
    return sequence
