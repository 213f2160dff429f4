"""
Partition-exchange sort (quicksort) with a last-element pivot.

Not stable. Sorted or reverse-sorted input is the worst case, Θ(n^2)
comparisons; the recursive driver then also recurses n levels deep, so
prefer :func:`quicksort`, whose explicit stack lives on the heap.
"""

from __future__ import annotations
import logging
from typing import MutableSequence, TypeVar

from ..errors import AlgocolError, ErrorKind
from ..ordering import CompareFunc, in_order, resolve_compare
from ..slices import already_sorted, swap
from ..view import SequenceView

T = TypeVar("T")

logger = logging.getLogger(__name__)


def partition(
    sequence: MutableSequence[T],
    left: int,
    right: int,
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> int:
    """
    Partition ``[left, right)`` around its last element and return the pivot's index.

    Two cursors walk the range: ``hare`` visits every element before the
    pivot, ``tortoise`` marks where the next in-order element goes. Each
    element that is in order against the pivot (ties included) is swapped
    down to ``tortoise``. Since ``tortoise <= hare`` at all times,
    everything left of ``tortoise`` has already been checked. Finally the
    pivot is swapped into ``tortoise``.

    Sequences of length 0 or 1 return 0 without checking bounds.

    Raises:
        AlgocolError: WRONG_ORDER unless ``left < right``; OUT_OF_BOUNDS if
            ``left`` is not a valid index or ``right`` exceeds the length.

    Example:
        items = [10, 80, 30, 90, 40, 50, 70]
        assert partition(items, 0, 7) == 4
        assert items == [10, 30, 40, 50, 70, 90, 80]
    """
    length = len(sequence)
    if already_sorted(sequence):
        return 0
    if left >= right:
        logger.debug("partition rejected range [%d, %d)", left, right)
        raise AlgocolError(
            ErrorKind.WRONG_ORDER,
            f"Left ({left}) must be less than right ({right})",
        )
    if not 0 <= left < length:
        logger.debug("partition rejected left %d for length %d", left, length)
        raise AlgocolError(
            ErrorKind.OUT_OF_BOUNDS,
            f"Left ({left}) must be less than length ({length})",
        )
    if right > length:
        logger.debug("partition rejected right %d for length %d", right, length)
        raise AlgocolError(
            ErrorKind.OUT_OF_BOUNDS,
            f"Right ({right}) must be less than or equal to length ({length})",
        )
    compare = resolve_compare(compare)

    pivot = right - 1
    tortoise = left
    for hare in range(left, pivot):
        if in_order(compare(sequence[hare], sequence[pivot]), ascending):
            swap(sequence, tortoise, hare)
            tortoise += 1
    swap(sequence, tortoise, pivot)
    return tortoise


def quicksort(
    sequence: MutableSequence[T],
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> MutableSequence[T]:
    """
    Iterative quicksort driven by an explicit stack of inclusive ranges.

    Only ranges with at least two elements are pushed.
    """
    if already_sorted(sequence):
        return sequence
    compare = resolve_compare(compare)
    length = len(sequence)
    logger.debug("quicksort: %d elements, ascending=%s", length, ascending)

    stack: list[tuple[int, int]] = [(0, length - 1)]
    while stack:
        start, end = stack.pop()
        pivot = partition(sequence, start, end + 1, ascending, compare)
        if pivot > start + 1:
            stack.append((start, pivot - 1))
        if pivot + 1 < end:
            stack.append((pivot + 1, end))
    return sequence


def quicksort_recursive(
    sequence: MutableSequence[T],
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> MutableSequence[T]:
    """
    Recursive quicksort.

    Recursion depth is O(log n) on balanced splits but O(n) on
    adversarial input; deep inputs can hit Python's recursion limit.
    """
    if already_sorted(sequence):
        return sequence
    logger.debug("quicksort_recursive: %d elements, ascending=%s",
                 len(sequence), ascending)
    _quicksort_recursive(sequence, ascending, resolve_compare(compare))
    return sequence


def _quicksort_recursive(
    sequence: MutableSequence[T] | SequenceView[T],
    ascending: bool,
    compare: CompareFunc[T],
) -> None:
    length = len(sequence)
    if length <= 1:
        return
    pivot = partition(sequence, 0, length, ascending, compare)
    _quicksort_recursive(SequenceView(sequence, 0, pivot), ascending, compare)
    _quicksort_recursive(SequenceView(sequence, pivot + 1, length), ascending, compare)
