"""
Merge sort built on an in-place, rotation-based merge.

No scratch buffer is allocated: :func:`merge` rotates each right-run
element into place instead of copying both runs out, trading extra
element moves for O(1) auxiliary space.
"""

from __future__ import annotations
import logging
from typing import MutableSequence, TypeVar

from ..errors import AlgocolError, ErrorKind
from ..ordering import CompareFunc, in_order, resolve_compare
from ..slices import already_sorted, transfer
from ..view import SequenceView

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _check_segment(length: int, left: int, middle: int, right: int) -> None:
    if left > middle:
        raise AlgocolError(
            ErrorKind.WRONG_ORDER,
            f"Left ({left}) cannot be greater than middle ({middle})",
        )
    if middle > right:
        raise AlgocolError(
            ErrorKind.WRONG_ORDER,
            f"Right ({right}) cannot be smaller than middle ({middle})",
        )
    for name, index in (("Left", left), ("Middle", middle), ("Right", right)):
        if not 0 <= index < length:
            raise AlgocolError(
                ErrorKind.OUT_OF_BOUNDS,
                f"{name} ({index}) is out of bounds for length {length}",
            )


def merge(
    sequence: MutableSequence[T],
    left: int,
    middle: int,
    right: int,
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> MutableSequence[T]:
    """
    Merge the ordered runs ``[left, middle]`` and ``[middle+1, right]`` in place.

    Layout while merging::

        [deposit ... | left run ... | right run ...]
         ^ left        ^ deposit      ^ deposit + left_size

    If the head of the left run belongs first it is already in place and
    the deposit cursor just moves past it. Otherwise the head of the right
    run is transferred to the deposit cursor, shifting the left run one
    step right. Placed elements never move again. On ties the left-run
    element stays first, so the merge is stable.

    Raises:
        AlgocolError: WRONG_ORDER unless ``left <= middle <= right``;
            OUT_OF_BOUNDS if any index is outside the sequence.

    Example:
        items = [7, 6, 1, 3, 6, 2, 4, 5, 8, 20]
        merge(items, 2, 4, 8)
        assert items == [7, 6, 1, 2, 3, 4, 5, 6, 8, 20]
    """
    try:
        _check_segment(len(sequence), left, middle, right)
    except AlgocolError as err:
        logger.debug("merge rejected segment (%d, %d, %d): %s",
                     left, middle, right, err)
        raise
    compare = resolve_compare(compare)

    deposit = left
    left_size = middle - left + 1
    right_size = right - middle
    while left_size > 0 and right_size > 0:
        candidate = deposit + left_size
        if in_order(compare(sequence[deposit], sequence[candidate]), ascending):
            left_size -= 1
        else:
            transfer(sequence, candidate, deposit)
            right_size -= 1
        deposit += 1
    return sequence


def mergesort(
    sequence: MutableSequence[T],
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> MutableSequence[T]:
    """
    Bottom-up merge sort.

    Merges neighbouring runs of width 1, 2, 4, ... until one run covers the
    whole sequence. Stable.
    """
    if already_sorted(sequence):
        return sequence
    length = len(sequence)
    logger.debug("mergesort: %d elements, ascending=%s", length, ascending)
    merge_runs(sequence, 1, ascending, resolve_compare(compare))
    return sequence


def merge_runs(
    sequence: MutableSequence[T],
    size: int,
    ascending: bool,
    compare: CompareFunc[T],
) -> None:
    """Merge neighbouring runs of width ``size``, doubling until done."""
    length = len(sequence)
    while size < length:
        for left in range(0, length, size * 2):
            middle = min(left + size - 1, length - 1)
            right = min(left + 2 * size - 1, length - 1)
            merge(sequence, left, middle, right, ascending, compare)
        size *= 2


def mergesort_recursive(
    sequence: MutableSequence[T],
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> MutableSequence[T]:
    """
    Top-down merge sort.

    Recursion depth is O(log n).
    """
    if already_sorted(sequence):
        return sequence
    logger.debug("mergesort_recursive: %d elements, ascending=%s",
                 len(sequence), ascending)
    _mergesort_recursive(sequence, ascending, resolve_compare(compare))
    return sequence


def _mergesort_recursive(
    sequence: MutableSequence[T] | SequenceView[T],
    ascending: bool,
    compare: CompareFunc[T],
) -> None:
    length = len(sequence)
    if length <= 1:
        return
    middle = length // 2
    _mergesort_recursive(SequenceView(sequence, 0, middle), ascending, compare)
    _mergesort_recursive(SequenceView(sequence, middle, length), ascending, compare)
    merge(sequence, 0, middle - 1, length - 1, ascending, compare)
