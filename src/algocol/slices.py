"""Primitives on mutable indexable sequences shared by the sorting algorithms."""

from __future__ import annotations
import logging
from typing import Sequence, MutableSequence, TypeVar

from .errors import AlgocolError, ErrorKind
from .ordering import CompareFunc, precedes, resolve_compare

T = TypeVar("T")

logger = logging.getLogger(__name__)


def already_sorted(sequence: Sequence) -> bool:
    """Guard clause: nothing or a single element is trivially ordered."""
    return len(sequence) <= 1


def swap(sequence: MutableSequence[T], i: int, j: int) -> None:
    sequence[i], sequence[j] = sequence[j], sequence[i]


def transfer(sequence: MutableSequence[T], from_index: int, to_index: int) -> None:
    """
    Move the element at ``from_index`` to ``to_index``.

    Elements in between shift by one position to close the gap, so the
    relative order of every other element is preserved. Costs
    O(|to_index - from_index|) element moves.

    Raises:
        AlgocolError: OUT_OF_BOUNDS if either index is outside the sequence.

    Example:
        items = [0, 1, 2, 3, 4]
        transfer(items, 4, 1)
        assert items == [0, 4, 1, 2, 3]
    """
    length = len(sequence)
    if not (0 <= from_index < length and 0 <= to_index < length):
        logger.debug("transfer rejected: %d -> %d with length %d",
                     from_index, to_index, length)
        raise AlgocolError(
            ErrorKind.OUT_OF_BOUNDS,
            f"From ({from_index}) and to ({to_index}) must be smaller than "
            f"the length of the sequence ({length})",
        )
    if from_index == to_index:
        return
    moving = sequence[from_index]
    if from_index < to_index:
        # rotate [from, to] left by one
        for index in range(from_index, to_index):
            sequence[index] = sequence[index + 1]
    else:
        # rotate [to, from] right by one
        for index in range(from_index, to_index, -1):
            sequence[index] = sequence[index - 1]
    sequence[to_index] = moving


def is_sorted(
    sequence: Sequence[T],
    ascending: bool = True,
    compare: CompareFunc[T] | None = None,
) -> bool:
    """
    Check that every adjacent pair is in the requested order.

    Equal neighbours are allowed in either direction. Sequences of length
    0 or 1 are sorted.
    """
    if already_sorted(sequence):
        return True
    compare = resolve_compare(compare)
    for index in range(1, len(sequence)):
        if precedes(compare(sequence[index], sequence[index - 1]), ascending):
            return False
    return True
