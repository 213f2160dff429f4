"""Run-based hybrid sort: insertion sort on short runs, then in-place merges."""

from __future__ import annotations
import logging
from typing import MutableSequence, TypeVar

from ..errors import AlgocolError, ErrorKind
from ..ordering import CompareFunc, resolve_compare
from ..slices import already_sorted
from ..view import SequenceView
from .insertion import insertionsort
from .merge import merge_runs

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_RUN = 32


def hybridsort(
    sequence: MutableSequence[T],
    ascending: bool = True,
    run: int = DEFAULT_RUN,
    compare: CompareFunc[T] | None = None,
) -> MutableSequence[T]:
    """
    Sort in place in the manner of a simplified Timsort.

    The sequence is cut into fixed runs of ``run`` elements (the last one
    may be shorter), each run is insertion sorted, and then neighbouring
    runs are merged with widths ``run``, ``2 * run``, ... until one run
    covers everything. Sequences no longer than ``run`` are insertion
    sorted directly. Stable.

    Args:
        sequence: Mutable indexable sequence to sort.
        ascending: Sort direction.
        run: Width of the insertion-sorted runs, at least 1.
        compare: Optional comparator, negative if a < b, positive if
                 a > b, zero if equal.

    Raises:
        AlgocolError: OTHER if ``run`` is smaller than 1.
    """
    if run < 1:
        logger.debug("hybridsort rejected run size %d", run)
        raise AlgocolError(ErrorKind.OTHER, f"Run size ({run}) must be at least 1")
    if already_sorted(sequence):
        return sequence
    compare = resolve_compare(compare)
    length = len(sequence)
    logger.debug("hybridsort: %d elements, ascending=%s, run=%d",
                 length, ascending, run)

    if length <= run:
        return insertionsort(sequence, ascending, compare)
    for offset in range(0, length, run):
        insertionsort(
            SequenceView(sequence, offset, min(offset + run, length)),
            ascending,
            compare,
        )
    merge_runs(sequence, run, ascending, compare)
    return sequence
