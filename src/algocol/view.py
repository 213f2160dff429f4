"""
Fixed-length windows over mutable sequences.

Slicing a list copies it, so the recursive drivers and the hybrid sort
work on a :class:`SequenceView` instead: writes through the view land in
the underlying sequence.
"""

from __future__ import annotations
from typing import Any, Generic, Iterator, MutableSequence, TypeVar

from .errors import AlgocolError, ErrorKind

T = TypeVar("T")


class SequenceView(Generic[T]):
    """
    Window ``[start, stop)`` over a mutable indexable sequence.

    Indices are relative to ``start``. Views of views resolve to a single
    window over the innermost sequence.

    Example:
        items = [9, 8, 7, 6]
        tail = SequenceView(items, 2, 4)
        insertionsort(tail)
        assert items == [9, 8, 6, 7]
    """

    __slots__ = ("_base", "_start", "_stop")

    def __init__(self, base: MutableSequence[T] | SequenceView[T],
                 start: int = 0, stop: int | None = None):
        length = len(base)
        if stop is None:
            stop = length
        if start < 0 or stop > length:
            raise AlgocolError(
                ErrorKind.OUT_OF_BOUNDS,
                f"View [{start}, {stop}) does not fit a sequence of length {length}",
            )
        if start > stop:
            raise AlgocolError(
                ErrorKind.WRONG_ORDER,
                f"Start ({start}) cannot be greater than stop ({stop})",
            )
        if isinstance(base, SequenceView):
            start += base._start
            stop += base._start
            base = base._base
        self._base = base
        self._start = start
        self._stop = stop

    @property
    def base(self) -> MutableSequence[T]:
        return self._base

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    def _locate(self, index: int) -> int:
        if not 0 <= index < self._stop - self._start:
            raise IndexError(f"view index {index} out of range")
        return self._start + index

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, index: int) -> T:
        return self._base[self._locate(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._base[self._locate(index)] = value

    def __iter__(self) -> Iterator[T]:
        for index in range(self._start, self._stop):
            yield self._base[index]

    def __eq__(self, other: Any) -> bool:
        try:
            return len(self) == len(other) and all(
                a == b for a, b in zip(self, other)
            )
        except TypeError:
            return NotImplemented

    def __repr__(self) -> str:
        return f"SequenceView({list(self)!r})"

    def tolist(self) -> list[T]:
        return list(self)
