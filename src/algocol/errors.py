"""
Error types raised by algocol.

Every fallible operation raises :class:`AlgocolError`, tagged with an
:class:`ErrorKind` so callers can tell a bad index range apart from an
unsorted input without parsing messages.
"""

from __future__ import annotations
from enum import Enum


class ErrorKind(Enum):
    """Class of failure carried by :class:`AlgocolError`."""
    OUT_OF_BOUNDS = "OutOfBounds"
    WRONG_ORDER = "WrongOrder"
    UNORDERED = "Unordered"
    ALREADY_EXISTS = "AlreadyExists"
    SAME_NODE = "SameNode"
    NOT_FOUND = "NotFound"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


class AlgocolError(Exception):
    """
    Error with a kind tag and a short description of what happened.

    Example:
        try:
            merge(items, 3, 1, 4)
        except AlgocolError as err:
            if err.kind is ErrorKind.WRONG_ORDER:
                ...
    """

    def __init__(self, kind: ErrorKind, description: str):
        super().__init__(kind, description)
        self._kind = kind
        self._description = description

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def description(self) -> str:
        return self._description

    def __str__(self) -> str:
        return f"{self._kind}: {self._description}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlgocolError):
            return NotImplemented
        return (self._kind, self._description) == (other._kind, other._description)

    def __hash__(self) -> int:
        return hash((self._kind, self._description))
