"""Tests for comparison helpers and error values."""

import pytest
from algocol import AlgocolError, ErrorKind, Ordering
from algocol.ordering import (
    default_compare,
    resolve_compare,
    is_lt,
    is_le,
    is_eq,
    is_ge,
    is_gt,
    precedes,
    in_order,
)


class TestOrdering:
    @pytest.mark.parametrize(
        "value,expected",
        [(-5, Ordering.LESS), (0, Ordering.EQUAL), (3, Ordering.GREATER),
         (Ordering.LESS, Ordering.LESS)],
    )
    def test_of(self, value, expected):
        assert Ordering.of(value) is expected

    def test_predicates(self):
        assert [p(-1) for p in (is_lt, is_le, is_eq, is_ge, is_gt)] == [
            True, True, False, False, False]
        assert [p(0) for p in (is_lt, is_le, is_eq, is_ge, is_gt)] == [
            False, True, True, True, False]
        assert [p(Ordering.GREATER) for p in (is_lt, is_le, is_eq, is_ge, is_gt)] == [
            False, False, False, True, True]

    def test_direction(self):
        assert precedes(-1, True)
        assert not precedes(0, True)
        assert precedes(1, False)
        assert in_order(0, True)
        assert in_order(0, False)
        assert not in_order(-1, False)

    def test_default_compare(self):
        assert default_compare(1, 2) < 0
        assert default_compare("b", "a") > 0
        assert default_compare((1, 2), (1, 2)) == 0

    def test_resolve_compare(self):
        def custom(a, b):
            return 0
        assert resolve_compare(None) is default_compare
        assert resolve_compare(custom) is custom


class TestAlgocolError:
    def test_fields(self):
        err = AlgocolError(ErrorKind.WRONG_ORDER, "left after right")
        assert err.kind is ErrorKind.WRONG_ORDER
        assert err.description == "left after right"
        assert str(err) == "WrongOrder: left after right"

    def test_equality(self):
        assert AlgocolError(ErrorKind.OTHER, "x") == AlgocolError(ErrorKind.OTHER, "x")
        assert AlgocolError(ErrorKind.OTHER, "x") != AlgocolError(ErrorKind.NOT_FOUND, "x")

    def test_immutable(self):
        err = AlgocolError(ErrorKind.OTHER, "x")
        with pytest.raises(AttributeError):
            err.kind = ErrorKind.UNORDERED
