"""Tests for SequenceView."""

import pytest
from algocol import SequenceView, AlgocolError, ErrorKind


class TestSequenceView:
    def test_reads_and_writes_through(self):
        items = [0, 1, 2, 3, 4]
        view = SequenceView(items, 1, 4)
        assert len(view) == 3
        assert list(view) == [1, 2, 3]
        view[0] = 10
        assert items == [0, 10, 2, 3, 4]

    def test_whole_sequence_by_default(self):
        items = [3, 4]
        assert SequenceView(items) == [3, 4]

    def test_nested_views_flatten(self):
        items = list(range(10))
        inner = SequenceView(SequenceView(items, 2, 8), 1, 3)
        assert inner.base is items
        assert (inner.start, inner.stop) == (3, 5)
        assert inner.tolist() == [3, 4]

    def test_index_error(self):
        view = SequenceView([0, 1, 2], 1, 2)
        with pytest.raises(IndexError):
            view[1]
        with pytest.raises(IndexError):
            view[-1] = 5

    def test_empty_view(self):
        view = SequenceView([1, 2], 1, 1)
        assert len(view) == 0
        assert list(view) == []

    def test_bad_window(self):
        with pytest.raises(AlgocolError) as exc:
            SequenceView([1, 2], 0, 3)
        assert exc.value.kind is ErrorKind.OUT_OF_BOUNDS
        with pytest.raises(AlgocolError) as exc:
            SequenceView([1, 2], 2, 1)
        assert exc.value.kind is ErrorKind.WRONG_ORDER
