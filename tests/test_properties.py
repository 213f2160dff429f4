"""
Property-based tests shared by every sorting algorithm and the search.

What we check:
- Sorting keeps the multiset of elements (no loss or duplication)
- Sorted output is ordered in the requested direction
- Sorting an already ordered sequence changes nothing
- merge of two ordered runs yields one ordered run
- partition splits around the pivot value
- search returns a lower bound or an equal element
"""

from collections import Counter
from functools import partial
from typing import List

import pytest
from hypothesis import assume, given, settings, strategies as st

from algocol import (
    bubblesort,
    insertionsort,
    selectionsort,
    mergesort,
    mergesort_recursive,
    quicksort,
    quicksort_recursive,
    hybridsort,
    merge,
    partition,
    is_sorted,
    binary_search,
    binary_search_unchecked,
    AlgocolError,
    ErrorKind,
)

ALL_SORTS = [
    bubblesort,
    insertionsort,
    selectionsort,
    mergesort,
    mergesort_recursive,
    quicksort,
    quicksort_recursive,
    hybridsort,
    partial(hybridsort, run=4),
]

small_ints = st.integers(min_value=-50, max_value=50)
int_lists = st.lists(small_ints, max_size=60)


def sort_id(algorithm) -> str:
    if isinstance(algorithm, partial):
        return f"{algorithm.func.__name__}-run{algorithm.keywords['run']}"
    return algorithm.__name__


def ordered(xs: List[int], ascending: bool) -> List[int]:
    return sorted(xs, reverse=not ascending)


@pytest.mark.parametrize("algorithm", ALL_SORTS, ids=sort_id)
@settings(deadline=None, max_examples=50)
@given(items=int_lists, ascending=st.booleans())
def test_sort_is_ordered_permutation(algorithm, items, ascending):
    original = Counter(items)
    result = algorithm(list(items), ascending=ascending)
    assert Counter(result) == original
    assert is_sorted(result, ascending)
    assert list(result) == ordered(items, ascending)


@pytest.mark.parametrize("algorithm", ALL_SORTS, ids=sort_id)
@settings(deadline=None, max_examples=30)
@given(items=int_lists, ascending=st.booleans())
def test_sort_is_idempotent(algorithm, items, ascending):
    once = algorithm(list(items), ascending=ascending)
    twice = algorithm(list(once), ascending=ascending)
    assert list(twice) == list(once)


@settings(deadline=None, max_examples=100)
@given(left_run=st.lists(small_ints, min_size=1, max_size=30),
       right_run=st.lists(small_ints, max_size=30),
       ascending=st.booleans())
def test_merge_two_runs(left_run, right_run, ascending):
    items = ordered(left_run, ascending) + ordered(right_run, ascending)
    middle = len(left_run) - 1
    merge(items, 0, middle, len(items) - 1, ascending)
    assert items == ordered(left_run + right_run, ascending)


@settings(deadline=None, max_examples=100)
@given(items=st.lists(small_ints, min_size=2, max_size=40),
       data=st.data())
def test_merge_rejects_bad_segments(items, data):
    length = len(items)
    left = data.draw(st.integers(min_value=1, max_value=length - 1))
    middle = data.draw(st.integers(min_value=0, max_value=left - 1))
    before = list(items)
    with pytest.raises(AlgocolError) as exc:
        merge(items, left, middle, length - 1)
    assert exc.value.kind is ErrorKind.WRONG_ORDER
    assert items == before


@settings(deadline=None, max_examples=100)
@given(items=st.lists(small_ints, min_size=2, max_size=40), ascending=st.booleans())
def test_partition_splits_around_pivot(items, ascending):
    pivot_value = items[-1]
    work = list(items)
    pivot = partition(work, 0, len(work), ascending)
    assert Counter(work) == Counter(items)
    assert work[pivot] == pivot_value
    for value in work[:pivot]:
        assert value <= pivot_value if ascending else value >= pivot_value
    for value in work[pivot + 1:]:
        assert value > pivot_value if ascending else value < pivot_value


@settings(deadline=None, max_examples=150)
@given(items=int_lists, item=small_ints, ascending=st.booleans())
def test_unchecked_search_position(items, item, ascending):
    items = ordered(items, ascending)
    index = binary_search_unchecked(items, item, ascending)
    assert 0 <= index <= len(items)
    if index < len(items) and items[index] == item:
        return
    for value in items[:index]:
        assert value < item if ascending else value > item
    for value in items[index:]:
        assert value >= item if ascending else value <= item


@settings(deadline=None, max_examples=150)
@given(items=int_lists, item=small_ints, ascending=st.booleans())
def test_checked_search_agrees_with_membership(items, item, ascending):
    items = ordered(items, ascending)
    result = binary_search(items, item, ascending)
    assert result.found == (item in items)
    if result.found:
        assert items[result.index] == item


@settings(deadline=None, max_examples=100)
@given(items=int_lists, item=small_ints, ascending=st.booleans())
def test_checked_search_rejects_unordered(items, item, ascending):
    assume(not is_sorted(items, ascending))
    with pytest.raises(AlgocolError) as exc:
        binary_search(items, item, ascending)
    assert exc.value.kind is ErrorKind.UNORDERED
