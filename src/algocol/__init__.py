"""
Algocol: in-place comparison sorts and order-aware search.

Provides bubble, insertion, selection, merge, quick and hybrid run-based
sorts that rearrange a mutable sequence in place without scratch buffers,
plus a sortedness check and a binary search that reports either an exact
match or an insertion point.

Usage:
    from algocol import mergesort, quicksort, binary_search

    # Sort in place, ascending by default
    mergesort(items)

    # Descending, with a custom comparator
    quicksort(items, ascending=False, compare=lambda a, b: a.score - b.score)

    # Exact match or insertion point, after verifying order
    result = binary_search(items, item)
"""

from .errors import AlgocolError, ErrorKind
from .ordering import CompareFunc, Ordering
from .slices import is_sorted, transfer
from .sort import (
    bubblesort,
    insertionsort,
    selectionsort,
    merge,
    mergesort,
    mergesort_recursive,
    partition,
    quicksort,
    quicksort_recursive,
    hybridsort,
    DEFAULT_RUN,
)
from .search import binary_search, binary_search_unchecked, SearchResult
from .view import SequenceView

__version__ = "0.1.0"
__all__ = [
    # Errors
    "AlgocolError",
    "ErrorKind",
    # Comparison
    "CompareFunc",
    "Ordering",
    # Sequence utilities
    "is_sorted",
    "transfer",
    "SequenceView",
    # Sorting
    "bubblesort",
    "insertionsort",
    "selectionsort",
    "merge",
    "mergesort",
    "mergesort_recursive",
    "partition",
    "quicksort",
    "quicksort_recursive",
    "hybridsort",
    "DEFAULT_RUN",
    # Searching (built on is_sorted)
    "binary_search",
    "binary_search_unchecked",
    "SearchResult",
]
