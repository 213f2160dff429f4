"""
In-place comparison sorts.

Every sort takes a mutable indexable sequence, a direction and an
optional comparator, rearranges the sequence in place and returns it.
If a comparator raises midway, the sequence is left as some permutation
of its input.
"""

from .bubble import bubblesort
from .insertion import insertionsort
from .selection import selectionsort
from .merge import merge, mergesort, mergesort_recursive
from .quick import partition, quicksort, quicksort_recursive
from .hybrid import hybridsort, DEFAULT_RUN
from ..slices import is_sorted

__all__ = [
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
    "is_sorted",
]
