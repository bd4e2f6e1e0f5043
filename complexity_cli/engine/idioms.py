"""Sorting and binary-search idiom detector."""

import re

from .models import IdiomFlags

QUADRATIC_SORT_PATTERN = re.compile(
    r"\.sort\(|\bsorted\(|bubbleSort|selectionSort|insertionSort"
    r"|bubble_sort|selection_sort|insertion_sort"
)
LINEARITHMIC_SORT_PATTERN = re.compile(r"quickSort|mergeSort|quick_sort|merge_sort")
# A while condition compared against something divided by two
HALVING_LOOP_PATTERN = re.compile(r"while.*<.*/.*2")
BINARY_TOKEN = "binary"


def find_idioms(span: str) -> IdiomFlags:
    return IdiomFlags(
        has_generic_or_quadratic_sort=bool(QUADRATIC_SORT_PATTERN.search(span)),
        has_linearithmic_sort=bool(LINEARITHMIC_SORT_PATTERN.search(span)),
        has_binary_search_shape=(
            BINARY_TOKEN in span or bool(HALVING_LOOP_PATTERN.search(span))
        ),
    )
