"""
Rule-based complexity classifier.

Rules run in a fixed order and each one only fires under its guard, so the
order matters whenever a span matches several of them. Only the
linearithmic-sort rule overrides unconditionally.
"""

from typing import AbstractSet

from complexity_cli.core.constants import (
    CONSTANT,
    EXPONENTIAL,
    LINEAR,
    LINEARITHMIC,
    LOGARITHMIC,
    QUADRATIC,
)

from .models import ComplexityVerdict, IdiomFlags, StructureTag
from .structures import LINEAR_SPACE_STRUCTURES


def polynomial_label(depth: int) -> str:
    """Label for ``depth`` nested loops (depth >= 1)."""
    if depth == 1:
        return LINEAR
    if depth == 2:
        return QUADRATIC
    return f"O(n^{depth})"


def classify(
    depth: int,
    recursive_names: AbstractSet[str],
    structures: AbstractSet[StructureTag],
    idioms: IdiomFlags,
) -> ComplexityVerdict:
    time_complexity = CONSTANT
    space_complexity = CONSTANT

    if depth >= 1:
        time_complexity = polynomial_label(depth)

    # Recursion only escalates from the baseline
    if recursive_names and time_complexity == CONSTANT:
        time_complexity = EXPONENTIAL

    if any(tag in LINEAR_SPACE_STRUCTURES for tag in structures):
        space_complexity = LINEAR

    if idioms.has_generic_or_quadratic_sort and time_complexity in (CONSTANT, LINEAR):
        time_complexity = QUADRATIC

    if idioms.has_linearithmic_sort:
        time_complexity = LINEARITHMIC

    if idioms.has_binary_search_shape and time_complexity == CONSTANT:
        time_complexity = LOGARITHMIC

    return ComplexityVerdict(time_complexity, space_complexity)
