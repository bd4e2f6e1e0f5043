import pytest

from complexity_cli.core.constants import (
    CONSTANT,
    EXPONENTIAL,
    LINEAR,
    LINEARITHMIC,
    LOGARITHMIC,
    QUADRATIC,
)
from complexity_cli.engine import (
    ComplexityVerdict,
    IdiomFlags,
    StructureTag,
    classify,
    polynomial_label,
)

NO_IDIOMS = IdiomFlags()
ORDER = [CONSTANT, LOGARITHMIC, LINEAR, LINEARITHMIC, QUADRATIC]


def rank(label):
    if label in ORDER:
        return ORDER.index(label)
    # O(n^k)
    return len(ORDER) + int(label[len("O(n^") : -1])


def test_nothing_detected_is_constant():
    assert classify(0, frozenset(), frozenset(), NO_IDIOMS) == ComplexityVerdict(CONSTANT, CONSTANT)


@pytest.mark.parametrize(
    "depth, label", [(1, LINEAR), (2, QUADRATIC), (3, "O(n^3)"), (5, "O(n^5)")]
)
def test_polynomial_labels(depth, label):
    assert polynomial_label(depth) == label
    assert classify(depth, frozenset(), frozenset(), NO_IDIOMS).time_complexity == label


@pytest.mark.parametrize("depth", range(1, 8))
def test_deeper_nesting_never_lowers_time(depth):
    shallow = classify(depth, frozenset(), frozenset(), NO_IDIOMS).time_complexity
    deep = classify(depth + 1, frozenset(), frozenset(), NO_IDIOMS).time_complexity
    assert rank(deep) >= rank(shallow)


def test_recursion_escalates_from_baseline_only():
    assert classify(0, {"fib"}, frozenset(), NO_IDIOMS).time_complexity == EXPONENTIAL
    assert classify(1, {"fib"}, frozenset(), NO_IDIOMS).time_complexity == LINEAR


def test_linear_space_structures():
    assert classify(0, frozenset(), {StructureTag.ARRAY}, NO_IDIOMS).space_complexity == LINEAR
    assert classify(0, frozenset(), {StructureTag.HASH_MAP}, NO_IDIOMS).space_complexity == LINEAR
    for tag in (StructureTag.SET, StructureTag.STACK, StructureTag.QUEUE, StructureTag.TREE):
        assert classify(0, frozenset(), {tag}, NO_IDIOMS).space_complexity == CONSTANT


def test_generic_sort_guard():
    sort = IdiomFlags(has_generic_or_quadratic_sort=True)

    assert classify(0, frozenset(), frozenset(), sort).time_complexity == QUADRATIC
    assert classify(1, frozenset(), frozenset(), sort).time_complexity == QUADRATIC
    assert classify(2, frozenset(), frozenset(), sort).time_complexity == QUADRATIC
    assert classify(3, frozenset(), frozenset(), sort).time_complexity == "O(n^3)"
    # Recursion already escalated to O(2^n)
    assert classify(0, {"f"}, frozenset(), sort).time_complexity == EXPONENTIAL


def test_linearithmic_sort_overrides():
    idioms = IdiomFlags(has_linearithmic_sort=True)

    assert classify(1, frozenset(), frozenset(), idioms).time_complexity == LINEARITHMIC
    assert classify(3, {"go"}, frozenset(), idioms).time_complexity == LINEARITHMIC
    both = IdiomFlags(has_generic_or_quadratic_sort=True, has_linearithmic_sort=True)
    assert classify(2, frozenset(), frozenset(), both).time_complexity == LINEARITHMIC


def test_binary_search_only_from_baseline():
    idioms = IdiomFlags(has_binary_search_shape=True)

    assert classify(0, frozenset(), frozenset(), idioms).time_complexity == LOGARITHMIC
    assert classify(1, frozenset(), frozenset(), idioms).time_complexity == LINEAR
    assert classify(0, {"search"}, frozenset(), idioms).time_complexity == EXPONENTIAL
