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
    SourceLanguageFamily,
    StructureTag,
    analyze_span,
    extract_features,
)

INDENT = SourceLanguageFamily.INDENT

TWO_SUM = """function twoSum(nums, target) {
  const seen = new Map();
  for (let i = 0; i < nums.length; i++) {
    if (seen.has(target - nums[i])) return [seen.get(target - nums[i]), i];
    seen.set(nums[i], i);
  }
}"""

PAIRS = """function pairs(xs) {
  let count = 0;
  for (let i = 0; i < xs.length; i++) {
    for (let j = i + 1; j < xs.length; j++) {
      count++;
    }
  }
  return count;
}"""

FIB = """def fib(n):
    if n < 2:
        return n
    return fib(n - 1) + fib(n - 2)"""

SEARCH = """def search(xs, target):
    lo, hi = 0, len(xs)
    while lo < hi:
        mid = (lo + hi) // 2
        if xs[mid] < target:
            lo = mid + 1
        else:
            hi = mid
    return lo"""


def test_linear_scan_with_map():
    assert analyze_span(TWO_SUM) == ComplexityVerdict(LINEAR, LINEAR)


def test_nested_loops():
    assert analyze_span(PAIRS) == ComplexityVerdict(QUADRATIC, CONSTANT)


def test_python_recursion():
    assert analyze_span(FIB, INDENT) == ComplexityVerdict(EXPONENTIAL, CONSTANT)


def test_python_while_loop_is_linear():
    features = extract_features(SEARCH, INDENT)

    assert features.depth == 1
    assert StructureTag.ARRAY in features.structures
    assert analyze_span(SEARCH, INDENT).time_complexity == LINEAR


def test_sort_call():
    span = "function byAge(people) {\n  return people.sort((a, b) => a.age - b.age);\n}"
    assert analyze_span(span).time_complexity == QUADRATIC


def test_merge_sort():
    span = "function sortAll(xs) {\n  return mergeSort(xs);\n}"
    assert analyze_span(span).time_complexity == LINEARITHMIC


def test_binary_search_by_name():
    span = "function binaryFind(xs, t) {\n  return lookup(xs, t);\n}"
    assert analyze_span(span).time_complexity == LOGARITHMIC


def test_patterns_in_comments_and_strings_are_ignored():
    span = (
        "function quiet() {\n"
        "  // for (let i = 0; i < n; i++) {\n"
        '  log("while (true) { mergeSort(x) }");\n'
        "}"
    )
    assert extract_features(span).depth == 0
    assert analyze_span(span).time_complexity == CONSTANT


def test_no_hidden_state():
    assert analyze_span(PAIRS) == analyze_span(PAIRS)
    assert analyze_span("") == ComplexityVerdict()


def test_sequential_python_loops_read_as_quadratic():
    span = "def walk(xs):\n    for x in xs:\n        print(x)\n    for y in xs:\n        print(y)"
    assert analyze_span(span, INDENT).time_complexity == QUADRATIC
