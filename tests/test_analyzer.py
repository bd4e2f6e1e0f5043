from complexity_cli import ComplexityAnalyzer, FunctionCandidate, SourceLanguageFamily

SOURCE = """\
def helper(xs):
    return sorted(xs)

function pairs(xs) {
  for (const a of xs) {
    for (const b of xs) {
      emit(a, b);
    }
  }
}
"""


def test_for_document_picks_family():
    assert ComplexityAnalyzer.for_document(filename="app.ts").family is SourceLanguageFamily.BRACE
    assert ComplexityAnalyzer.for_document("python").family is SourceLanguageFamily.INDENT
    assert ComplexityAnalyzer().family is SourceLanguageFamily.MIXED


def test_mixed_document():
    analyzer = ComplexityAnalyzer()
    lines = SOURCE.split("\n")

    assert analyzer.find_functions(lines) == [
        FunctionCandidate("helper", 0, 3),
        FunctionCandidate("pairs", 3, 9),
    ]

    helper, pairs = analyzer.analyze_document(lines)
    assert helper.verdict.time_complexity == "O(n²)"
    assert pairs.verdict.time_complexity == "O(n²)"
    assert pairs.features.depth == 2


def test_analyze_explicit_span():
    lines = ["function f(xs) {", "  return xs.map((x) => x + 1);", "}"]
    analysis = ComplexityAnalyzer(SourceLanguageFamily.BRACE).analyze_function(lines, "f", 0, 2)

    assert analysis.candidate == FunctionCandidate("f", 0, 2)
    assert analysis.verdict.time_complexity == "O(n)"


def test_explain():
    lines = [
        "function fib(n) {",
        "  const memo = {};",
        "  return fib(n - 1) + fib(n - 2);",
        "}",
    ]
    analysis = ComplexityAnalyzer(SourceLanguageFamily.BRACE).analyze_function(lines, "fib", 0, 3)
    text = ComplexityAnalyzer.explain(analysis)

    assert "Time Complexity: O(2^n) - Exponential time" in text
    assert "Recursive calls detected: fib" in text
    assert "Space Complexity: O(n)" in text
    assert "Data structures: Hash Map/Object" in text
    assert "memoization" in text
    assert "hash maps" not in text


def test_code_on_closing_line_is_analyzed():
    lines = ["function f(xs) {", "  return xs.map((x) => x * 2); }"]
    analyzer = ComplexityAnalyzer.for_document(filename="double.js")

    (analysis,) = analyzer.analyze_document(lines)

    assert analysis.candidate == FunctionCandidate("f", 0, 1)
    assert analysis.verdict.time_complexity == "O(n)"
