from dataclasses import dataclass
from typing import List, Optional, Sequence

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
    FunctionCandidate,
    SourceLanguageFamily,
    SpanFeatures,
    StructureTag,
    block_family,
    block_span,
    classify_features,
    extract_features,
    resolve_family,
    scan,
)


@dataclass(frozen=True)
class FunctionAnalysis:
    """Verdict for one function together with the features behind it."""

    candidate: FunctionCandidate
    verdict: ComplexityVerdict
    features: SpanFeatures


class ComplexityAnalyzer:
    """
    Heuristic analyzer that estimates the time and space complexity of the
    functions in a document from lexical patterns.

    The analyzer holds only the document's language family and keeps no
    state between calls.
    """

    def __init__(self, family: SourceLanguageFamily = SourceLanguageFamily.MIXED):
        self.family = family

    @classmethod
    def for_document(
        cls, language: Optional[str] = None, filename: Optional[str] = None
    ) -> "ComplexityAnalyzer":
        """Build an analyzer for a document from its language id or file name."""
        return cls(resolve_family(language, filename))

    def find_functions(self, lines: Sequence[str]) -> List[FunctionCandidate]:
        """Return the function candidates of a document."""
        return scan(lines, self.family)

    def analyze_function(
        self, lines: Sequence[str], name: str, start_line: int, end_line: int
    ) -> FunctionAnalysis:
        """Analyze the block that starts at start_line and ends at end_line."""
        candidate = FunctionCandidate(name, start_line, end_line)
        span = block_span(lines, start_line, end_line, self.family)
        family = block_family(lines[start_line], self.family)

        features = extract_features(span, family)
        return FunctionAnalysis(candidate, classify_features(features), features)

    def analyze_document(self, lines: Sequence[str]) -> List[FunctionAnalysis]:
        """Analyze every function candidate in a document."""
        return [
            self.analyze_function(lines, c.name, c.start_line, c.end_line)
            for c in self.find_functions(lines)
        ]

    @staticmethod
    def explain(analysis: FunctionAnalysis) -> str:
        """Generate a human-readable explanation of a verdict."""
        features = analysis.features
        time_complexity = analysis.verdict.time_complexity
        space_complexity = analysis.verdict.space_complexity
        explanation = []

        if time_complexity == CONSTANT:
            explanation.append("Time Complexity: O(1) - Constant time")
            explanation.append("  • No loops, recursion or sorting were detected.")

        elif time_complexity == LOGARITHMIC:
            explanation.append("Time Complexity: O(log n) - Logarithmic time")
            explanation.append("  • The function looks like a binary search.")

        elif time_complexity == LINEAR:
            explanation.append("Time Complexity: O(n) - Linear time")
            explanation.append("  • The function iterates through its input once.")

        elif time_complexity == QUADRATIC:
            explanation.append("Time Complexity: O(n²) - Quadratic time")
            if features.depth >= 2:
                explanation.append("  • The function uses two nested loops.")
            else:
                explanation.append("  • The function sorts with a built-in or quadratic sort.")

        elif time_complexity == LINEARITHMIC:
            explanation.append("Time Complexity: O(n log n)")
            explanation.append("  • The function uses quicksort or mergesort.")

        elif time_complexity == EXPONENTIAL:
            names = ", ".join(sorted(features.recursive_names))
            explanation.append("Time Complexity: O(2^n) - Exponential time")
            explanation.append(f"  • Recursive calls detected: {names}.")

        elif "O(n^" in time_complexity:
            explanation.append(f"Time Complexity: {time_complexity} - Polynomial time")
            explanation.append(f"  • The function uses {features.depth} nested loops.")

        if space_complexity == CONSTANT:
            explanation.append("\nSpace Complexity: O(1) - Constant space")
            explanation.append("  • No input-sized arrays or maps are constructed.")
        else:
            explanation.append(f"\nSpace Complexity: {space_complexity} - Linear space")
            explanation.append("  • The function builds arrays or maps that grow with the input.")

        if features.structures:
            tags = ", ".join(
                tag.value for tag in StructureTag if tag in features.structures
            )
            explanation.append(f"\nData structures: {tags}")

        if time_complexity in (QUADRATIC, EXPONENTIAL) or time_complexity.startswith("O(n^"):
            explanation.append("\nOptimization Potential:")
            if StructureTag.HASH_MAP not in features.structures:
                explanation.append("  • Consider using hash maps for O(1) lookups.")
            if time_complexity == EXPONENTIAL:
                explanation.append(
                    "  • Consider memoization to avoid redundant recursive calculations."
                )

        return "\n".join(explanation)
