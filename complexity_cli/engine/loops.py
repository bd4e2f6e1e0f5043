"""
Loop nesting estimator.

This is a line-granular proxy for nesting, not a scope-exact parse. A loop
header and an unrelated closing brace on the same line interact through
plain line order, so the estimate can drift either way. Indentation-style
code has no closing braces, so every loop header in such a span adds to
the depth.
"""

import re
from typing import Pattern, Tuple

from .models import SourceLanguageFamily

BRACE_LOOP_PATTERNS: Tuple[Pattern, ...] = tuple(
    re.compile(pattern)
    for pattern in (
        r"for\s*\(",
        r"while\s*\(",
        r"do\s*\{",
        r"forEach\s*\(",
        r"map\s*\(",
        r"filter\s*\(",
        r"reduce\s*\(",
    )
)

INDENT_LOOP_PATTERNS: Tuple[Pattern, ...] = BRACE_LOOP_PATTERNS + tuple(
    re.compile(pattern)
    for pattern in (
        r"\bfor\s+[\w\s,()\[\]*]+?\s+in\s",  # for statements and comprehensions
        r"^\s*while\b.*:\s*$",
    )
)


def is_loop_line(line: str, patterns: Tuple[Pattern, ...] = BRACE_LOOP_PATTERNS) -> bool:
    return any(pattern.search(line) for pattern in patterns)


def loop_patterns(family: SourceLanguageFamily) -> Tuple[Pattern, ...]:
    if family is SourceLanguageFamily.BRACE:
        return BRACE_LOOP_PATTERNS
    return INDENT_LOOP_PATTERNS


def estimate_depth(
    span: str, family: SourceLanguageFamily = SourceLanguageFamily.BRACE
) -> int:
    """
    Estimate the maximum loop nesting depth of a span.

    Each loop-looking line increments the current depth; each line then
    decrements it by the number of "}" it holds, floored at zero. The family
    only selects the loop patterns.
    """
    patterns = loop_patterns(family)
    current_depth = 0
    max_depth = 0

    for line in span.split("\n"):
        if is_loop_line(line, patterns):
            current_depth += 1
            max_depth = max(max_depth, current_depth)

        current_depth = max(0, current_depth - line.count("}"))

    return max_depth
