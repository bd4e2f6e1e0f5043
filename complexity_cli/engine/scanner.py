"""
Function boundary scanner.

Finds declaration lines with ordered pattern rules (first match wins, one
candidate per line), then finds where each block ends: by brace balance for
brace-style code, by dedent for indentation-style code.
"""

import re
from typing import List, Optional, Pattern, Sequence, Tuple

from complexity_cli.core.constants import MAX_BLOCK_SPAN, TAB_WIDTH

from .models import FunctionCandidate, SourceLanguageFamily

# Parameter list with an optional TypeScript return annotation, then "=>"
_ARROW = r"\(.*?\)\s*(?::\s*[^=]+)?\s*=>"
_NOT_CONTROL_FLOW = r"(?!if|while|for|switch|catch|with)\b"

# Tried in order; the first pattern that matches a line names the declaration
BRACE_RULES: Tuple[Pattern, ...] = tuple(
    re.compile(pattern)
    for pattern in (
        r"^\s*function\s+(\w+)\s*\(",
        r"^\s*const\s+(\w+)\s*=\s*function",
        r"^\s*let\s+(\w+)\s*=\s*function",
        r"^\s*var\s+(\w+)\s*=\s*function",
        r"^\s*const\s+(\w+)\s*=\s*async\s+function",
        r"^\s*let\s+(\w+)\s*=\s*async\s+function",
        r"^\s*var\s+(\w+)\s*=\s*async\s+function",
        r"^\s*const\s+(\w+)\s*=\s*" + _ARROW,
        r"^\s*let\s+(\w+)\s*=\s*" + _ARROW,
        r"^\s*var\s+(\w+)\s*=\s*" + _ARROW,
        r"^\s*const\s+(\w+)\s*=\s*async\s*" + _ARROW,
        r"^\s*let\s+(\w+)\s*=\s*async\s*" + _ARROW,
        r"^\s*var\s+(\w+)\s*=\s*async\s*" + _ARROW,
        r"^\s*(\w+)\s*:\s*function",
        r"^\s*(\w+)\s*:\s*async\s*function",
        r"^\s*(\w+)\s*:\s*" + _ARROW,
        r"^\s*(\w+)\s*:\s*async\s*" + _ARROW,
        r"^\s*" + _NOT_CONTROL_FLOW + r"(\w+)\s*\(.*?\)\s*\{",
        r"^\s*async\s+" + _NOT_CONTROL_FLOW + r"(\w+)\s*\(.*?\)\s*\{",
        r"^\s*async\s+function\s+(\w+)\s*\(",
        r"^\s*export\s+function\s+(\w+)\s*\(",
        r"^\s*export\s+async\s+function\s+(\w+)\s*\(",
        r"^\s*export\s+const\s+(\w+)\s*=\s*" + _ARROW,
        r"^\s*export\s+const\s+(\w+)\s*=\s*async\s*" + _ARROW,
        r"^\s*class\s+(\w+)",
        r"^\s*export\s+class\s+(\w+)",
    )
)

INDENT_RULES: Tuple[Pattern, ...] = tuple(
    re.compile(pattern)
    for pattern in (
        r"^\s*def\s+(\w+)\s*\(",
        r"^\s*async\s+def\s+(\w+)\s*\(",
        r"^\s*class\s+(\w+)",
    )
)


def rules_for(family: SourceLanguageFamily) -> Tuple[Pattern, ...]:
    """Return the ordered declaration rules for a language family."""
    if family is SourceLanguageFamily.BRACE:
        return BRACE_RULES
    if family is SourceLanguageFamily.INDENT:
        return INDENT_RULES
    return BRACE_RULES + INDENT_RULES


def match_declaration(
    line: str, rules: Sequence[Pattern]
) -> Optional[str]:
    """Return the declared name from the first matching rule, if any."""
    for pattern in rules:
        match = pattern.search(line)
        if match and match.group(1):
            return match.group(1)
    return None


def indentation(line: str) -> int:
    expanded = line.expandtabs(TAB_WIDTH)
    return len(expanded) - len(expanded.lstrip())


def block_family(line: str, family: SourceLanguageFamily) -> SourceLanguageFamily:
    """
    Decide how the block opened on a declaration line is delimited.

    Mixed documents use indentation when the declaration ends with a colon
    (``def f():``, ``class A:``) and brace balance otherwise.
    """
    if family is not SourceLanguageFamily.MIXED:
        return family
    if line.rstrip().endswith(":"):
        return SourceLanguageFamily.INDENT
    return SourceLanguageFamily.BRACE


def find_brace_end(lines: Sequence[str], start_line: int) -> int:
    """
    Find the line on which the braces opened at start_line balance out.

    Returns min(start_line + MAX_BLOCK_SPAN, last line index) when the block
    never closes.
    """
    balance = 0
    entered = False

    for index in range(start_line, len(lines)):
        line = lines[index]
        opening = line.count("{")
        closing = line.count("}")

        if opening > 0:
            entered = True

        balance += opening - closing

        if entered and balance == 0:
            return index

    return min(start_line + MAX_BLOCK_SPAN, len(lines) - 1)


def find_indent_end(lines: Sequence[str], start_line: int) -> int:
    """
    Find the first line after start_line that dedents to the declaration.

    Blank lines and comment-only lines are skipped. When no dedent occurs
    within the window the end is start_line + MAX_BLOCK_SPAN, capped at
    len(lines).
    """
    base = indentation(lines[start_line])
    limit = min(len(lines), start_line + MAX_BLOCK_SPAN + 1)

    for index in range(start_line + 1, limit):
        stripped = lines[index].strip()
        if not stripped or stripped.startswith("#"):
            continue
        if indentation(lines[index]) <= base:
            return index

    return min(len(lines), start_line + MAX_BLOCK_SPAN)


def find_block_end(
    lines: Sequence[str], start_line: int, family: SourceLanguageFamily
) -> int:
    if block_family(lines[start_line], family) is SourceLanguageFamily.INDENT:
        return find_indent_end(lines, start_line)
    return find_brace_end(lines, start_line)


def scan(
    lines: Sequence[str], family: SourceLanguageFamily
) -> List[FunctionCandidate]:
    """
    Find function, method and class declarations in a document.

    Args:
        lines: Document split into lines
        family: Language family selecting the rule set

    Returns:
        Candidates in document order. Declarations whose block does not end
        after the declaration line are dropped.
    """
    rules = rules_for(family)
    candidates: List[FunctionCandidate] = []

    for index, line in enumerate(lines):
        name = match_declaration(line, rules)
        if name is None:
            continue

        end_line = find_block_end(lines, index, family)
        if end_line > index:
            candidates.append(FunctionCandidate(name, index, end_line))

    return candidates


def extract_span(lines: Sequence[str], start_line: int, end_line: int) -> str:
    """Join the lines in [start_line, end_line) into one text span."""
    return "\n".join(lines[start_line:end_line])


def block_span(
    lines: Sequence[str], start_line: int, end_line: int, family: SourceLanguageFamily
) -> str:
    """
    Return the text of a block reported by the scanner.

    A brace block's end_line is its closing line and belongs to the block.
    An indentation block's end_line is the first line after it.
    """
    if block_family(lines[start_line], family) is SourceLanguageFamily.INDENT:
        return extract_span(lines, start_line, end_line)
    return extract_span(lines, start_line, min(end_line + 1, len(lines)))
