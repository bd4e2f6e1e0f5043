"""
Recursion detector.

Textual only: a declared name counts as recursive when "name(" appears
after the declared name itself. Same-named unrelated calls are flagged and
indirect or mutual recursion is missed.
"""

import re
from typing import FrozenSet, Iterator, Tuple

DECLARATION_PATTERN = re.compile(r"function\s+(\w+)|(\w+)\s*=\s*function|def\s+(\w+)")


def iter_declarations(span: str) -> Iterator[Tuple[str, int]]:
    """Yield (name, offset of the name) for each declaration in the span."""
    for match in DECLARATION_PATTERN.finditer(span):
        for group in range(1, DECLARATION_PATTERN.groups + 1):
            if match.group(group):
                yield match.group(group), match.start(group)
                break


def find_recursive(span: str) -> FrozenSet[str]:
    """Return the declared names that call themselves later in the span."""
    recursive = set()

    for name, offset in iter_declarations(span):
        if span.find(f"{name}(", offset + 1) != -1:
            recursive.add(name)

    return frozenset(recursive)
