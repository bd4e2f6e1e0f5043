"""Data structure detector driven by construction idioms."""

import re
from typing import FrozenSet, Pattern, Tuple

from .models import StructureTag

STRUCTURE_PATTERNS: Tuple[Tuple[StructureTag, Pattern], ...] = (
    (
        StructureTag.ARRAY,
        re.compile(r"new\s+Array|new\s+\w*Array|\[\]|\[.*\]|\blist\("),
    ),
    (
        StructureTag.HASH_MAP,
        re.compile(r"new\s+Map|new\s+HashMap|new\s+Dictionary|\{\}|\{.*\}|\bdict\("),
    ),
    (StructureTag.SET, re.compile(r"new\s+Set|\bset\(")),
    (StructureTag.STACK, re.compile(r"new\s+Stack|push.*pop")),
    (StructureTag.QUEUE, re.compile(r"new\s+Queue|enqueue.*dequeue|\bdeque\(")),
    (StructureTag.TREE, re.compile(r"LinkedList|TreeNode|BinaryTree")),
)

# Structures whose presence makes space grow with the input
LINEAR_SPACE_STRUCTURES: FrozenSet[StructureTag] = frozenset(
    {StructureTag.ARRAY, StructureTag.HASH_MAP}
)


def find_structures(span: str) -> FrozenSet[StructureTag]:
    """Return the structure tags whose idiom appears anywhere in the span."""
    return frozenset(tag for tag, pattern in STRUCTURE_PATTERNS if pattern.search(span))
