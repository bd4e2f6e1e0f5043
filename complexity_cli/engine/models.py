"""Data types shared by the analysis engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet

from complexity_cli.core.constants import CONSTANT


class SourceLanguageFamily(Enum):
    """Coarse grouping of languages by block syntax."""

    BRACE = "brace"
    INDENT = "indent"
    MIXED = "mixed"


class StructureTag(Enum):
    """Data structures recognised by construction idioms."""

    ARRAY = "Array"
    HASH_MAP = "Hash Map/Object"
    SET = "Set"
    STACK = "Stack"
    QUEUE = "Queue"
    TREE = "Tree/LinkedList"


@dataclass(frozen=True)
class FunctionCandidate:
    """
    A function, method or class found by the boundary scanner.

    Line numbers are zero-based indices into the document. For a brace block
    end_line is the line holding the closing brace; for an indentation block
    it is the first line after the block.
    """

    name: str
    start_line: int
    end_line: int

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line


@dataclass(frozen=True)
class ComplexityVerdict:
    """Time and space complexity labels for one function."""

    time_complexity: str = CONSTANT
    space_complexity: str = CONSTANT

    def to_dict(self) -> Dict[str, str]:
        return {
            "time_complexity": self.time_complexity,
            "space_complexity": self.space_complexity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "ComplexityVerdict":
        return cls(
            time_complexity=data.get("time_complexity", CONSTANT),
            space_complexity=data.get("space_complexity", CONSTANT),
        )


@dataclass(frozen=True)
class IdiomFlags:
    has_generic_or_quadratic_sort: bool = False
    has_linearithmic_sort: bool = False
    has_binary_search_shape: bool = False


@dataclass(frozen=True)
class SpanFeatures:
    """Raw detector output for a span, kept for explanations."""

    depth: int
    recursive_names: FrozenSet[str]
    structures: FrozenSet[StructureTag]
    idioms: IdiomFlags
