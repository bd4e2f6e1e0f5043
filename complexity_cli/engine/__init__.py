from .classifier import classify, polynomial_label
from .idioms import find_idioms
from .languages import resolve_family, resolve_language
from .loops import estimate_depth
from .models import (
    ComplexityVerdict,
    FunctionCandidate,
    IdiomFlags,
    SourceLanguageFamily,
    SpanFeatures,
    StructureTag,
)
from .pipeline import analyze_span, classify_features, extract_features
from .recursion import find_recursive
from .sanitize import sanitize
from .scanner import (
    block_family,
    block_span,
    extract_span,
    find_brace_end,
    find_indent_end,
    scan,
)
from .structures import find_structures

__all__ = [
    "ComplexityVerdict",
    "FunctionCandidate",
    "IdiomFlags",
    "SourceLanguageFamily",
    "SpanFeatures",
    "StructureTag",
    "analyze_span",
    "block_family",
    "block_span",
    "classify",
    "classify_features",
    "estimate_depth",
    "extract_features",
    "extract_span",
    "find_brace_end",
    "find_idioms",
    "find_indent_end",
    "find_recursive",
    "find_structures",
    "polynomial_label",
    "resolve_family",
    "resolve_language",
    "sanitize",
    "scan",
]
