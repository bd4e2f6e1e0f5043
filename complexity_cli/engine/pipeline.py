"""Composition of sanitizer, detectors and classifier for one span."""

from .classifier import classify
from .idioms import find_idioms
from .loops import estimate_depth
from .models import ComplexityVerdict, SourceLanguageFamily, SpanFeatures
from .recursion import find_recursive
from .sanitize import sanitize
from .structures import find_structures


def extract_features(
    span: str, family: SourceLanguageFamily = SourceLanguageFamily.BRACE
) -> SpanFeatures:
    """Run every detector over the sanitized span."""
    clean = sanitize(span, family)
    return SpanFeatures(
        depth=estimate_depth(clean, family),
        recursive_names=find_recursive(clean),
        structures=find_structures(clean),
        idioms=find_idioms(clean),
    )


def classify_features(features: SpanFeatures) -> ComplexityVerdict:
    return classify(
        features.depth,
        features.recursive_names,
        features.structures,
        features.idioms,
    )


def analyze_span(
    span: str, family: SourceLanguageFamily = SourceLanguageFamily.BRACE
) -> ComplexityVerdict:
    """
    Estimate time and space complexity for a span of source text.

    Never raises on malformed code; spans that match nothing come back as
    O(1)/O(1).
    """
    return classify_features(extract_features(span, family))
