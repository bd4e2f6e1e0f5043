from complexity_cli.analyzer import ComplexityAnalyzer, FunctionAnalysis
from complexity_cli.engine import ComplexityVerdict, FunctionCandidate, SourceLanguageFamily
from complexity_cli.history.store import ResultStore


__all__ = [
    "ComplexityAnalyzer",
    "ComplexityVerdict",
    "FunctionAnalysis",
    "FunctionCandidate",
    "ResultStore",
    "SourceLanguageFamily",
]
