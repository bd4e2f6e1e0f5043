"""
Language family selection.

An editor-style language identifier is checked first, then the filename
extension. Anything unrecognised falls back to the mixed family.
"""

from typing import Dict, FrozenSet, Optional, Tuple

from complexity_cli.core.exceptions import ConfigurationError

from .models import SourceLanguageFamily

BRACE_LANGUAGES: FrozenSet[str] = frozenset(
    {"javascript", "typescript", "javascriptreact", "typescriptreact"}
)
INDENT_LANGUAGES: FrozenSet[str] = frozenset({"python"})
SUPPORTED_LANGUAGES: FrozenSet[str] = BRACE_LANGUAGES | INDENT_LANGUAGES

LANGUAGE_ALIASES: Dict[str, str] = {
    "js": "javascript",
    "node": "javascript",
    "ts": "typescript",
    "jsx": "javascriptreact",
    "tsx": "typescriptreact",
    "py": "python",
    "python3": "python",
}

BRACE_EXTENSIONS: Tuple[str, ...] = (".js", ".ts", ".jsx", ".tsx", ".mjs", ".cjs")
INDENT_EXTENSIONS: Tuple[str, ...] = (".py", ".pyw")


def resolve_language(lang: str) -> str:
    """Resolve language alias to standard name."""
    lowered = lang.lower()

    if lowered in SUPPORTED_LANGUAGES:
        return lowered

    resolved = LANGUAGE_ALIASES.get(lowered)
    if resolved:
        return resolved

    supported = ", ".join(sorted(SUPPORTED_LANGUAGES))
    aliases = ", ".join(sorted(LANGUAGE_ALIASES.keys()))
    raise ConfigurationError(
        f"Unsupported language: '{lang}'. "
        f"Supported languages: {supported}. "
        f"Aliases: {aliases}"
    )


def resolve_family(
    language_id: Optional[str] = None, filename: Optional[str] = None
) -> SourceLanguageFamily:
    """
    Pick the language family for a document.

    Args:
        language_id: Editor language identifier or alias, if known
        filename: Document file name, used when the identifier is missing
            or unrecognised

    Returns:
        The family whose rule set should be used for the scan
    """
    if language_id:
        lowered = language_id.lower()
        lowered = LANGUAGE_ALIASES.get(lowered, lowered)
        if lowered in BRACE_LANGUAGES:
            return SourceLanguageFamily.BRACE
        if lowered in INDENT_LANGUAGES:
            return SourceLanguageFamily.INDENT

    if filename:
        lowered = filename.lower()
        if lowered.endswith(BRACE_EXTENSIONS):
            return SourceLanguageFamily.BRACE
        if lowered.endswith(INDENT_EXTENSIONS):
            return SourceLanguageFamily.INDENT

    return SourceLanguageFamily.MIXED
