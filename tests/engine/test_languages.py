import pytest

from complexity_cli.core.exceptions import ConfigurationError
from complexity_cli.engine import SourceLanguageFamily, resolve_family, resolve_language


@pytest.mark.parametrize(
    "language_id, filename, expected",
    [
        ("typescriptreact", None, SourceLanguageFamily.BRACE),
        ("javascript", "notes.txt", SourceLanguageFamily.BRACE),
        ("js", None, SourceLanguageFamily.BRACE),
        ("python", None, SourceLanguageFamily.INDENT),
        (None, "app.MJS", SourceLanguageFamily.BRACE),
        (None, "component.tsx", SourceLanguageFamily.BRACE),
        ("plaintext", "script.pyw", SourceLanguageFamily.INDENT),
        ("rust", "main.rs", SourceLanguageFamily.MIXED),
        (None, None, SourceLanguageFamily.MIXED),
    ],
)
def test_resolve_family(language_id, filename, expected):
    assert resolve_family(language_id, filename) is expected


def test_identifier_takes_precedence_over_extension():
    assert resolve_family("python", "weird.js") is SourceLanguageFamily.INDENT


def test_resolve_language():
    assert resolve_language("PY") == "python"
    assert resolve_language("typescript") == "typescript"
    assert resolve_language("tsx") == "typescriptreact"

    with pytest.raises(ConfigurationError, match="Unsupported language"):
        resolve_language("cobol")
