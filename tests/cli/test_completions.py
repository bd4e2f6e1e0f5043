from complexity_cli.cli.completions import Completions


def test_language_completion():
    assert Completions.languages("py") == ["python", "py", "python3"]
    assert Completions.languages("TYPE") == ["typescript", "typescriptreact"]
    assert Completions.languages("zz") == []
