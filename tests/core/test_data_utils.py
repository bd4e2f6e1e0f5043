import json

import pytest

from complexity_cli.core.data_utils import (
    load_json,
    parse_line_bound,
    read_document,
    save_json,
    validate_span,
)
from complexity_cli.core.exceptions import DocumentError, ValidationError


def test_parse_line_bound():
    assert parse_line_bound("3", "start line") == 3
    assert parse_line_bound(" 12 ", "end line") == 12
    assert parse_line_bound(0, "start line") == 0


@pytest.mark.parametrize("value", ["abc", "1.5", "", -1, "-4", True, None])
def test_parse_line_bound_rejects(value):
    with pytest.raises(ValidationError):
        parse_line_bound(value, "start line")


def test_validate_span():
    validate_span(0, 3, 3)

    with pytest.raises(ValidationError, match="greater than"):
        validate_span(4, 4, 10)
    with pytest.raises(ValidationError, match="past the end"):
        validate_span(0, 11, 10)


def test_read_document(tmp_path):
    source = tmp_path / "sample.js"
    source.write_text("function f() {\n  return 1;\n}\n", encoding="utf-8")

    uri, lines = read_document(source)

    assert uri.startswith("file://")
    assert uri.endswith("/sample.js")
    assert lines == ["function f() {", "  return 1;", "}", ""]


def test_read_document_missing(tmp_path):
    with pytest.raises(DocumentError):
        read_document(tmp_path / "missing.py")


def test_load_and_save_json(tmp_path):
    path = tmp_path / "data.json"
    assert load_json(path, default=[]) == []

    save_json(path, {"records": [1, 2]})
    assert load_json(path) == {"records": [1, 2]}

    path.write_text("{not json", encoding="utf-8")
    assert load_json(path) == {}


def test_load_json_strict(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"records": [', encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        load_json(path, strict=True)
    assert load_json(tmp_path / "absent.json", default=[], strict=True) == []
