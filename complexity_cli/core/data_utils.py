import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from complexity_cli.core.exceptions import DocumentError, ValidationError
from complexity_cli.core.logging import log_file_operation, log_warning


def load_json(
    file_path: Union[str, Path],
    default: Optional[Union[List, Dict]] = None,
    strict: bool = False,
) -> Union[List, Dict]:
    """
    Load JSON data from a file, returning a default value if it doesn't exist or is invalid.
    Args:
        file_path: Path to JSON file
        default: Default value to return if file doesn't exist or is invalid
        strict: Raise on invalid JSON instead of returning the default
    Returns:
        Parsed JSON data or default value
    Raises:
        json.JSONDecodeError: If strict and the file is not valid JSON
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return default if default is not None else {}
    except json.JSONDecodeError as e:
        if strict:
            raise
        log_warning(f"Could not decode JSON from {file_path}: {e}")
        return default if default is not None else {}


def save_json(file_path: Union[str, Path], data: Union[List, Dict]) -> None:
    """
    Save data to a JSON file.
    Args:
        file_path: Path to save JSON file
        data: Data to save
    Raises:
        IOError: If file cannot be written
    """
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        log_file_operation("write", Path(file_path))
    except IOError as e:
        log_warning(f"Could not write JSON to {file_path}: {e}")
        raise


def document_uri(path: Union[str, Path]) -> str:
    """Return the identity used for a document in result keys."""
    return Path(path).expanduser().resolve().as_uri()


def read_document(path: Union[str, Path]) -> Tuple[str, List[str]]:
    """
    Read a source document and split it into lines.

    Lines are split on newline only, so a trailing newline yields a final
    empty line.
    Args:
        path: Path to the source file
    Returns:
        Tuple of (document uri, lines)
    Raises:
        DocumentError: If the file is missing or cannot be decoded
    """
    source = Path(path).expanduser()
    if not source.is_file():
        raise DocumentError(f"Source file not found: {source}")

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"Could not read {source}: {e}") from e

    log_file_operation("read", source)
    return document_uri(source), text.split("\n")


def parse_line_bound(value: Any, name: str) -> int:
    """
    Parse a zero-based line bound supplied by the user.
    Args:
        value: Raw value (int or numeric string)
        name: Parameter name used in error messages
    Returns:
        The bound as a non-negative integer
    Raises:
        ValidationError: If the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {name}: expected a line number, got {value!r}")
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            raise ValidationError(
                f"Invalid {name}: expected a line number, got {value!r}"
            ) from None

    if number < 0:
        raise ValidationError(f"Invalid {name}: line numbers start at 0, got {number}")
    return number


def validate_span(start_line: int, end_line: int, line_count: int) -> None:
    """
    Check that [start_line, end_line) is a non-empty span of the document.
    Raises:
        ValidationError: If the span is empty or out of range
    """
    if end_line <= start_line:
        raise ValidationError(
            f"Invalid span: end line {end_line} must be greater than start line {start_line}"
        )
    if end_line > line_count:
        raise ValidationError(
            f"Invalid span: end line {end_line} is past the end of the document "
            f"({line_count} lines)"
        )
