"""Comment and string stripping applied to a span before detection."""

import re

from .models import SourceLanguageFamily

BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
HASH_COMMENT = re.compile(r"#.*$", re.MULTILINE)
TRIPLE_QUOTED = re.compile(r"(\"\"\"|''')[\s\S]*?\1")
SINGLE_QUOTED = re.compile(r"'[^'\n]*'")
DOUBLE_QUOTED = re.compile(r'"[^"\n]*"')

EMPTY_STRING = '""'


def _keep_newlines(match: "re.Match") -> str:
    return "\n" * match.group(0).count("\n")


def _collapse_keeping_newlines(match: "re.Match") -> str:
    return EMPTY_STRING + _keep_newlines(match)


def sanitize(span: str, family: SourceLanguageFamily = SourceLanguageFamily.BRACE) -> str:
    """
    Remove comments and collapse string literals to "".

    Line structure is preserved so line-based detectors see the same
    layout. Indent-style spans keep "//" since it is floor division there.
    """
    if family is SourceLanguageFamily.INDENT:
        # Strings go first so a quoted "#" does not start a comment
        clean = TRIPLE_QUOTED.sub(_collapse_keeping_newlines, span)
        clean = SINGLE_QUOTED.sub(EMPTY_STRING, clean)
        clean = DOUBLE_QUOTED.sub(EMPTY_STRING, clean)
        return HASH_COMMENT.sub("", clean)

    clean = BLOCK_COMMENT.sub(_keep_newlines, span)
    clean = LINE_COMMENT.sub("", clean)
    clean = SINGLE_QUOTED.sub(EMPTY_STRING, clean)
    return DOUBLE_QUOTED.sub(EMPTY_STRING, clean)
