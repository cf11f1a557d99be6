"""
Jinja2 filters for Go and Markdown generation.
"""

from __future__ import annotations

import re
from typing import Final

_MARKDOWN_SPECIAL_PATTERN: Final = re.compile(r"([\\`*_{}\[\]<>|])")
_COMMENT_PREFIX: Final = "// "


def go_string_literal(text: str | None) -> str:
    """Format text as a Go interpreted string literal.

    Example:
        >>> go_string_literal('say "hi"')
        '"say \\\\"hi\\\\""'
    """
    if not text:
        return '""'

    escape_map = {
        "\\": "\\\\",
        '"': '\\"',
        "\n": "\\n",
        "\t": "\\t",
    }
    result = text
    for char, escaped in escape_map.items():
        result = result.replace(char, escaped)
    return f'"{result}"'


def go_comment(text: str | None, indent: int = 0) -> str:
    """Format text as Go line comments, one ``//`` line per input line."""
    if not text:
        return ""

    indent_str = " " * indent
    lines = text.strip().split("\n")
    return "\n".join(
        f"{indent_str}{_COMMENT_PREFIX}{line.strip()}".rstrip() for line in lines
    )


def go_raw_string(text: str) -> str:
    """Format text as a Go raw string literal, for regular expressions."""
    if "`" in text:
        return go_string_literal(text)
    return f"`{text}`"


def markdown_escape(text: str | None) -> str:
    """Escape characters Markdown would otherwise interpret."""
    if not text:
        return ""
    return _MARKDOWN_SPECIAL_PATTERN.sub(r"\\\1", text)


def one_line(text: str | None) -> str:
    """Collapse whitespace so a description fits on one list-item line."""
    if not text:
        return ""
    return " ".join(text.split())


FILTERS = {
    "go_string_literal": go_string_literal,
    "go_comment": go_comment,
    "go_raw_string": go_raw_string,
    "markdown_escape": markdown_escape,
    "one_line": one_line,
}
