"""
String case conversion utilities for Terraform resource generation.

Product, resource and property names in API descriptions are PascalCase or
camelCase; Terraform file names and schema keys are snake_case, Go
identifiers are PascalCase.

Based on https://github.com/okunishinishi/python-stringcase
"""

import re
from collections.abc import Callable
from typing import Final

_SNAKE_CASE_DELIMITER_PATTERN: Final = re.compile(r"[\-\.\s]")
_ACRONYM_PATTERN: Final = re.compile(r"([A-Z])([A-Z][a-z])")
_LOWER_UPPER_PATTERN: Final = re.compile(r"([a-z0-9])([A-Z])")


def _convert_if_not_empty(string: str | None, conversion_func: Callable[[str], str]) -> str:
    """Safely convert a string, returning empty string if input is None or empty."""
    return conversion_func(string) if string else ""


def snakecase(string: str | None) -> str:
    """Convert string into snake_case.

    Handles various formats including camelCase with acronyms.

    Examples:
        >>> snakecase("BackendService")
        'backend_service'
        >>> snakecase("routingConfig")
        'routing_config'
        >>> snakecase("getHTTPResponse")
        'get_http_response'
    """

    def _snakecase(s: str) -> str:
        s = _SNAKE_CASE_DELIMITER_PATTERN.sub("_", s)
        s = _ACRONYM_PATTERN.sub(r"\1_\2", s)
        s = _LOWER_UPPER_PATTERN.sub(r"\1_\2", s)
        return s.lower()

    return _convert_if_not_empty(string, _snakecase)


def capitalcase(string: str | None) -> str:
    """Uppercase the first letter, leaving the rest untouched.

    Examples:
        >>> capitalcase("creationTimestamp")
        'CreationTimestamp'
    """

    def _capitalcase(s: str) -> str:
        return s[0].upper() + s[1:]

    return _convert_if_not_empty(string, _capitalcase)


def pascalcase(string: str | None) -> str:
    """Convert string into PascalCase.

    Examples:
        >>> pascalcase("backend_service")
        'BackendService'
        >>> pascalcase("getHTTPResponse")
        'GetHttpResponse'
    """

    def _pascalcase(s: str) -> str:
        return "".join(word.capitalize() for word in snakecase(s).split("_"))

    return _convert_if_not_empty(string, _pascalcase)


def titlecase(string: str | None) -> str:
    """Convert string into Title Case.

    Examples:
        >>> titlecase("backend_service")
        'Backend Service'
    """
    return " ".join(capitalcase(word) for word in snakecase(string).split("_") if word)
