"""
Endpoint URLs for resources.

URL fragments may contain ``{{field}}`` markers; they are joined by plain
concatenation, without inserting separators.
"""

import re
from typing import Final

from terraform_generator.api.types import Resource
from terraform_generator.exceptions import MalformedUrlTemplateError

_MARKER_PATTERN: Final = re.compile(r"\{\{(\w+)\}\}")
_LOOSE_MARKER_PATTERN: Final = re.compile(r"\{\{([^{}]*)\}\}")

NAME_MARKER: Final = "{{name}}"


def _collapse(fragment: str) -> str:
    """Join the stripped, non-empty lines of a multi-line URL fragment."""
    return "".join(line.strip() for line in fragment.split("\n") if line.strip())


def self_link_fragment(resource: Resource) -> str:
    """The URL fragment addressing a single instance of the resource."""
    if resource.self_link is not None:
        return _collapse(resource.self_link)
    return f"{_collapse(resource.base_url)}/{NAME_MARKER}"


def self_link_url(resource: Resource) -> str:
    """Absolute URL of a single resource instance.

    Args:
        resource: The resource whose product base URL prefixes the fragment.

    Returns:
        The product base URL followed by the self link fragment, unchanged.
    """
    return resource.product.base_url + self_link_fragment(resource)


def collection_url(resource: Resource) -> str:
    """Absolute URL of the collection new instances are created in.

    Args:
        resource: The resource whose ``base_url`` names the collection.

    Returns:
        The product base URL followed by the collapsed resource base URL.
    """
    return resource.product.base_url + _collapse(resource.base_url)


def update_url(resource: Resource, url_part: str | None) -> str:
    """URL of an update call.

    Args:
        resource: The resource being updated.
        url_part: A dedicated update endpoint relative to the product base URL,
            or None to update through the self link.

    Returns:
        The absolute update URL.
    """
    if url_part is None:
        return self_link_url(resource)
    return resource.product.base_url + url_part


def url_fields(template: str) -> list[str]:
    """Field names referenced by a URL template, in order of appearance."""
    return _MARKER_PATTERN.findall(template)


def validate_url_template(template: str) -> None:
    """Check that every brace in the template belongs to a ``{{identifier}}`` marker.

    Raises:
        MalformedUrlTemplateError: On stray braces, empty or non-word
            identifiers, or an identifier used more than once.
    """
    for match in _LOOSE_MARKER_PATTERN.finditer(template):
        if not _MARKER_PATTERN.fullmatch(match.group(0)):
            raise MalformedUrlTemplateError(template, f"invalid field marker {match.group(0)!r}")

    remainder = _MARKER_PATTERN.sub("", template)
    if "{" in remainder or "}" in remainder:
        raise MalformedUrlTemplateError(template, "unbalanced braces")

    seen: set[str] = set()
    for name in url_fields(template):
        if name in seen:
            raise MalformedUrlTemplateError(template, f"field '{name}' appears more than once")
        seen.add(name)


def format_to_regex(template: str) -> str:
    """Transform a format string with field markers into a regex with capture groups.

    For instance::

        projects/{{project}}/global/networks/{{name}}

    is transformed to::

        projects/(?P<project>[^/]+)/global/networks/(?P<name>[^/]+)

    Text outside the markers is matched literally.
    """
    validate_url_template(template)

    parts: list[str] = []
    position = 0
    for match in _MARKER_PATTERN.finditer(template):
        parts.append(re.escape(template[position : match.start()]))
        parts.append(f"(?P<{match.group(1)}>[^/]+)")
        position = match.end()
    parts.append(re.escape(template[position:]))
    return "".join(parts)
