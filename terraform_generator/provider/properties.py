"""
Property keys, ignore-list filtering and schema ordering.
"""

from collections.abc import Iterable, Set

from terraform_generator.api.types import Property, PropertyType, Resource

ARRAY_WILDCARD = "*"


def property_key(prop: Property) -> str:
    """Construct the key identifying a property within its resource.

    The key takes one of these forms:

    - ``foo``: top-level property ``foo``
    - ``foo.bar``: property ``bar`` nested under property ``foo``
    - ``foo.*.bar``: property ``bar`` of every nested object in list ``foo``

    Keys are only unique within a single resource.
    """
    parent = prop.parent
    if parent is None:
        return prop.name
    if parent.is_a(PropertyType.ARRAY):
        return f"{property_key(parent)}.{ARRAY_WILDCARD}"
    return f"{property_key(parent)}.{prop.name}"


def effective_properties(ignore: Set[str], properties: Iterable[Property]) -> list[Property]:
    """Return the properties without those ignored.

    Args:
        ignore: Property keys configured to be left out of the schema.
        properties: The candidates, typically siblings under one parent.

    Returns:
        The properties whose key is not in ``ignore``, in their original order.
    """
    return [p for p in properties if property_key(p) not in ignore]


def effective_nested_properties(ignore: Set[str], prop: Property) -> list[Property]:
    """Return the nested properties without those ignored.

    An empty list is returned if the property is not a NestedObject or an
    Array of NestedObjects.
    """
    if prop.is_a(PropertyType.NESTED_OBJECT):
        return effective_properties(ignore, prop.properties)
    item = prop.item_object
    if item is not None:
        return effective_properties(ignore, item.properties)
    return []


def unmatched_ignore_keys(ignore: Set[str], resource: Resource) -> set[str]:
    """Return configured ignore keys that match no property of the resource."""
    known = {property_key(p) for p in resource.all_properties()}
    return set(ignore) - known


def order_properties(properties: Iterable[Property]) -> list[Property]:
    """Sort properties in the order they appear in the Terraform schema.

    Required properties come first, sorted by name; then optional properties
    in declaration order; then computed properties, sorted by name.
    """
    properties = list(properties)
    required = sorted((p for p in properties if p.required), key=lambda p: p.name)
    optional = [p for p in properties if not p.required and not p.output]
    computed = sorted((p for p in properties if p.output and not p.required), key=lambda p: p.name)
    return required + optional + computed


def titlelize_property(prop: Property | str) -> str:
    """Capitalize the first letter of a property name.

    E.g. ``creationTimestamp`` becomes ``CreationTimestamp``.

    Args:
        prop: The property, or just its name (as the template filter receives it).

    Returns:
        The name with its first letter upper-cased and the rest untouched.
    """
    name = prop if isinstance(prop, str) else prop.name
    return name[:1].upper() + name[1:]
