"""
Type mapping between API property types and Terraform schema types.
"""

from enum import Enum
from typing import Final

from terraform_generator.api.types import Property, PropertyType
from terraform_generator.exceptions import UnmappedTypeError


class SchemaType(str, Enum):
    """Terraform schema value types."""

    BOOL = "bool"
    FLOAT = "float"
    INT = "int"
    STRING = "string"
    LIST = "list"
    MAP = "map"

    @property
    def go_type(self) -> str:
        """The Terraform plugin SDK identifier, e.g. ``schema.TypeBool``."""
        return f"schema.Type{self.value.capitalize()}"


TF_TYPES: Final[dict[PropertyType, SchemaType]] = {
    PropertyType.BOOLEAN: SchemaType.BOOL,
    PropertyType.DOUBLE: SchemaType.FLOAT,
    PropertyType.INTEGER: SchemaType.INT,
    PropertyType.STRING: SchemaType.STRING,
    PropertyType.TIME: SchemaType.STRING,
    PropertyType.ENUM: SchemaType.STRING,
    PropertyType.RESOURCE_REF: SchemaType.STRING,
    PropertyType.NESTED_OBJECT: SchemaType.LIST,
    PropertyType.ARRAY: SchemaType.LIST,
    PropertyType.NAME_VALUES: SchemaType.MAP,
}

_missing = set(PropertyType) - TF_TYPES.keys()
if _missing:
    msg = f"TF_TYPES has no entry for: {sorted(t.value for t in _missing)}"
    raise RuntimeError(msg)


def map_type(property_type: PropertyType | str, property_name: str | None = None) -> SchemaType:
    """Map an API property type to its Terraform schema type.

    Accepts a ``PropertyType`` or a type name, including the bare
    ``String``/``Api::Type::String`` name used for anonymous array elements.

    Raises:
        UnmappedTypeError: If the type is not one of the known property types.
    """
    if not isinstance(property_type, PropertyType):
        if not isinstance(property_type, str):
            raise UnmappedTypeError(property_type, property_name)
        try:
            property_type = PropertyType.from_name(property_type)
        except ValueError:
            raise UnmappedTypeError(property_type, property_name) from None
    return TF_TYPES[property_type]


def property_schema_type(prop: Property) -> SchemaType:
    """Schema type of a property.

    Args:
        prop: The property to map; its name is reported if the type is unknown.

    Returns:
        The Terraform schema type for ``prop.type``.

    Raises:
        UnmappedTypeError: If the property type has no schema type.
    """
    return map_type(prop.type, prop.name)


def item_schema_type(prop: Property) -> SchemaType | None:
    """Schema type of an Array's elements, or None for non-arrays."""
    if not prop.is_a(PropertyType.ARRAY) or prop.item_type is None:
        return None
    return map_type(prop.item_type, f"{prop.name}[]")
