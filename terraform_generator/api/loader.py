"""
API description loader.

Builds the product/resource/property graph from a YAML or JSON document.
The loader checks only what it needs to build the graph; property types it
does not recognise are kept as strings and rejected later by the type mapper.
"""

import json
from pathlib import Path
from typing import Any, Final

import yaml

from terraform_generator.api.types import (
    ApiDescription,
    Product,
    Property,
    PropertyType,
    Resource,
)
from terraform_generator.exceptions import DescriptionError

_YAML_SUFFIXES: Final = frozenset({".yaml", ".yml"})
_JSON_SUFFIXES: Final = frozenset({".json"})

_PROPERTY_FLAGS: Final = ("required", "output", "input")


def _coerce_type(type_name: Any, where: str) -> PropertyType | str:  # noqa: ANN401
    if not isinstance(type_name, str) or not type_name:
        msg = f"{where}: 'type' must be a non-empty string"
        raise DescriptionError(msg)
    try:
        return PropertyType.from_name(type_name)
    except ValueError:
        return type_name


def _require_mapping(data: Any, where: str) -> dict[str, Any]:  # noqa: ANN401
    if not isinstance(data, dict):
        msg = f"{where}: expected a mapping, got {type(data).__name__}"
        raise DescriptionError(msg)
    return data


def _require_name(data: dict[str, Any], where: str) -> str:
    name = data.get("name")
    if not isinstance(name, str) or not name:
        msg = f"{where}: missing 'name'"
        raise DescriptionError(msg)
    return name


def _optional_text(data: dict[str, Any], key: str, where: str) -> str:
    """Read an optional string field; an explicit null reads as empty."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"{where}: '{key}' must be a string"
        raise DescriptionError(msg)
    return value


def _optional_url(data: dict[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        msg = f"{where}: '{key}' must be a string"
        raise DescriptionError(msg)
    return value


def _string_list(data: dict[str, Any], key: str, where: str) -> list[str]:
    """Read an optional list of strings; an explicit null reads as empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        msg = f"{where}: '{key}' must be a list of strings"
        raise DescriptionError(msg)
    return list(value)


class DescriptionLoader:
    """Loads API descriptions into ``ApiDescription`` graphs."""

    def parse_file(self, file_path: str | Path) -> ApiDescription:
        """Parse an API description from a ``.yaml``/``.yml`` or ``.json`` file."""
        path = Path(file_path)
        suffix = path.suffix.lower()
        with path.open(encoding="utf-8") as f:
            if suffix in _YAML_SUFFIXES:
                data = yaml.safe_load(f)
            elif suffix in _JSON_SUFFIXES:
                data = json.load(f)
            else:
                msg = f"Unsupported API description format: {path.name}"
                raise DescriptionError(msg)
        return self.parse_dict(data)

    def parse_dict(self, data: Any) -> ApiDescription:  # noqa: ANN401
        """Parse an API description from an already-decoded document."""
        data = _require_mapping(data, "product")
        name = _require_name(data, "product")
        base_url = data.get("base_url")
        if not isinstance(base_url, str):
            msg = f"product '{name}': missing 'base_url'"
            raise DescriptionError(msg)

        product = Product(
            name=name,
            base_url=base_url,
            display_name=data.get("display_name"),
            description=_optional_text(data, "description", f"product '{name}'"),
        )

        objects = data.get("objects")
        if objects is None:
            objects = []
        if not isinstance(objects, list):
            msg = f"product '{name}': 'objects' must be a list"
            raise DescriptionError(msg)

        resources = [self._parse_resource(product, obj) for obj in objects]
        return ApiDescription(product=product, resources=resources)

    def _parse_resource(self, product: Product, data: Any) -> Resource:  # noqa: ANN401
        data = _require_mapping(data, f"product '{product.name}' object")
        name = _require_name(data, f"product '{product.name}' object")
        where = f"resource '{name}'"

        base_url = data.get("base_url")
        if not isinstance(base_url, str):
            msg = f"{where}: missing 'base_url'"
            raise DescriptionError(msg)

        resource = Resource(
            name=name,
            product=product,
            base_url=base_url,
            input=bool(data.get("input", False)),
            description=_optional_text(data, "description", where),
            self_link=_optional_url(data, "self_link", where),
            update_url=_optional_url(data, "update_url", where),
        )
        self._parse_properties(resource, data.get("properties"), None, where)
        return resource

    def _parse_properties(
        self,
        resource: Resource,
        properties_data: Any,  # noqa: ANN401
        parent: Property | None,
        where: str,
    ) -> None:
        if properties_data is None:
            return
        if not isinstance(properties_data, list):
            msg = f"{where}: 'properties' must be a list"
            raise DescriptionError(msg)
        for prop_data in properties_data:
            self._parse_property(resource, prop_data, parent, where)

    def _parse_property(
        self,
        resource: Resource,
        data: Any,  # noqa: ANN401
        parent: Property | None,
        where: str,
    ) -> Property:
        data = _require_mapping(data, f"{where} property")
        name = _require_name(data, f"{where} property")
        where = f"{where} property '{name}'"
        prop_type = _coerce_type(data.get("type"), where)

        item_data = data.get("item_type")
        item_type: PropertyType | str | None = None
        if isinstance(item_data, dict):
            item_type = _coerce_type(item_data.get("type"), f"{where} item_type")
        elif item_data is not None:
            item_type = _coerce_type(item_data, f"{where} item_type")

        prop = resource.add_property(
            Property(
                name=name,
                type=prop_type,
                description=_optional_text(data, "description", where),
                update_url=_optional_url(data, "update_url", where),
                values=_string_list(data, "values", where),
                resource=data.get("resource"),
                item_type=item_type,
                **{flag: bool(data.get(flag, False)) for flag in _PROPERTY_FLAGS},
            ),
            parent,
        )

        if prop.is_a(PropertyType.NESTED_OBJECT):
            self._parse_properties(resource, data.get("properties"), prop, where)
        elif isinstance(item_data, dict) and item_type == PropertyType.NESTED_OBJECT:
            # The element object is its own node so its children resolve to 'name.*.child'.
            element = resource.add_property(
                Property(
                    name=f"{name}_item",
                    type=PropertyType.NESTED_OBJECT,
                    description=_optional_text(item_data, "description", f"{where} item_type"),
                ),
                prop,
            )
            self._parse_properties(resource, item_data.get("properties"), element, f"{where} item")
        return prop
