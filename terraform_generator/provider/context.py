"""
Rendering context for one resource.

``build_resource_context`` runs every mapping rule once and freezes the
result. Both the resource file and its documentation are rendered from the
same ``ResourceContext``.
"""

from __future__ import annotations

import logging
from collections.abc import Set
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from terraform_generator.api.types import Product, Property, PropertyType, Resource
from terraform_generator.provider.config import ProviderConfig
from terraform_generator.provider.mutability import force_new, updatable
from terraform_generator.provider.properties import (
    effective_nested_properties,
    effective_properties,
    order_properties,
    property_key,
    unmatched_ignore_keys,
)
from terraform_generator.provider.type_mapper import (
    SchemaType,
    item_schema_type,
    property_schema_type,
)
from terraform_generator.provider.urls import (
    collection_url,
    format_to_regex,
    self_link_fragment,
    self_link_url,
    update_url,
    url_fields,
)
from terraform_generator.utils.string_case import pascalcase, snakecase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyView:
    """A property as it appears in the generated schema."""

    property: Property
    key: str
    name: str
    schema_name: str
    description: str
    schema_type: SchemaType
    item_type: SchemaType | None
    required: bool
    optional: bool
    computed: bool
    force_new: bool
    update_url: str | None
    values: tuple[str, ...]
    nested: tuple[PropertyView, ...]

    @property
    def is_nested(self) -> bool:
        """Whether the schema element is an object block, even if every field is ignored."""
        return self.property.is_a(PropertyType.NESTED_OBJECT) or self.property.item_object is not None

    @property
    def go_type(self) -> str:
        return self.schema_type.go_type

    @property
    def item_go_type(self) -> str | None:
        return self.item_type.go_type if self.item_type else None


@dataclass(frozen=True)
class ResourceContext:
    """Everything the templates need to describe one resource."""

    resource: Resource
    product: Product
    package_name: str
    product_name: str
    resource_name: str
    terraform_name: str
    go_name: str
    properties: tuple[PropertyView, ...]
    updatable: bool
    self_link_url: str
    self_link_regex: str
    collection_url: str
    update_url: str
    property_update_urls: MappingProxyType[str, str]
    import_fields: tuple[str, ...]

    @property
    def required_properties(self) -> tuple[PropertyView, ...]:
        return tuple(p for p in self.properties if p.required)

    @property
    def optional_properties(self) -> tuple[PropertyView, ...]:
        return tuple(p for p in self.properties if p.optional)

    @property
    def computed_properties(self) -> tuple[PropertyView, ...]:
        return tuple(p for p in self.properties if p.computed)

    @property
    def resource_file_name(self) -> str:
        return f"resource_{self.terraform_name}.go"

    @property
    def doc_file_name(self) -> str:
        return f"{self.terraform_name}.html.markdown"

    def as_template_context(self) -> dict[str, Any]:
        """Template variables; ``object`` is the resource, as in the templates."""
        return {
            "ctx": self,
            "object": self.resource,
            "product": self.product,
            "product_name": self.product_name,
            "resource_name": self.resource_name,
            "terraform_name": self.terraform_name,
            "properties": self.properties,
        }


def _build_property_view(prop: Property, resource: Resource, ignore: Set[str]) -> PropertyView:
    schema_type = property_schema_type(prop)
    nested = tuple(
        _build_property_view(child, resource, ignore)
        for child in order_properties(effective_nested_properties(ignore, prop))
    )
    return PropertyView(
        property=prop,
        key=property_key(prop),
        name=prop.name,
        schema_name=snakecase(prop.name),
        description=prop.description.strip(),
        schema_type=schema_type,
        item_type=item_schema_type(prop),
        required=prop.required,
        optional=not prop.required and not prop.output,
        computed=prop.output and not prop.required,
        force_new=force_new(prop, resource),
        update_url=update_url(resource, prop.update_url) if prop.update_url is not None else None,
        values=tuple(prop.values) if prop.is_a(PropertyType.ENUM) else (),
        nested=nested,
    )


def build_resource_context(resource: Resource, config: ProviderConfig) -> ResourceContext:
    """Apply filtering, ordering, type mapping, mutability and URL rules to a resource.

    Args:
        resource: The resource to describe.
        config: Supplies the ignore list for the resource and the Go package name.

    Returns:
        A frozen context shared by every template rendered for the resource.

    Raises:
        UnmappedTypeError: If any kept property has a type outside the known set.
        MalformedUrlTemplateError: If the self link is not a valid URL template.
    """
    ignore = config.ignore_for(resource.name)
    unmatched = unmatched_ignore_keys(ignore, resource)
    if unmatched:
        logger.warning(
            "Ignore keys for %s match no property: %s",
            resource.name,
            ", ".join(sorted(unmatched)),
        )

    top_level = effective_properties(ignore, resource.properties)
    views = tuple(_build_property_view(p, resource, ignore) for p in order_properties(top_level))

    all_kept = [view.property for view in _walk(views)]
    property_update_urls = {
        view.key: view.update_url for view in _walk(views) if view.update_url is not None
    }

    product_name = snakecase(resource.product.name)
    resource_name = snakecase(resource.name)
    fragment = self_link_fragment(resource)

    context = ResourceContext(
        resource=resource,
        product=resource.product,
        package_name=config.language_dir,
        product_name=product_name,
        resource_name=resource_name,
        terraform_name=f"{product_name}_{resource_name}",
        go_name=f"{pascalcase(resource.product.name)}{pascalcase(resource.name)}",
        properties=views,
        updatable=updatable(resource, all_kept),
        self_link_url=self_link_url(resource),
        self_link_regex=format_to_regex(fragment),
        collection_url=collection_url(resource),
        update_url=update_url(resource, resource.update_url),
        property_update_urls=MappingProxyType(property_update_urls),
        import_fields=tuple(url_fields(fragment)),
    )
    logger.debug(
        "Built context for %s: %d properties, updatable=%s",
        context.terraform_name,
        len(views),
        context.updatable,
    )
    return context


def _walk(views: tuple[PropertyView, ...]) -> list[PropertyView]:
    result: list[PropertyView] = []
    for view in views:
        result.append(view)
        result.extend(_walk(view.nested))
    return result
