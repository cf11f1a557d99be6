"""
Terraform Provider Generation Module

This module holds the mapping rules (types, property keys and ordering,
mutability, URLs) and the Jinja2-based generator that renders resources
and their documentation.
"""

from .config import ProviderConfig, load_config
from .context import PropertyView, ResourceContext, build_resource_context
from .mutability import force_new, updatable
from .properties import (
    effective_nested_properties,
    effective_properties,
    order_properties,
    property_key,
    titlelize_property,
    unmatched_ignore_keys,
)
from .template_engine import GeneratedResource, TerraformGenerator, TerraformTemplateEngine
from .type_mapper import TF_TYPES, SchemaType, map_type
from .urls import (
    collection_url,
    format_to_regex,
    self_link_url,
    update_url,
    validate_url_template,
)

__all__ = [
    "TF_TYPES",
    "GeneratedResource",
    "PropertyView",
    "ProviderConfig",
    "ResourceContext",
    "SchemaType",
    "TerraformGenerator",
    "TerraformTemplateEngine",
    "build_resource_context",
    "collection_url",
    "effective_nested_properties",
    "effective_properties",
    "force_new",
    "format_to_regex",
    "load_config",
    "map_type",
    "order_properties",
    "property_key",
    "self_link_url",
    "titlelize_property",
    "unmatched_ignore_keys",
    "update_url",
    "updatable",
    "validate_url_template",
]
