"""
Terraform Resource Generator

A Jinja2-based generator that produces Terraform provider resources and their
reference documentation from declarative API descriptions.
"""

from .api import ApiDescription, DescriptionLoader, Product, Property, PropertyType, Resource
from .provider import ProviderConfig, TerraformGenerator, TerraformTemplateEngine

__version__ = "1.0.0"

__all__ = [
    "ApiDescription",
    "DescriptionLoader",
    "Product",
    "Property",
    "PropertyType",
    "ProviderConfig",
    "Resource",
    "TerraformGenerator",
    "TerraformTemplateEngine",
]
