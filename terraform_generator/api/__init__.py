"""
API Description Module

This module provides the product/resource/property graph and the loader that
builds it from YAML or JSON API descriptions.
"""

from .loader import DescriptionLoader
from .types import (
    ApiDescription,
    Product,
    Property,
    PropertyArena,
    PropertyType,
    Resource,
)

__all__ = [
    "ApiDescription",
    "DescriptionLoader",
    "Product",
    "Property",
    "PropertyArena",
    "PropertyType",
    "Resource",
]
