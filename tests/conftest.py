"""Shared fixtures: a small Compute product with a Network resource."""

from pathlib import Path

import pytest
import yaml

from terraform_generator.api.types import Product, Property, PropertyType, Resource
from terraform_generator.provider.config import ProviderConfig

COMPUTE_BASE_URL = "https://www.googleapis.com/compute/v1/"


@pytest.fixture
def product() -> Product:
    return Product(name="Compute", base_url=COMPUTE_BASE_URL)


@pytest.fixture
def network(product: Product) -> Resource:
    """An immutable resource with one property that has its own update endpoint."""
    resource = Resource(
        name="Network",
        product=product,
        base_url="projects/{{project}}/global/networks",
        input=True,
        description="Represents a Network resource.",
    )
    resource.add_property(Property("name", PropertyType.STRING, required=True, input=True, description="Name."))
    resource.add_property(Property("description", PropertyType.STRING, description="An optional description."))
    resource.add_property(Property("autoCreateSubnetworks", PropertyType.BOOLEAN))
    routing = resource.add_property(
        Property(
            "routingConfig",
            PropertyType.NESTED_OBJECT,
            update_url="projects/{{project}}/global/networks/{{name}}",
        )
    )
    resource.add_property(
        Property("routingMode", PropertyType.ENUM, required=True, values=["REGIONAL", "GLOBAL"]),
        routing,
    )
    peerings = resource.add_property(
        Property("peerings", PropertyType.ARRAY, output=True, item_type=PropertyType.NESTED_OBJECT)
    )
    element = resource.add_property(Property("peerings_item", PropertyType.NESTED_OBJECT), peerings)
    resource.add_property(Property("state", PropertyType.STRING, output=True), element)
    resource.add_property(Property("name", PropertyType.STRING, output=True), element)
    resource.add_property(
        Property("subnetworks", PropertyType.ARRAY, output=True, item_type=PropertyType.STRING)
    )
    resource.add_property(Property("creationTimestamp", PropertyType.TIME, output=True))
    resource.add_property(Property("id", PropertyType.INTEGER, output=True))
    resource.add_property(Property("gatewayIPv4", PropertyType.STRING, output=True))
    return resource


@pytest.fixture
def config() -> ProviderConfig:
    return ProviderConfig(formatter=())


API_DOCUMENT = {
    "name": "Compute",
    "display_name": "Compute Engine",
    "base_url": COMPUTE_BASE_URL,
    "objects": [
        {
            "name": "Network",
            "base_url": "projects/{{project}}/global/networks",
            "input": True,
            "description": "Represents a Network resource.",
            "properties": [
                {"name": "name", "type": "String", "required": True, "input": True},
                {"name": "description", "type": "String"},
                {
                    "name": "routingConfig",
                    "type": "NestedObject",
                    "update_url": "projects/{{project}}/global/networks/{{name}}",
                    "properties": [
                        {"name": "routingMode", "type": "Enum", "required": True, "values": ["REGIONAL", "GLOBAL"]},
                    ],
                },
                {
                    "name": "peerings",
                    "type": "Array",
                    "output": True,
                    "item_type": {
                        "type": "NestedObject",
                        "properties": [
                            {"name": "name", "type": "String", "output": True},
                            {"name": "state", "type": "String", "output": True},
                        ],
                    },
                },
                {"name": "subnetworks", "type": "Array", "output": True, "item_type": "Api::Type::String"},
                {"name": "creationTimestamp", "type": "Time", "output": True},
            ],
        },
        {
            "name": "BackendBucket",
            "base_url": "projects/{{project}}/global/backendBuckets",
            "properties": [
                {"name": "name", "type": "String", "required": True},
                {"name": "bucketName", "type": "String", "required": True},
                {"name": "enableCdn", "type": "Boolean"},
            ],
        },
    ],
}


@pytest.fixture
def api_document() -> dict:
    return yaml.safe_load(yaml.safe_dump(API_DOCUMENT))


@pytest.fixture
def api_file(tmp_path: Path, api_document: dict) -> Path:
    path = tmp_path / "api.yaml"
    path.write_text(yaml.safe_dump(api_document), encoding="utf-8")
    return path
