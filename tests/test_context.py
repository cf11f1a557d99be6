"""Tests for building the per-resource rendering context."""

import logging
import re
from dataclasses import FrozenInstanceError

import pytest

from terraform_generator.api.types import Property, PropertyType, Resource
from terraform_generator.exceptions import UnmappedTypeError
from terraform_generator.provider.config import ProviderConfig
from terraform_generator.provider.context import build_resource_context
from terraform_generator.provider.type_mapper import SchemaType

from .conftest import COMPUTE_BASE_URL


class TestBuildResourceContext:
    def test_names(self, network: Resource, config: ProviderConfig) -> None:
        context = build_resource_context(network, config)
        assert context.product_name == "compute"
        assert context.resource_name == "network"
        assert context.terraform_name == "compute_network"
        assert context.go_name == "ComputeNetwork"
        assert context.resource_file_name == "resource_compute_network.go"
        assert context.doc_file_name == "compute_network.html.markdown"

    def test_properties_are_ordered(self, network: Resource, config: ProviderConfig) -> None:
        context = build_resource_context(network, config)
        assert [p.name for p in context.properties] == [
            "name",
            "description",
            "autoCreateSubnetworks",
            "routingConfig",
            "creationTimestamp",
            "gatewayIPv4",
            "id",
            "peerings",
            "subnetworks",
        ]

    def test_bands(self, network: Resource, config: ProviderConfig) -> None:
        context = build_resource_context(network, config)
        assert [p.name for p in context.required_properties] == ["name"]
        assert [p.name for p in context.optional_properties] == ["description", "autoCreateSubnetworks", "routingConfig"]
        assert len(context.computed_properties) == 5

    def test_property_views(self, network: Resource, config: ProviderConfig) -> None:
        views = {p.name: p for p in build_resource_context(network, config).properties}

        assert views["name"].schema_type is SchemaType.STRING
        assert views["name"].force_new
        assert views["description"].force_new
        assert not views["routingConfig"].force_new
        assert not views["creationTimestamp"].force_new

        assert views["autoCreateSubnetworks"].schema_name == "auto_create_subnetworks"
        assert views["creationTimestamp"].schema_name == "creation_timestamp"
        assert views["subnetworks"].item_type is SchemaType.STRING
        assert views["subnetworks"].item_go_type == "schema.TypeString"
        assert views["routingConfig"].go_type == "schema.TypeList"

    def test_nested_views_are_filtered_and_ordered(self, network: Resource) -> None:
        config = ProviderConfig(ignore={"Network": frozenset({"peerings.*.state"})}, formatter=())
        views = {p.name: p for p in build_resource_context(network, config).properties}

        assert [p.name for p in views["peerings"].nested] == ["name"]
        assert [p.key for p in views["routingConfig"].nested] == ["routingConfig.routingMode"]
        assert views["routingConfig"].nested[0].values == ("REGIONAL", "GLOBAL")
        assert views["routingConfig"].is_nested
        assert not views["subnetworks"].is_nested

    def test_ignore_is_scoped_per_resource(self, network: Resource) -> None:
        config = ProviderConfig(ignore={"Subnetwork": frozenset({"description"})}, formatter=())
        names = [p.name for p in build_resource_context(network, config).properties]
        assert "description" in names

    def test_urls(self, network: Resource, config: ProviderConfig) -> None:
        context = build_resource_context(network, config)
        self_link = f"{COMPUTE_BASE_URL}projects/{{{{project}}}}/global/networks/{{{{name}}}}"
        assert context.self_link_url == self_link
        assert context.collection_url == f"{COMPUTE_BASE_URL}projects/{{{{project}}}}/global/networks"
        assert context.update_url == self_link
        assert dict(context.property_update_urls) == {"routingConfig": self_link}
        assert context.import_fields == ("project", "name")

        match = re.fullmatch(context.self_link_regex, "projects/p1/global/networks/n1")
        assert match is not None
        assert match.groupdict() == {"project": "p1", "name": "n1"}

    def test_updatable(self, network: Resource, config: ProviderConfig) -> None:
        assert build_resource_context(network, config).updatable

    def test_ignoring_update_path_makes_resource_immutable(self, network: Resource) -> None:
        config = ProviderConfig(ignore={"Network": frozenset({"routingConfig"})}, formatter=())
        context = build_resource_context(network, config)
        assert not context.updatable
        assert dict(context.property_update_urls) == {}

    def test_context_is_frozen(self, network: Resource, config: ProviderConfig) -> None:
        context = build_resource_context(network, config)
        with pytest.raises(FrozenInstanceError):
            context.updatable = False  # type: ignore[misc]
        with pytest.raises(TypeError):
            context.property_update_urls["x"] = "y"  # type: ignore[index]

    def test_deterministic(self, network: Resource, config: ProviderConfig) -> None:
        first = build_resource_context(network, config)
        second = build_resource_context(network, config)
        assert [p.key for p in first.properties] == [p.key for p in second.properties]
        assert first.self_link_regex == second.self_link_regex

    def test_unmatched_ignore_keys_are_logged(self, network: Resource, caplog: pytest.LogCaptureFixture) -> None:
        config = ProviderConfig(ignore={"Network": frozenset({"nope", "description"})}, formatter=())
        with caplog.at_level(logging.WARNING, logger="terraform_generator.provider.context"):
            context = build_resource_context(network, config)
        assert "description" not in [p.name for p in context.properties]
        assert "nope" in caplog.text

    def test_unknown_type_aborts(self, network: Resource, config: ProviderConfig) -> None:
        network.add_property(Property("fingerprint", "Fingerprint"))
        with pytest.raises(UnmappedTypeError, match="fingerprint"):
            build_resource_context(network, config)

    def test_ignored_unknown_type_is_skipped(self, network: Resource) -> None:
        network.add_property(Property("fingerprint", "Fingerprint"))
        config = ProviderConfig(ignore={"Network": frozenset({"fingerprint"})}, formatter=())
        names = [p.name for p in build_resource_context(network, config).properties]
        assert "fingerprint" not in names

    def test_does_not_mutate_resource(self, network: Resource, config: ProviderConfig) -> None:
        before = [(p.index, p.parent_index, p.name) for p in network.all_properties()]
        build_resource_context(network, config)
        assert [(p.index, p.parent_index, p.name) for p in network.all_properties()] == before

    def test_enum_values_only_for_enums(self, network: Resource, config: ProviderConfig) -> None:
        network.add_property(Property("tags", PropertyType.STRING, values=["ignored"]))
        views = {p.name: p for p in build_resource_context(network, config).properties}
        assert views["tags"].values == ()
